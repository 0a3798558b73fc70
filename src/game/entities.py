"""
Game Entities
=============

Paddle, Ball and Block share one record type, `Entity`, tagged by
`EntityKind`. Each capability (update, draw, set_sprite, bounding box) is
dispatched through a per-kind table, so adding a kind means adding a row
to every table.

Coordinates are virtual units, (x, y) is the top-left corner, velocities
are units per second.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Callable, Dict, FrozenSet, Hashable, Tuple

import pygame

from .collision import BoundingBox
from .renderer import Renderer
from .sprites import (
    COLOR_MASK, MAGENTA, MEDIUM, PADDLE_HEIGHT, PADDLE_WIDTHS, SIZE_MASK,
    SpriteAtlas, ball_key, block_key, paddle_key,
)


class EntityKind(Enum):
    PADDLE = auto()
    BALL = auto()
    BLOCK = auto()


class Events(Flag):
    """Things an entity update reports back to the game state."""
    NONE = 0
    WALL_HIT = auto()


@dataclass
class Frame:
    """Per-frame inputs an entity update may read."""
    dt: float
    width: float
    height: float
    keys_down: FrozenSet[Hashable] = frozenset()
    paddle_speed: float = 0.0


@dataclass
class Entity:
    """
    A movable, drawable game object.

    Attributes:
        kind: PADDLE, BALL or BLOCK
        x, y: Top-left position
        width, height: Bounding box size (both > 0)
        dx, dy: Velocity
        sprite: Atlas key used by draw()
        color: Paddle color flag, ball color 1..7 or block color 1..5
        size: Paddle size flag (paddles only)
        tier: Block tier 0..3 (blocks only)
        inplay: False once a block is destroyed; it stays in its list
            but is skipped by collision and draw
    """
    kind: EntityKind
    x: float
    y: float
    width: float
    height: float
    dx: float = 0.0
    dy: float = 0.0
    sprite: int = 0
    color: int = 0
    size: int = 0
    tier: int = 0
    inplay: bool = True
    spawn: Tuple[float, float] = field(default=(0.0, 0.0), repr=False)

    def __post_init__(self):
        assert self.width > 0 and self.height > 0, "Entity size must be positive"

    @property
    def bbox(self) -> BoundingBox:
        return BoundingBox(self.x, self.y, self.width, self.height)

    @property
    def is_inert(self) -> bool:
        return self.dx == 0 and self.dy == 0

    def update(self, frame: Frame) -> Events:
        """Advance one frame; returns what happened (e.g. a wall hit)."""
        return _UPDATE[self.kind](self, frame)

    def draw(self, atlas: SpriteAtlas, renderer: Renderer) -> None:
        _DRAW[self.kind](self, atlas, renderer)

    def set_sprite(self, key: int) -> None:
        """Switch to another sprite key, updating kind-specific fields."""
        _SET_SPRITE[self.kind](self, key)

    def reset(self) -> None:
        """Return to the spawn position with zero velocity."""
        self.x, self.y = self.spawn
        self.dx = 0.0
        self.dy = 0.0


# =============================================================================
# FACTORIES
# =============================================================================

def new_paddle(width: float, height: float, color: int = MAGENTA, size: int = MEDIUM,
               y_offset: float = 32) -> Entity:
    """Paddle centered near the bottom of a width x height playfield."""
    paddle_width = PADDLE_WIDTHS[size]
    x = (width - paddle_width) / 2
    y = height - y_offset
    return Entity(
        EntityKind.PADDLE, x, y, paddle_width, PADDLE_HEIGHT,
        sprite=paddle_key(color, size), color=color, size=size, spawn=(x, y),
    )


def new_ball(x: float, y: float, size: float = 8, color: int = 1) -> Entity:
    """Inert ball whose spawn point is (x, y)."""
    return Entity(
        EntityKind.BALL, x, y, size, size,
        sprite=ball_key(color), color=color, spawn=(x, y),
    )


def new_block(x: float, y: float, color: int = 1, tier: int = 0,
              width: float = 32, height: float = 16) -> Entity:
    """In-play block."""
    return Entity(
        EntityKind.BLOCK, x, y, width, height,
        sprite=block_key(color, tier), color=color, tier=tier, spawn=(x, y),
    )


# =============================================================================
# UPDATE
# =============================================================================

def _update_paddle(paddle: Entity, frame: Frame) -> Events:
    # Velocity is exactly -speed, 0 or +speed
    if pygame.K_LEFT in frame.keys_down:
        paddle.dx = -frame.paddle_speed
    elif pygame.K_RIGHT in frame.keys_down:
        paddle.dx = frame.paddle_speed
    else:
        paddle.dx = 0.0

    if paddle.dx < 0:
        paddle.x = max(0.0, paddle.x + paddle.dx * frame.dt)
    elif paddle.dx > 0:
        paddle.x = min(frame.width, paddle.x + paddle.dx * frame.dt)
    return Events.NONE


def _update_ball(ball: Entity, frame: Frame) -> Events:
    ball.x += ball.dx * frame.dt
    ball.y += ball.dy * frame.dt

    events = Events.NONE
    # Only reverse while still heading out, so a ball that is outside for
    # more than one frame does not flip back and forth.
    if (ball.x < 0 and ball.dx < 0) or (ball.x > frame.width and ball.dx > 0):
        ball.dx = -ball.dx
        events |= Events.WALL_HIT
    if (ball.y < 0 and ball.dy < 0) or (ball.y > frame.height and ball.dy > 0):
        ball.dy = -ball.dy
        events |= Events.WALL_HIT
    return events


def _update_static(entity: Entity, frame: Frame) -> Events:
    return Events.NONE


_UPDATE: Dict[EntityKind, Callable[[Entity, Frame], Events]] = {
    EntityKind.PADDLE: _update_paddle,
    EntityKind.BALL: _update_ball,
    EntityKind.BLOCK: _update_static,
}


# =============================================================================
# DRAW
# =============================================================================

def _draw_sprite(entity: Entity, atlas: SpriteAtlas, renderer: Renderer) -> None:
    atlas.draw_sprite(renderer, entity.sprite, entity.x, entity.y)


def _draw_block(block: Entity, atlas: SpriteAtlas, renderer: Renderer) -> None:
    if block.inplay:
        atlas.draw_sprite(renderer, block.sprite, block.x, block.y)


_DRAW: Dict[EntityKind, Callable[[Entity, SpriteAtlas, Renderer], None]] = {
    EntityKind.PADDLE: _draw_sprite,
    EntityKind.BALL: _draw_sprite,
    EntityKind.BLOCK: _draw_block,
}


# =============================================================================
# SET SPRITE
# =============================================================================

def _set_paddle_sprite(paddle: Entity, key: int) -> None:
    paddle.sprite = key
    paddle.color = key & COLOR_MASK
    paddle.size = key & SIZE_MASK
    paddle.width = PADDLE_WIDTHS[paddle.size]


def _set_plain_sprite(entity: Entity, key: int) -> None:
    entity.sprite = key


_SET_SPRITE: Dict[EntityKind, Callable[[Entity, int], None]] = {
    EntityKind.PADDLE: _set_paddle_sprite,
    EntityKind.BALL: _set_plain_sprite,
    EntityKind.BLOCK: _set_plain_sprite,
}
