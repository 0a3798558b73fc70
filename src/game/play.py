"""
Play State
==========

The breakout round: paddle, ball and a level of blocks.

Each frame, in order:
    1. commands (pause, quit, paddle sprite keys, launch)
    2. paddle update (Left/Right, clamped to the playfield)
    3. ball update (side and top walls)
    4. fall check (health, ball reset, game over)
    5. paddle/ball collision
    6. ball/block collisions, scoring
    7. level clear check
"""

from typing import TYPE_CHECKING, List, Optional

import pygame

from .assets import load_background, load_fonts, load_sounds
from .base_state import BaseState, StateResult
from .collision import Side, collide
from .entities import Entity, Events, Frame, new_ball, new_paddle
from .level_maker import create_map
from .registry import FontName, SoundName
from .sprites import PADDLE_COLORS, PADDLE_SIZES, paddle_key
from ..utils.logger import get_logger
from ..visualizer.hud import PlayHUD

if TYPE_CHECKING:
    from .context import GameContext
    from .renderer import Renderer

logger = get_logger(__name__)


PLAY_SOUNDS = (
    SoundName.PADDLE_HIT,
    SoundName.WALL_HIT,
    SoundName.BRICK_HIT,
    SoundName.HURT,
    SoundName.VICTORY,
    SoundName.PAUSE,
    SoundName.MUSIC,
)

# Debug keys: 1-4 pick the paddle color, 5-8 the paddle size
COLOR_KEYS = dict(zip((pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4), PADDLE_COLORS))
SIZE_KEYS = dict(zip((pygame.K_5, pygame.K_6, pygame.K_7, pygame.K_8), PADDLE_SIZES))


def block_score(block: Entity) -> int:
    """Points for destroying a block."""
    return block.tier * 200 + block.color * 25


class PlayState(BaseState):
    """
    One game of breakout.

    Attributes:
        level: Current level (1-based)
        score: Points so far
        health: Remaining lives; 0 ends the game
        paddle, ball: Created on enter()
        blocks: Blocks of the current level, destroyed ones included
    """

    def __init__(self, level: int = 1, score: int = 0, health: Optional[int] = None):
        self.level = level
        self.score = score
        self._initial_health = health
        self.health = 0

        self.paddle: Optional[Entity] = None
        self.ball: Optional[Entity] = None
        self.blocks: List[Entity] = []
        self.hud: Optional[PlayHUD] = None

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def enter(self, ctx: 'GameContext') -> None:
        config = ctx.config
        registry = ctx.registry

        load_sounds(registry, ctx.loader, config, PLAY_SOUNDS)
        load_fonts(registry, ctx.loader, config)
        load_background(registry, ctx.loader, config)

        if self._initial_health is None:
            self.health = config.INITIAL_HEALTH
        else:
            self.health = self._initial_health

        self.paddle = new_paddle(config.VIRTUAL_WIDTH, config.VIRTUAL_HEIGHT,
                                 y_offset=config.PADDLE_Y_OFFSET)
        self.ball = new_ball(
            (config.VIRTUAL_WIDTH - config.BALL_SIZE) / 2,
            self.paddle.y - config.BALL_SIZE,
            size=config.BALL_SIZE,
        )
        self.hud = PlayHUD(config)

        self._new_level(ctx)
        registry.get_sound(SoundName.MUSIC).play_bgm()
        logger.info(f"Game started at level {self.level} with {self.health} health")

    def exit(self, ctx: 'GameContext') -> None:
        ctx.registry.stop_sounds()
        ctx.registry.clear()

    def _new_level(self, ctx: 'GameContext') -> None:
        """Generate the blocks for self.level and re-register every entity."""
        config = ctx.config
        self.blocks = create_map(
            self.level, ctx.rng, config.VIRTUAL_WIDTH,
            block_width=config.BLOCK_WIDTH, block_height=config.BLOCK_HEIGHT,
        )
        self.ball.reset()

        registry = ctx.registry
        registry.clear_objects()
        for i, block in enumerate(self.blocks):
            registry.add_object(f"block_{i}", block)
        registry.add_object('paddle', self.paddle)
        registry.add_object('ball', self.ball)
        self._sync_values(ctx)
        logger.debug(f"Level {self.level}: {len(self.blocks)} blocks")

    def _sync_values(self, ctx: 'GameContext') -> None:
        ctx.registry.add_value('score', self.score)
        ctx.registry.add_value('health', self.health)
        ctx.registry.add_value('level', self.level)

    # =========================================================================
    # UPDATE
    # =========================================================================

    def update(self, ctx: 'GameContext', dt: float) -> StateResult:
        config = ctx.config
        registry = ctx.registry
        paddle, ball = self.paddle, self.ball

        # 1. Commands
        if ctx.pressed(pygame.K_x):
            return StateResult.pop()
        if ctx.pressed(pygame.K_p):
            # Import here to avoid circular imports
            from .pause import PauseState
            return StateResult.push(PauseState())

        for key, color in COLOR_KEYS.items():
            if ctx.pressed(key):
                paddle.set_sprite(paddle_key(color, paddle.size))
        for key, size in SIZE_KEYS.items():
            if ctx.pressed(key):
                paddle.set_sprite(paddle_key(paddle.color, size))

        if ctx.pressed(pygame.K_SPACE) and ball.is_inert:
            self.launch_ball(ctx)

        frame = Frame(dt, config.VIRTUAL_WIDTH, config.VIRTUAL_HEIGHT,
                      ctx.keys_down, config.PADDLE_SPEED)

        # 2-3. Movement
        paddle.update(frame)
        if ball.update(frame) & Events.WALL_HIT:
            registry.get_sound(SoundName.WALL_HIT).play_once()

        # 4. Fall
        if ball.y > config.VIRTUAL_HEIGHT:
            result = self._lose_life(ctx)
            if result is not None:
                return result

        # 5. Paddle
        side = collide(paddle.bbox, ball.bbox)
        if Side.TOP in side and ball.dy > 0:
            ball.dy = -ball.dy
            registry.get_sound(SoundName.PADDLE_HIT).play_once()

        # 6. Blocks
        for block in self.blocks:
            if not block.inplay:
                continue
            self.hit_block(ctx, block)

        # 7. Level clear
        if not any(block.inplay for block in self.blocks):
            self.level += 1
            registry.get_sound(SoundName.VICTORY).play()
            logger.info(f"Level cleared, advancing to level {self.level} (score {self.score})")
            self._new_level(ctx)

        self._sync_values(ctx)
        return StateResult.noop()

    def launch_ball(self, ctx: 'GameContext') -> None:
        """Give the inert ball a random up-going velocity."""
        config = ctx.config
        self.ball.dx = float(ctx.rng.uniform(-config.BALL_LAUNCH_DX, config.BALL_LAUNCH_DX))
        self.ball.dy = -float(ctx.rng.uniform(config.BALL_LAUNCH_DY_MIN, config.BALL_LAUNCH_DY_MAX))
        logger.debug(f"Ball launched with velocity ({self.ball.dx:.1f}, {self.ball.dy:.1f})")

    def hit_block(self, ctx: 'GameContext', block: Entity) -> bool:
        """
        Resolve a ball/block collision.

        Returns:
            True if the block was hit (and is now out of play)
        """
        ball = self.ball
        side = collide(ball.bbox, block.bbox)
        if not side:
            return False

        block.inplay = False
        self.score += block_score(block)
        ctx.registry.get_sound(SoundName.BRICK_HIT).play()

        if (Side.TOP in side and ball.dy < 0) or (Side.BOTTOM in side and ball.dy > 0):
            ball.dy = -ball.dy
        if (Side.LEFT in side and ball.dx < 0) or (Side.RIGHT in side and ball.dx > 0):
            ball.dx = -ball.dx
        return True

    def _lose_life(self, ctx: 'GameContext') -> Optional[StateResult]:
        self.health -= 1
        ctx.registry.get_sound(SoundName.HURT).play()
        self.ball.reset()
        logger.info(f"Ball lost, {self.health} health left")

        if self.health <= 0:
            logger.info(f"Game over at level {self.level} with score {self.score}")
            # Import here to avoid circular imports
            from .menu import MenuState
            return StateResult.transition(MenuState())
        return None

    # =========================================================================
    # RENDER
    # =========================================================================

    def render(self, ctx: 'GameContext', renderer: 'Renderer') -> StateResult:
        registry = ctx.registry

        renderer.clear(ctx.config.COLOR_BACKGROUND)
        renderer.draw_surface(registry.get_image('background'), (0, 0))

        for block in self.blocks:
            block.draw(ctx.atlas, renderer)
        self.paddle.draw(ctx.atlas, renderer)
        self.ball.draw(ctx.atlas, renderer)

        self.hud.render(renderer, ctx.hearts, registry.get_font(FontName.SMALL),
                        self.score, self.health, self.level)
        return StateResult.noop()
