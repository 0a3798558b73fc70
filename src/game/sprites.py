"""
Sprite Atlas
============

Maps integer sprite keys to source rectangles inside one shared sheet.

Sprite keys are built by OR-ing a kind flag (high bits, mutually
exclusive) with a sub-field (low bits):

    PADDLE_FLAG | color | size     e.g. PADDLE_FLAG | BLUE | MEDIUM
    BALL_FLAG   | n                n = 1..7
    BLOCK_FLAG  | index            index = 1 + (color - 1) * 4 + tier
    HEARTS_FLAG | FULL_HEART / EMPTY_HEART   (hearts sheet)

Keys must be registered before they are drawn; an unknown key is a
configuration error and raises SpriteKeyError.
"""

from typing import Dict, Tuple

import pygame

from .renderer import Renderer


# Kind flags
PADDLE_FLAG = 0b0001_0000_0000_0000
BALL_FLAG = 0b0010_0000_0000_0000
BLOCK_FLAG = 0b0100_0000_0000_0000
HEARTS_FLAG = 0b1000_0000_0000_0000
KIND_MASK = PADDLE_FLAG | BALL_FLAG | BLOCK_FLAG | HEARTS_FLAG

# Paddle colors
BLUE = 1
GREEN = 2
RED = 4
MAGENTA = 8
PADDLE_COLORS = (BLUE, GREEN, RED, MAGENTA)
COLOR_MASK = 0b0000_1111

# Paddle sizes
SMALL = 0b0001_0000
MEDIUM = 0b0010_0000
LARGE = 0b0100_0000
HUGE = 0b1000_0000
PADDLE_SIZES = (SMALL, MEDIUM, LARGE, HUGE)
SIZE_MASK = 0b1111_0000

PADDLE_WIDTHS: Dict[int, int] = {SMALL: 32, MEDIUM: 64, LARGE: 96, HUGE: 128}
PADDLE_HEIGHT = 16

# Balls
BALL_COLORS = 7

# Blocks: 5 colors x 4 tiers, plus the locked block
BLOCK_COLORS = 5
BLOCK_TIERS = 4
BLOCK_SPRITES = 21

# Hearts
FULL_HEART = 1
EMPTY_HEART = 2


class SpriteKeyError(KeyError):
    """Raised when drawing or looking up an unregistered sprite key."""


def paddle_key(color: int, size: int) -> int:
    """Sprite key of a paddle."""
    return PADDLE_FLAG | color | size


def ball_key(color: int) -> int:
    """Sprite key of a ball (color 1..7)."""
    return BALL_FLAG | color


def block_index(color: int, tier: int) -> int:
    """Block sprite index: 1 + (color - 1) * 4 + tier."""
    return 1 + (color - 1) * BLOCK_TIERS + tier


def block_key(color: int, tier: int) -> int:
    """Sprite key of a block (color 1..5, tier 0..3)."""
    return BLOCK_FLAG | block_index(color, tier)


def heart_key(full: bool) -> int:
    """Sprite key of a full or empty heart."""
    return HEARTS_FLAG | (FULL_HEART if full else EMPTY_HEART)


class SpriteAtlas:
    """
    Keyed source rectangles over a single texture sheet.

    Usage:
        >>> atlas = SpriteAtlas(sheet)
        >>> atlas.add_sprite(paddle_key(BLUE, SMALL), 0, 64, 32, 16)
        >>> atlas.draw_sprite(renderer, paddle_key(BLUE, SMALL), 100, 200)
    """

    def __init__(self, sheet: pygame.Surface):
        self.sheet = sheet
        self._rects: Dict[int, pygame.Rect] = {}

    def __len__(self) -> int:
        return len(self._rects)

    def __contains__(self, key: int) -> bool:
        return key in self._rects

    def add_sprite(self, key: int, u: float, v: float, w: float, h: float) -> None:
        """Register (or overwrite) the source rectangle of `key`."""
        self._rects[key] = pygame.Rect(int(u), int(v), int(w), int(h))

    def rect(self, key: int) -> pygame.Rect:
        """Source rectangle of `key`."""
        try:
            return self._rects[key]
        except KeyError:
            raise SpriteKeyError(f"Sprite key not registered: {key:#06x}") from None

    def size(self, key: int) -> Tuple[int, int]:
        """(width, height) of the sprite registered under `key`."""
        rect = self.rect(key)
        return rect.width, rect.height

    def draw_sprite(self, renderer: Renderer, key: int, x: float, y: float) -> None:
        """Draw the sprite `key` with its top-left corner at (x, y)."""
        renderer.draw_region(self.sheet, self.rect(key), (x, y))


def build_sprite_atlas(sheet: pygame.Surface) -> SpriteAtlas:
    """
    Register every block, paddle and ball of the shared breakout sheet.

    Sheet layout (32x16 grid on top, 6 blocks per row):
        blocks   rows y=0..48, 21 sprites
        balls    8x8, from (96, 48), 4 on the first row and 3 on the second
        paddles  y=64.. one 32px band per color, small/medium/large on the
                 first row and huge on the second
    """
    atlas = SpriteAtlas(sheet)

    per_row = 6
    for index in range(1, BLOCK_SPRITES + 1):
        col = (index - 1) % per_row
        row = (index - 1) // per_row
        atlas.add_sprite(BLOCK_FLAG | index, col * 32, row * 16, 32, 16)

    for n in range(1, BALL_COLORS + 1):
        if n <= 4:
            atlas.add_sprite(ball_key(n), 96 + (n - 1) * 8, 48, 8, 8)
        else:
            atlas.add_sprite(ball_key(n), 96 + (n - 5) * 8, 56, 8, 8)

    for band, color in enumerate(PADDLE_COLORS):
        y = 64 + band * 32
        atlas.add_sprite(paddle_key(color, SMALL), 0, y, 32, PADDLE_HEIGHT)
        atlas.add_sprite(paddle_key(color, MEDIUM), 32, y, 64, PADDLE_HEIGHT)
        atlas.add_sprite(paddle_key(color, LARGE), 96, y, 96, PADDLE_HEIGHT)
        atlas.add_sprite(paddle_key(color, HUGE), 0, y + 16, 128, PADDLE_HEIGHT)

    return atlas


def build_hearts_atlas(sheet: pygame.Surface) -> SpriteAtlas:
    """Register the full and empty hearts (10x9 each, side by side)."""
    atlas = SpriteAtlas(sheet)
    atlas.add_sprite(heart_key(True), 0, 0, 10, 9)
    atlas.add_sprite(heart_key(False), 10, 0, 10, 9)
    return atlas
