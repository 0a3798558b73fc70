"""
Level Maker
===========

Randomized block layouts. Higher levels unlock higher tiers and more
colors:

    highest tier  = min(3, level // 5)
    highest color = min(5, level % 5 + 3)
"""

from typing import List

import numpy as np

from .entities import Entity, new_block
from .sprites import BLOCK_COLORS, BLOCK_TIERS


def create_map(
    level: int,
    rng: np.random.Generator,
    playfield_width: float,
    block_width: int = 32,
    block_height: int = 16,
) -> List[Entity]:
    """
    Generate the blocks for a level.

    Layout:
        - 1 to 5 rows, starting one block height from the top
        - an odd number of columns between 7 and 13, centered
        - each row is solid or alternates between two color/tier pairs

    Args:
        level: Level number (1-based)
        rng: numpy random generator
        playfield_width: Virtual width the row is centered in

    Returns:
        List of in-play blocks, row by row
    """
    blocks: List[Entity] = []

    num_rows = int(rng.integers(1, 6))
    num_cols = int(rng.integers(7, 14))
    if num_cols % 2 == 0:
        num_cols += 1 if num_cols < 13 else -1

    highest_tier = min(BLOCK_TIERS - 1, level // 5)
    highest_color = min(BLOCK_COLORS, level % 5 + 3)

    left = (playfield_width - num_cols * block_width) / 2

    for row in range(num_rows):
        alternate = bool(rng.random() < 0.5)

        color_a = int(rng.integers(1, highest_color + 1))
        color_b = int(rng.integers(1, highest_color + 1))
        tier_a = int(rng.integers(0, highest_tier + 1))
        tier_b = int(rng.integers(0, highest_tier + 1))

        for col in range(num_cols):
            if alternate and col % 2 == 1:
                color, tier = color_b, tier_b
            else:
                color, tier = color_a, tier_a

            blocks.append(new_block(
                left + col * block_width,
                (row + 1) * block_height,
                color=color,
                tier=tier,
                width=block_width,
                height=block_height,
            ))

    return blocks
