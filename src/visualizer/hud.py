"""
Play HUD (Heads-Up Display)
===========================

On-screen overlay showing the player's health, score and level during play.
"""

import pygame
from typing import TYPE_CHECKING, Dict, Tuple

from config import Config

if TYPE_CHECKING:
    from ..game.renderer import Renderer
    from ..game.sprites import SpriteAtlas


class PlayHUD:
    """
    Health/score/level overlay drawn on top of the playfield.

    Displays:
    - A row of hearts, full for remaining health and empty up to the maximum
    - Score
    - Level
    """

    def __init__(self, config: Config):
        """
        Initialize the HUD.

        Args:
            config: Configuration object
        """
        self.config = config
        self.text_color = config.COLOR_TEXT
        self.hearts_x = config.VIRTUAL_WIDTH - config.HEART_OFFSET_RIGHT
        self.hearts_y = 4

    def heart_positions(self, max_health: int) -> Dict[int, Tuple[int, int]]:
        """Top-left position of each heart slot, keyed by slot index."""
        return {
            i: (self.hearts_x + i * self.config.HEART_SPACING, self.hearts_y)
            for i in range(max_health)
        }

    def render(
        self,
        renderer: 'Renderer',
        hearts: 'SpriteAtlas',
        font: pygame.font.Font,
        score: int,
        health: int,
        level: int,
    ) -> None:
        """
        Render all HUD elements onto the bound target.

        Args:
            renderer: Renderer bound to the frame buffer
            hearts: Atlas over the hearts sheet
            font: Font for the score and level text
            score: Current score
            health: Remaining health
            level: Current level
        """
        # Import here to avoid circular imports
        from ..game.sprites import heart_key

        max_health = max(health, self.config.INITIAL_HEALTH)
        for i, (x, y) in self.heart_positions(max_health).items():
            hearts.draw_sprite(renderer, heart_key(i < health), x, y)

        renderer.draw_text(font, f"Score: {score}", (self.hearts_x - 60, self.hearts_y), self.text_color)
        renderer.draw_text(font, f"Level: {level}", (4, self.hearts_y), self.text_color)
