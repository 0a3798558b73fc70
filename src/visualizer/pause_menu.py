"""
Pause Overlay
=============

Dimmed overlay with a "PAUSED" caption and the frozen game's context
(score, health, level), drawn over the last play frame.
"""

import pygame
from typing import TYPE_CHECKING, Dict, List

from config import Config

if TYPE_CHECKING:
    from ..game.renderer import Renderer


class PauseOverlay:
    """
    Pause screen drawn on top of the frozen scene.

    Displays the pause context (score, health, level) and the key that
    resumes play.
    """

    def __init__(self, config: Config):
        """
        Initialize the overlay.

        Args:
            config: Configuration object
        """
        self.config = config
        self.width = config.VIRTUAL_WIDTH
        self.height = config.VIRTUAL_HEIGHT

    @staticmethod
    def context_lines(context: Dict[str, float]) -> List[str]:
        """Format the context values that are present."""
        lines = []
        if 'score' in context:
            lines.append(f"Score: {int(context['score'])}")
        if 'health' in context:
            lines.append(f"Health: {int(context['health'])}")
        if 'level' in context:
            lines.append(f"Level: {int(context['level'])}")
        return lines

    def render(
        self,
        renderer: 'Renderer',
        title_font: pygame.font.Font,
        context_font: pygame.font.Font,
        context: Dict[str, float],
    ) -> None:
        """
        Render the pause overlay.

        Args:
            renderer: Renderer bound to the frame buffer
            title_font: Font for the "PAUSED" caption
            context_font: Font for context lines and the hint
            context: Values of the paused game (score, health, level)
        """
        center_y = self.height // 2

        # Semi-transparent overlay
        renderer.fill_rect(pygame.Rect(0, 0, self.width, self.height), self.config.COLOR_PAUSE_OVERLAY)

        # Title
        renderer.draw_text(title_font, "PAUSED", (0, center_y - 48), self.config.COLOR_HIGHLIGHT, center=True)

        y_offset = center_y
        for line in self.context_lines(context):
            renderer.draw_text(context_font, line, (0, y_offset), self.config.COLOR_TEXT, center=True)
            y_offset += 12

        renderer.draw_text(context_font, "Press Enter to resume", (0, self.height - 24),
                           self.config.COLOR_TEXT, center=True)
