"""
Renderer
========

Thin drawing layer over pygame surfaces.

Every draw call goes to the currently bound target surface. A render pass
binds its target with `target()`, which restores the previous target on
every exit path (normal return, early return or exception).

Usage:
    >>> renderer = Renderer()
    >>> with renderer.target(buffer):
    ...     renderer.clear((0, 0, 0))
    ...     renderer.draw_region(sheet, pygame.Rect(0, 64, 64, 16), (100, 200))
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

import pygame


Color = Tuple[int, ...]


class Renderer:
    """Draws onto a stack of bound target surfaces."""

    def __init__(self):
        self._targets: List[pygame.Surface] = []

    @property
    def bound(self) -> Optional[pygame.Surface]:
        """Currently bound target, or None."""
        return self._targets[-1] if self._targets else None

    @contextmanager
    def target(self, surface: pygame.Surface) -> Iterator[pygame.Surface]:
        """Bind `surface` for the duration of the block."""
        self._targets.append(surface)
        try:
            yield surface
        finally:
            self._targets.pop()

    def _surface(self) -> pygame.Surface:
        if not self._targets:
            raise RuntimeError("No render target bound; use Renderer.target()")
        return self._targets[-1]

    def clear(self, color: Color) -> None:
        """Fill the whole target with a solid color."""
        self._surface().fill(color)

    def draw_region(
        self,
        sheet: pygame.Surface,
        area: pygame.Rect,
        pos: Tuple[float, float],
    ) -> None:
        """Blit a rectangle of `sheet` at `pos` (top-left)."""
        self._surface().blit(sheet, (int(pos[0]), int(pos[1])), area)

    def draw_surface(self, surface: pygame.Surface, pos: Tuple[float, float]) -> None:
        """Blit a whole surface at `pos` (top-left)."""
        self._surface().blit(surface, (int(pos[0]), int(pos[1])))

    def draw_surface_centered(self, surface: pygame.Surface, y: float) -> pygame.Rect:
        """Blit a surface horizontally centered on the target at height `y`."""
        target = self._surface()
        rect = surface.get_rect(centerx=target.get_width() // 2, top=int(y))
        target.blit(surface, rect)
        return rect

    def draw_text(
        self,
        font: pygame.font.Font,
        text: str,
        pos: Tuple[float, float],
        color: Color,
        center: bool = False,
    ) -> pygame.Rect:
        """
        Render and draw a line of text.

        Args:
            font: Font to render with
            text: Text to draw
            pos: Top-left position, or (ignored x, top y) when centered
            color: Text color
            center: Center horizontally on the target

        Returns:
            Rectangle covered by the text
        """
        rendered = font.render(text, False, color)
        if center:
            return self.draw_surface_centered(rendered, pos[1])
        self.draw_surface(rendered, pos)
        return rendered.get_rect(topleft=(int(pos[0]), int(pos[1])))

    def fill_rect(self, rect: pygame.Rect, color: Color) -> None:
        """Fill a rectangle; a 4-tuple color is alpha-blended."""
        target = self._surface()
        if len(color) == 4:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(color)
            target.blit(overlay, rect.topleft)
        else:
            pygame.draw.rect(target, color, rect)


def present(canvas: pygame.Surface, window: pygame.Surface) -> None:
    """Scale the virtual canvas up to the window and flip the display."""
    if canvas.get_size() == window.get_size():
        window.blit(canvas, (0, 0))
    else:
        pygame.transform.scale(canvas, window.get_size(), window)
    pygame.display.flip()
