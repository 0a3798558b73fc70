"""
Pause State
===========

Pushed on top of PlayState. The play state is suspended underneath, so
its entities do not move; this state redraws them from the live handles
in the registry and puts the pause overlay on top.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from .base_state import BaseState, StateResult
from .registry import FontName, SoundName
from ..visualizer.pause_menu import PauseOverlay

if TYPE_CHECKING:
    from .context import GameContext
    from .renderer import Renderer


class PauseState(BaseState):
    """Frozen play; Enter resumes."""

    def __init__(self):
        self.overlay: Optional[PauseOverlay] = None

    def enter(self, ctx: 'GameContext') -> None:
        self.overlay = PauseOverlay(ctx.config)
        ctx.registry.pause_sounds()
        ctx.registry.get_sound(SoundName.PAUSE).play()

    def exit(self, ctx: 'GameContext') -> None:
        ctx.registry.resume_sounds()

    def update(self, ctx: 'GameContext', dt: float) -> StateResult:
        if ctx.pressed(pygame.K_RETURN):
            return StateResult.pop()
        return StateResult.noop()

    def render(self, ctx: 'GameContext', renderer: 'Renderer') -> StateResult:
        registry = ctx.registry

        renderer.clear(ctx.config.COLOR_BACKGROUND)
        renderer.draw_surface(registry.get_image('background'), (0, 0))
        for _, entity in registry.iter_objects():
            entity.draw(ctx.atlas, renderer)

        self.overlay.render(
            renderer,
            registry.get_font(FontName.LARGE),
            registry.get_font(FontName.SMALL),
            dict(registry.values),
        )
        return StateResult.noop()
