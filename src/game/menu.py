"""
Start Menu
==========

Title screen shown on launch and after a game over.

Features:
    - Start / Exit options, Up/Down to move the cursor
    - Enter confirms, Q quits
    - Option labels rendered once on entry and kept in the registry
"""

from enum import Enum
from typing import TYPE_CHECKING

import pygame

from .assets import load_background, load_fonts, load_sounds
from .base_state import BaseState, StateResult
from .registry import FontName, SoundName

if TYPE_CHECKING:
    from .context import GameContext
    from .renderer import Renderer


class MenuOption(Enum):
    START = 'start'
    EXIT = 'exit'


class MenuState(BaseState):
    """
    Initial state: pick Start or Exit.

    Usage:
        >>> stack.push(MenuState())
    """

    TITLE = "BREAKOUT"

    def __init__(self):
        self.cursor = MenuOption.START

    def enter(self, ctx: 'GameContext') -> None:
        registry = ctx.registry
        load_fonts(registry, ctx.loader, ctx.config)
        load_sounds(registry, ctx.loader, ctx.config, (SoundName.SELECT, SoundName.CONFIRM))
        load_background(registry, ctx.loader, ctx.config)

        # Render the labels once; only their color depends on the cursor
        large = registry.get_font(FontName.LARGE)
        medium = registry.get_font(FontName.MEDIUM)
        registry.add_text('title', large.render(self.TITLE, False, ctx.config.COLOR_TEXT))
        for option in MenuOption:
            label = option.name
            registry.add_text(option.value, medium.render(label, False, ctx.config.COLOR_TEXT))
            registry.add_text(f"{option.value}_selected",
                              medium.render(label, False, ctx.config.COLOR_HIGHLIGHT))

    def exit(self, ctx: 'GameContext') -> None:
        ctx.registry.clear()

    def _toggle(self) -> None:
        if self.cursor is MenuOption.START:
            self.cursor = MenuOption.EXIT
        else:
            self.cursor = MenuOption.START

    def update(self, ctx: 'GameContext', dt: float) -> StateResult:
        registry = ctx.registry

        if ctx.pressed(pygame.K_UP) or ctx.pressed(pygame.K_DOWN):
            self._toggle()
            registry.get_sound(SoundName.SELECT).play()

        if ctx.pressed(pygame.K_RETURN):
            registry.get_sound(SoundName.CONFIRM).play()
            if self.cursor is MenuOption.START:
                # Import here to avoid circular imports
                from .play import PlayState
                return StateResult.transition(PlayState(level=ctx.config.START_LEVEL))
            return StateResult.pop()

        if ctx.pressed(pygame.K_q):
            return StateResult.pop()

        return StateResult.noop()

    def render(self, ctx: 'GameContext', renderer: 'Renderer') -> StateResult:
        registry = ctx.registry
        height = ctx.config.VIRTUAL_HEIGHT

        renderer.clear(ctx.config.COLOR_BACKGROUND)
        renderer.draw_surface(registry.get_image('background'), (0, 0))
        renderer.draw_surface_centered(registry.get_text('title'), height // 3)

        y = height // 2 + 16
        for option in MenuOption:
            key = f"{option.value}_selected" if option is self.cursor else option.value
            renderer.draw_surface_centered(registry.get_text(key), y)
            y += 24

        return StateResult.noop()
