"""
State Stack
===========

Last-in-first-out stack of game states. Only the top state is updated
and rendered; states below it are suspended.

A state never changes the stack directly. It returns a StateResult and
the stack applies it after the state's update/render has returned.
Popping the last state empties the stack, which tells the driver to
exit.
"""

from typing import List, Optional

import pygame

from .base_state import BaseState, StateAction, StateResult
from .context import GameContext
from ..utils.logger import get_logger, log_state_transition

logger = get_logger(__name__)


class StateStack:
    """
    Usage:
        >>> stack = StateStack(ctx)
        >>> stack.push(MenuState())
        >>> while stack.running:
        ...     stack.update(dt)
        ...     stack.render(buffer)
    """

    def __init__(self, ctx: GameContext):
        self.ctx = ctx
        self._states: List[BaseState] = []

    def __len__(self) -> int:
        return len(self._states)

    @property
    def running(self) -> bool:
        """False once the last state has been popped."""
        return bool(self._states)

    @property
    def top(self) -> Optional[BaseState]:
        return self._states[-1] if self._states else None

    def push(self, state: BaseState) -> None:
        """Suspend the current top and enter `state` on top of it."""
        self._states.append(state)
        state.enter(self.ctx)
        log_state_transition('push', state.name, len(self._states))

    def pop(self) -> Optional[BaseState]:
        """Exit and remove the top state; the one below becomes active."""
        if not self._states:
            return None
        state = self._states.pop()
        state.exit(self.ctx)
        log_state_transition('pop', state.name, len(self._states))
        if not self._states:
            logger.info("State stack empty, terminating")
        return state

    def transition(self, state: BaseState) -> None:
        """Replace the top state with `state`."""
        if self._states:
            old = self._states.pop()
            old.exit(self.ctx)
        self._states.append(state)
        state.enter(self.ctx)
        log_state_transition('transition', state.name, len(self._states))

    def apply(self, result: StateResult) -> None:
        """Carry out a state's requested change."""
        if result.action is StateAction.PUSH:
            self.push(result.state)
        elif result.action is StateAction.POP:
            self.pop()
        elif result.action is StateAction.TRANSITION:
            self.transition(result.state)

    def update(self, dt: float) -> None:
        """Update the top state and apply its result."""
        state = self.top
        if state is None:
            return
        self.apply(state.update(self.ctx, dt))

    def render(self, surface: pygame.Surface) -> None:
        """Render the top state onto `surface` and apply its result."""
        state = self.top
        if state is None:
            return
        with self.ctx.renderer.target(surface):
            result = state.render(self.ctx, self.ctx.renderer)
        self.apply(result)
