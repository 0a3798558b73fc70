"""
Base State Interface
====================

Abstract base class that defines the interface all game states must
implement, and the results a state hands back to the StateStack.

To add a new state:
1. Create a new file in src/game/
2. Inherit from BaseState
3. Implement update() and render()
4. Return it from another state's update() as a push or transition
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .context import GameContext
    from .renderer import Renderer


class StateAction(Enum):
    """What the stack should do once the state's call has finished."""
    NOOP = auto()
    PUSH = auto()
    POP = auto()
    TRANSITION = auto()


@dataclass(frozen=True)
class StateResult:
    """
    Outcome of a state's update or render.

    Build with the helpers:
        StateResult.push(PauseState(...))   - suspend this state under another
        StateResult.pop()                   - leave this state
        StateResult.transition(PlayState()) - replace this state
        StateResult.noop()                  - stay
    """
    action: StateAction
    state: Optional['BaseState'] = None

    def __post_init__(self):
        needs_state = self.action in (StateAction.PUSH, StateAction.TRANSITION)
        assert needs_state == (self.state is not None), \
            f"{self.action.name} {'requires' if needs_state else 'takes no'} state"

    @classmethod
    def push(cls, state: 'BaseState') -> 'StateResult':
        return cls(StateAction.PUSH, state)

    @classmethod
    def pop(cls) -> 'StateResult':
        return cls(StateAction.POP)

    @classmethod
    def transition(cls, state: 'BaseState') -> 'StateResult':
        return cls(StateAction.TRANSITION, state)

    @classmethod
    def noop(cls) -> 'StateResult':
        return NOOP


NOOP = StateResult(StateAction.NOOP)


class BaseState(ABC):
    """
    Abstract base class for game states.

    Methods:
        enter(ctx)
            Called when the state becomes the top through push/transition.
            Load assets into ctx.registry here.

        exit(ctx)
            Called when the state leaves the stack through pop/transition.

        update(ctx, dt) -> StateResult
            Advance one frame; dt is seconds since the last frame.

        render(ctx, renderer) -> StateResult
            Draw the frame; the renderer is already bound to the buffer.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    def enter(self, ctx: 'GameContext') -> None:
        """Override to load resources."""
        pass

    def exit(self, ctx: 'GameContext') -> None:
        """Override to release resources."""
        pass

    @abstractmethod
    def update(self, ctx: 'GameContext', dt: float) -> StateResult:
        """
        Advance the state by one frame.

        Args:
            ctx: Game context (registry, keys, config, ...)
            dt: Elapsed seconds since the previous frame

        Returns:
            What the stack should do afterwards
        """
        pass

    @abstractmethod
    def render(self, ctx: 'GameContext', renderer: 'Renderer') -> StateResult:
        """
        Draw the state.

        Args:
            ctx: Game context
            renderer: Renderer bound to the frame buffer

        Returns:
            What the stack should do afterwards
        """
        pass
