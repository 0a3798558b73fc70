"""
Game Module
===========

Core of the breakout game: the state stack, the states, entities,
collision, sprites, the resource registry and the adapters over pygame.

Classes:
    StateStack    - Push/pop/transition stack driving update and render
    MenuState     - Start menu
    PlayState     - Paddle, ball and blocks
    PauseState    - Frozen play with an overlay
    GameContext   - Registry, renderer, atlases and input passed to states

State Registry:
    Use get_state(name) to get a state class by name
    Use list_states() to get the states that can start a game
"""

from typing import Dict, List, Optional, Type

from .base_state import BaseState, StateAction, StateResult
from .state_stack import StateStack
from .context import GameContext
from .menu import MenuState
from .play import PlayState
from .pause import PauseState


# =============================================================================
# STATE REGISTRY
# =============================================================================
# States the driver may push first (--start on the command line).

STATE_REGISTRY: Dict[str, Type[BaseState]] = {
    'menu': MenuState,
    'play': PlayState,
}


def get_state(name: str) -> Optional[Type[BaseState]]:
    """
    Get a start state class by name.

    Example:
        >>> stack.push(get_state('menu')())
    """
    return STATE_REGISTRY.get(name.lower())


def list_states() -> List[str]:
    return list(STATE_REGISTRY.keys())


__all__ = [
    'BaseState',
    'StateAction',
    'StateResult',
    'StateStack',
    'GameContext',
    'MenuState',
    'PlayState',
    'PauseState',
    'STATE_REGISTRY',
    'get_state',
    'list_states',
]
