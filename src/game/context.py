"""
Game Context
============

Everything a state needs from the outside world, passed explicitly to
every update and render call instead of living in globals.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Hashable, Iterable

import numpy as np

from config import Config
from .assets import AssetLoader
from .registry import ResourceRegistry
from .renderer import Renderer
from .sprites import SpriteAtlas


@dataclass
class GameContext:
    """
    Attributes:
        config: Game configuration
        loader: Asset loader used by states on entry
        atlas: Sprite atlas over the shared breakout sheet
        hearts: Sprite atlas over the hearts sheet
        registry: Resource registry of the active state
        renderer: Drawing layer used during render passes
        rng: Random generator (level layouts, ball launch)
        keys_down: Keys held during the current frame
    """
    config: Config
    loader: AssetLoader
    atlas: SpriteAtlas
    hearts: SpriteAtlas
    registry: ResourceRegistry = field(default_factory=ResourceRegistry)
    renderer: Renderer = field(default_factory=Renderer)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    keys_down: FrozenSet[Hashable] = frozenset()

    def begin_frame(self, keys_down: Iterable[Hashable]) -> None:
        """Record this frame's held keys and release latches of keys now up."""
        self.keys_down = frozenset(keys_down)
        self.registry.release_keys(self.keys_down)

    def is_down(self, key: Hashable) -> bool:
        return key in self.keys_down

    def pressed(self, key: Hashable) -> bool:
        """Edge-triggered: True once per press of `key`."""
        return self.is_down(key) and self.registry.just_pressed(key)
