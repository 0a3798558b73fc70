"""
Resource Registry
=================

Keyed store for everything a game state loads or tracks between frames:

    sounds   - SoundName -> Sound
    fonts    - FontName  -> pygame Font
    texts    - str       -> pre-rendered text surface
    images   - str       -> pygame Surface
    objects  - str       -> live entity handle
    values   - str       -> float

plus edge-triggered keyboard state (just_pressed / just_released).

Keys are unique per category and the last write wins. A lookup of a
missing key raises ResourceNotFoundError: the key set is fixed by the
code that loads it, so a miss is a programming error.

The registry is populated when a state is entered and cleared when it
exits; it is reached through the GameContext passed to update/render.
"""

from enum import Enum
from typing import Any, Dict, Hashable, Iterable, Iterator, Tuple, TypeVar

import pygame

from .audio import Sound
from ..utils.logger import log_asset_event

K = TypeVar('K')
V = TypeVar('V')


class SoundName(str, Enum):
    """Every sound the game plays."""
    PADDLE_HIT = 'paddle_hit'
    WALL_HIT = 'wall_hit'
    BRICK_HIT = 'brick_hit'
    HURT = 'hurt'
    VICTORY = 'victory'
    SELECT = 'select'
    CONFIRM = 'confirm'
    PAUSE = 'pause'
    MUSIC = 'music'


class FontName(str, Enum):
    """Font sizes used by the HUD and menus."""
    SMALL = 'small'
    MEDIUM = 'medium'
    LARGE = 'large'


class ResourceNotFoundError(KeyError):
    """Raised when a registry lookup misses."""


def _lookup(table: Dict[K, V], category: str, key: K) -> V:
    try:
        return table[key]
    except KeyError:
        raise ResourceNotFoundError(f"No {category} registered under {key!r}") from None


class ResourceRegistry:
    """
    Keyed asset tables plus per-key press latches.

    Edge detection is polled: the host reports the set of keys that are
    down each frame. The first just_pressed(key) while a key is down
    returns True and latches; later calls return False until
    just_released(key) clears the latch. release_keys(down) does that for
    every tracked key that is not down.
    """

    def __init__(self):
        self.sounds: Dict[SoundName, Sound] = {}
        self.fonts: Dict[FontName, pygame.font.Font] = {}
        self.texts: Dict[str, pygame.Surface] = {}
        self.images: Dict[str, pygame.Surface] = {}
        self.objects: Dict[str, Any] = {}
        self.values: Dict[str, float] = {}
        self.key_status: Dict[Hashable, bool] = {}

    # =========================================================================
    # INPUT EDGES
    # =========================================================================

    def just_pressed(self, key: Hashable) -> bool:
        """True only on the first call since the latch for `key` was cleared."""
        if self.key_status.get(key, False):
            return False
        self.key_status[key] = True
        return True

    def just_released(self, key: Hashable) -> None:
        """Clear the latch for `key` (the key is observed up)."""
        self.key_status[key] = False

    def release_keys(self, down: Iterable[Hashable]) -> None:
        """Call just_released for every tracked key not in `down`."""
        down = set(down)
        for key in list(self.key_status):
            if key not in down:
                self.just_released(key)

    # =========================================================================
    # ASSETS
    # =========================================================================

    def add_sound(self, key: SoundName, sound: Sound) -> None:
        self.sounds[key] = sound
        log_asset_event('add', 'sound', key.value)

    def get_sound(self, key: SoundName) -> Sound:
        return _lookup(self.sounds, 'sound', key)

    def add_font(self, key: FontName, font: pygame.font.Font) -> None:
        self.fonts[key] = font
        log_asset_event('add', 'font', key.value)

    def get_font(self, key: FontName) -> pygame.font.Font:
        return _lookup(self.fonts, 'font', key)

    def add_text(self, key: str, text: pygame.Surface) -> None:
        self.texts[key] = text

    def get_text(self, key: str) -> pygame.Surface:
        return _lookup(self.texts, 'text', key)

    def add_image(self, key: str, image: pygame.Surface) -> None:
        self.images[key] = image
        log_asset_event('add', 'image', key)

    def get_image(self, key: str) -> pygame.Surface:
        return _lookup(self.images, 'image', key)

    def add_object(self, key: str, obj: Any) -> None:
        self.objects[key] = obj

    def get_object(self, key: str) -> Any:
        return _lookup(self.objects, 'object', key)

    def iter_objects(self) -> Iterator[Tuple[str, Any]]:
        """(key, object) pairs in registration order."""
        return iter(list(self.objects.items()))

    def add_value(self, key: str, value: float) -> None:
        self.values[key] = float(value)

    def get_value(self, key: str) -> float:
        return _lookup(self.values, 'value', key)

    # =========================================================================
    # SOUND CONTROL
    # =========================================================================

    def pause_sounds(self) -> None:
        """Pause every registered sound that is playing."""
        for sound in self.sounds.values():
            sound.pause()

    def resume_sounds(self) -> None:
        """Resume every sound paused by pause_sounds()."""
        for sound in self.sounds.values():
            sound.resume()

    def stop_sounds(self) -> None:
        for sound in self.sounds.values():
            sound.stop()

    # =========================================================================
    # CLEARING
    # =========================================================================

    def clear_sounds(self) -> None:
        self.sounds.clear()

    def clear_fonts(self) -> None:
        self.fonts.clear()

    def clear_texts(self) -> None:
        self.texts.clear()

    def clear_images(self) -> None:
        self.images.clear()

    def clear_objects(self) -> None:
        self.objects.clear()

    def clear_values(self) -> None:
        self.values.clear()

    def clear(self) -> None:
        """Drop every asset table. Key latches survive so a held key stays used."""
        counts = {
            'sounds': len(self.sounds),
            'fonts': len(self.fonts),
            'texts': len(self.texts),
            'images': len(self.images),
            'objects': len(self.objects),
        }
        self.clear_sounds()
        self.clear_fonts()
        self.clear_texts()
        self.clear_images()
        self.clear_objects()
        self.clear_values()
        log_asset_event('clear', 'registry', 'all', **counts)
