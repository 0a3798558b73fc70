"""
Asset Loading
=============

Loads sounds, fonts and images from the resource directory and fills a
ResourceRegistry with them.

Loading failures are fatal: a missing or undecodable file raises
AssetLoadError and aborts construction of the state that needed it.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable

import pygame

from config import Config
from .audio import Sound
from .registry import FontName, ResourceRegistry, SoundName
from ..utils.logger import log_asset_event


class AssetLoadError(RuntimeError):
    """Raised when an asset file cannot be found or decoded."""


class AssetLoader(ABC):
    """
    Turns resource paths into engine objects.

    The core only ever loads through this interface; tests substitute an
    in-memory implementation.
    """

    @abstractmethod
    def load_sound(self, path: str) -> Sound:
        """Load a sound effect or music track."""
        pass

    @abstractmethod
    def load_font(self, path: str, size: int) -> pygame.font.Font:
        """Load a font at the given point size."""
        pass

    @abstractmethod
    def load_image(self, path: str) -> pygame.Surface:
        """Load an image."""
        pass


class PygameAssetLoader(AssetLoader):
    """
    Loads assets with pygame from a resource root directory.

    Args:
        root: Directory that relative asset paths are resolved against
    """

    def __init__(self, root: str):
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        full = self.root / path
        if not full.is_file():
            raise AssetLoadError(f"Asset not found: {full}")
        return full

    def load_sound(self, path: str) -> Sound:
        full = self._resolve(path)
        try:
            sound = pygame.mixer.Sound(str(full))
        except pygame.error as e:
            raise AssetLoadError(f"Cannot load sound {full}: {e}") from e
        log_asset_event('load', 'sound', str(full))
        return Sound(sound, name=Path(path).stem)

    def load_font(self, path: str, size: int) -> pygame.font.Font:
        full = self._resolve(path)
        try:
            font = pygame.font.Font(str(full), size)
        except (pygame.error, OSError) as e:
            raise AssetLoadError(f"Cannot load font {full}: {e}") from e
        log_asset_event('load', 'font', str(full), size=size)
        return font

    def load_image(self, path: str) -> pygame.Surface:
        full = self._resolve(path)
        try:
            image = pygame.image.load(str(full))
        except pygame.error as e:
            raise AssetLoadError(f"Cannot load image {full}: {e}") from e
        # convert_alpha() needs a display mode
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        log_asset_event('load', 'image', str(full), size=image.get_size())
        return image


def load_sounds(
    registry: ResourceRegistry,
    loader: AssetLoader,
    config: Config,
    names: Iterable[SoundName],
) -> None:
    """Load the given sounds into the registry at their configured volume."""
    for name in names:
        sound = loader.load_sound(config.SOUND_FILES[name.value])
        volume = config.MUSIC_VOLUME if name is SoundName.MUSIC else config.SFX_VOLUME
        sound.set_volume(volume)
        registry.add_sound(name, sound)


def load_fonts(registry: ResourceRegistry, loader: AssetLoader, config: Config) -> None:
    """Load every configured font size into the registry."""
    for name in FontName:
        registry.add_font(name, loader.load_font(config.FONT_FILE, config.FONT_SIZES[name.value]))


def load_background(registry: ResourceRegistry, loader: AssetLoader, config: Config) -> None:
    """Load the background image under the 'background' key."""
    registry.add_image('background', loader.load_image(config.BACKGROUND_IMAGE))
