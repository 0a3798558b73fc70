"""
Pytest configuration for the test suite.

This file is automatically loaded by pytest and applies configuration
to all tests in the tests/ directory. It provides a game context whose
asset loader hands out mock sounds and fonts and blank surfaces, so no
audio device or asset files are needed.
"""

import os
import sys
from typing import List, Tuple
from unittest.mock import MagicMock

# Set SDL drivers before importing pygame to avoid display/audio errors in CI
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import numpy as np
import pygame
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Config
from src.game.assets import AssetLoader
from src.game.audio import Sound
from src.game.context import GameContext
from src.game.sprites import build_hearts_atlas, build_sprite_atlas

pygame.init()


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class FakeLoader(AssetLoader):
    """Asset loader that never touches the filesystem."""

    def __init__(self):
        self.loaded: List[Tuple[str, str]] = []

    def load_sound(self, path: str) -> Sound:
        self.loaded.append(('sound', path))
        sound = MagicMock(spec=Sound)
        sound.is_playing.return_value = False
        return sound

    def load_font(self, path: str, size: int) -> pygame.font.Font:
        self.loaded.append(('font', path))
        font = MagicMock(spec=pygame.font.Font)
        font.render.side_effect = lambda text, antialias, color: pygame.Surface((max(1, len(text)) * size, size))
        return font

    def load_image(self, path: str) -> pygame.Surface:
        self.loaded.append(('image', path))
        return pygame.Surface((16, 16))


@pytest.fixture
def config():
    """Create a test configuration."""
    return Config()


@pytest.fixture
def loader():
    return FakeLoader()


@pytest.fixture
def ctx(config, loader):
    """Game context over blank sprite sheets and a seeded generator."""
    return GameContext(
        config=config,
        loader=loader,
        atlas=build_sprite_atlas(pygame.Surface((256, 256))),
        hearts=build_hearts_atlas(pygame.Surface((20, 9))),
        rng=np.random.default_rng(1234),
    )


@pytest.fixture
def canvas(config):
    """Frame buffer at the virtual resolution."""
    return pygame.Surface((config.VIRTUAL_WIDTH, config.VIRTUAL_HEIGHT))
