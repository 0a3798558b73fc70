"""
Configuration file for Breakout
===============================

All screen, gameplay, sprite, audio and asset settings are centralized here.
Modify these values to experiment with different play settings.

Usage:
    from config import Config
    cfg = Config()
    print(cfg.VIRTUAL_WIDTH)
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass
class Config:
    """
    Central configuration for the entire project.

    Sections:
    1. Screen Settings - Window and virtual resolution
    2. Gameplay - Paddle, ball and health parameters
    3. Audio - Sound files and volumes
    4. Assets - Resource locations
    5. System - Logging, paths and seeding
    """

    # =========================================================================
    # SCREEN SETTINGS
    # =========================================================================

    # Real window size in pixels
    WINDOW_WIDTH: int = 1280
    WINDOW_HEIGHT: int = 720

    # Logical coordinate space; the game draws here and the driver scales it
    # up to the window
    VIRTUAL_WIDTH: int = 432
    VIRTUAL_HEIGHT: int = 243

    FPS: int = 60
    TITLE: str = 'Breakout'

    # =========================================================================
    # GAMEPLAY SETTINGS
    # =========================================================================

    # Paddle moves at exactly -SPEED, 0 or +SPEED (no acceleration)
    PADDLE_SPEED: float = 200.0

    # Distance from the paddle's top edge to the bottom of the playfield
    PADDLE_Y_OFFSET: int = 32

    # Ball size and launch velocity ranges (units per second)
    BALL_SIZE: int = 8
    BALL_LAUNCH_DX: float = 200.0
    BALL_LAUNCH_DY_MIN: float = 50.0
    BALL_LAUNCH_DY_MAX: float = 60.0

    # Health and HUD
    INITIAL_HEALTH: int = 3
    HEART_SPACING: int = 11
    HEART_OFFSET_RIGHT: int = 100

    # Level to start on (level drives block tiers and colors)
    START_LEVEL: int = 1

    # Block layout
    BLOCK_WIDTH: int = 32
    BLOCK_HEIGHT: int = 16

    # Colors (RGB tuples)
    COLOR_BACKGROUND: Tuple[int, int, int] = (40, 45, 52)
    COLOR_TEXT: Tuple[int, int, int] = (255, 255, 255)
    COLOR_HIGHLIGHT: Tuple[int, int, int] = (103, 255, 255)
    COLOR_PAUSE_OVERLAY: Tuple[int, int, int, int] = (0, 0, 0, 150)

    # =========================================================================
    # AUDIO SETTINGS
    # =========================================================================

    # Sound name -> file (relative to RESOURCE_DIR)
    SOUND_FILES: Dict[str, str] = field(default_factory=lambda: {
        'paddle_hit': 'sounds/paddle_hit.wav',
        'wall_hit': 'sounds/wall_hit.wav',
        'brick_hit': 'sounds/brick-hit-1.wav',
        'hurt': 'sounds/hurt.wav',
        'victory': 'sounds/victory.wav',
        'select': 'sounds/paddle_hit.wav',
        'confirm': 'sounds/confirm.wav',
        'pause': 'sounds/pause.wav',
        'music': 'sounds/music.wav',
    })

    MUSIC_VOLUME: float = 0.5
    SFX_VOLUME: float = 1.0

    # =========================================================================
    # ASSET SETTINGS
    # =========================================================================

    RESOURCE_DIR: str = 'resources'

    FONT_FILE: str = 'fonts/font.ttf'

    # Font name -> point size
    FONT_SIZES: Dict[str, int] = field(default_factory=lambda: {
        'small': 8,
        'medium': 16,
        'large': 32,
    })

    # Shared sprite sheet (blocks, paddles, balls) and the hearts sheet
    SPRITE_SHEET: str = 'graphics/breakout.png'
    HEARTS_SHEET: str = 'graphics/hearts.png'
    BACKGROUND_IMAGE: str = 'graphics/background.png'

    # =========================================================================
    # SYSTEM SETTINGS
    # =========================================================================

    LOG_DIR: str = 'logs'

    # 'DEBUG', 'INFO', 'WARNING' or 'ERROR'
    LOG_LEVEL: str = 'INFO'

    # Write log files in addition to the console
    LOG_TO_FILE: bool = False

    # Optional save stub target (None = disabled)
    SAVE_FILE: Optional[str] = None

    # Random seed for reproducibility (None for random)
    SEED: Optional[int] = None

    @property
    def WINDOW_SCALE(self) -> Tuple[float, float]:
        """Scale factors from virtual coordinates to window pixels."""
        return (
            self.WINDOW_WIDTH / self.VIRTUAL_WIDTH,
            self.WINDOW_HEIGHT / self.VIRTUAL_HEIGHT,
        )

    def __post_init__(self):
        """Validation."""
        assert self.WINDOW_WIDTH > 0 and self.WINDOW_HEIGHT > 0, "Window size must be positive"
        assert self.VIRTUAL_WIDTH > 0 and self.VIRTUAL_HEIGHT > 0, "Virtual size must be positive"
        assert self.FPS > 0, "FPS must be positive"
        assert self.PADDLE_SPEED > 0, "Paddle speed must be positive"
        assert self.BALL_SIZE > 0, "Ball size must be positive"
        assert self.INITIAL_HEALTH > 0, "Initial health must be positive"
        assert self.START_LEVEL >= 1, "Levels start at 1"
        assert 0 < self.BALL_LAUNCH_DY_MIN <= self.BALL_LAUNCH_DY_MAX, \
            "Launch dy range must be positive and ordered"
        assert 0.0 <= self.MUSIC_VOLUME <= 1.0, "Music volume must be in [0, 1]"
        assert 0.0 <= self.SFX_VOLUME <= 1.0, "SFX volume must be in [0, 1]"
        assert self.LOG_LEVEL in ('DEBUG', 'INFO', 'WARNING', 'ERROR'), \
            f"Unknown log level: {self.LOG_LEVEL}"


# Global config instance for easy importing
config = Config()


if __name__ == "__main__":
    # Print configuration summary
    cfg = Config()
    print("=" * 60)
    print("Breakout - Configuration Summary")
    print("=" * 60)
    print(f"\nWindow: {cfg.WINDOW_WIDTH}x{cfg.WINDOW_HEIGHT} @ {cfg.FPS} FPS")
    print(f"Virtual: {cfg.VIRTUAL_WIDTH}x{cfg.VIRTUAL_HEIGHT}")
    print(f"\nPaddle speed: {cfg.PADDLE_SPEED}")
    print(f"Health: {cfg.INITIAL_HEALTH}")
    print(f"Start level: {cfg.START_LEVEL}")
    print(f"\nResources: {cfg.RESOURCE_DIR}")
    print("=" * 60)
