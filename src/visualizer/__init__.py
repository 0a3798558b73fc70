"""
Visualizer Module
=================

Overlays drawn on top of the playfield.

Classes:
    PlayHUD      - Hearts, score and level during play
    PauseOverlay - Dimmed "PAUSED" screen with the paused game's values
"""

from .hud import PlayHUD
from .pause_menu import PauseOverlay

__all__ = ['PlayHUD', 'PauseOverlay']
