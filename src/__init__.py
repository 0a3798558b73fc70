"""
Breakout - Source Package
=========================

Ball-and-paddle arcade game built on a state stack, an AABB collision
loop and a keyed resource registry.

Modules:
    game/       - State stack, states, entities, collision, assets
    visualizer/ - HUD and pause overlay
    utils/      - Logging and the save file
"""

__version__ = "1.0.0"
__author__ = "Your Name"
