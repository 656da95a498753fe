"""
Rollerball - Tilt-controlled ball vs. moving walls.

This package provides the game simulation, the threaded game loop, the
render targets it draws onto, and the tilt input plumbing.

Main exports:
- RollerGame: Game state (ball, walls, terminal flag)
- GameLoop: Update/draw loop on a background thread
- RollerSession: Surface lifecycle host
- TiltSensorListener: Accelerometer samples to velocity and shake resets
- GameConfig: Configuration loaded from rollerball_config.yaml
"""

from rollerball.config_loader import GameConfig, load_config, get_config
from rollerball.canvas import Canvas, PygameCanvas, Rect, TextStyle
from rollerball.ball import Ball
from rollerball.wall import Wall
from rollerball.game import RollerGame
from rollerball.render_target import RenderTarget, PygameWindowTarget, OffscreenTarget
from rollerball.game_loop import GameLoop, VelocityCell
from rollerball.tilt_input import ShakeDetector, TiltSensorListener
from rollerball.session import RollerSession

__all__ = [
    "GameConfig",
    "load_config",
    "get_config",
    "Canvas",
    "PygameCanvas",
    "Rect",
    "TextStyle",
    "Ball",
    "Wall",
    "RollerGame",
    "RenderTarget",
    "PygameWindowTarget",
    "OffscreenTarget",
    "GameLoop",
    "VelocityCell",
    "ShakeDetector",
    "TiltSensorListener",
    "RollerSession",
]
