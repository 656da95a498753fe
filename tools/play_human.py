"""
Human Play Mode
================

Play Rollerball with the mouse standing in for the device accelerometer.
The game loop renders on its own thread; this thread only turns mouse
position into tilt samples and handles taps.

Controls:
    - Mouse: Tilt (offset from the window centre)
    - Click/R: Tap (new round)
    - ESC: Quit

Usage:
    python -m tools.play_human [--seed SEED] [--width WIDTH] [--height HEIGHT] [--fps FPS]
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from typing import Optional, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from rollerball.config_loader import load_config, GameConfig
from rollerball.render_target import PygameWindowTarget
from rollerball.session import RollerSession
from rollerball.tilt_input import TiltSensorListener


def mouse_to_tilt(
    mouse_pos: Tuple[int, int],
    window_size: Tuple[int, int],
    max_tilt: float,
    gravity: float
) -> Tuple[float, float, float]:
    """
    Convert a mouse position into an accelerometer sample.

    The (x, y) tilt is capped at max_tilt and z is chosen so the sample's
    magnitude stays at gravity, like a device held still at an angle.

    Args:
        mouse_pos: Mouse position in window pixels.
        window_size: (width, height) of the window.
        max_tilt: Tilt at full deflection.
        gravity: Magnitude of a resting sample.

    Returns:
        (x, y, z) sample.
    """
    width, height = window_size
    dx = (mouse_pos[0] - width / 2) / (width / 2)
    dy = (mouse_pos[1] - height / 2) / (height / 2)

    # Ball moves opposite to x, so mirror it
    x = -dx * max_tilt
    y = dy * max_tilt

    length = math.hypot(x, y)
    if length > max_tilt:
        x *= max_tilt / length
        y *= max_tilt / length

    z = math.sqrt(max(gravity * gravity - x * x - y * y, 0.0))
    return x, y, z


class HumanPlayer:
    """
    Interactive front-end: window, session, and mouse-driven tilt.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        window_width: Optional[int] = None,
        window_height: Optional[int] = None,
        target_fps: Optional[int] = None,
        debug: bool = False
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        if config is None:
            config = load_config()

        self._config = config
        self._window_width = window_width or config.surface.width
        self._window_height = window_height or config.surface.height
        fps = config.loop.refresh_rate if target_fps is None else target_fps

        pygame.init()
        self._target = PygameWindowTarget(
            self._window_width,
            self._window_height,
            refresh_rate=fps
        )

        self._session = RollerSession(config=config, seed=seed, debug=debug)
        self._listener = TiltSensorListener(
            on_tilt=self._session.change_acceleration,
            on_shake=self._session.shake,
            config=config
        )

        # Sensor cadence of the simulated accelerometer
        self._sample_interval = 1.0 / 100.0

        self._running = True
        self._last_state: Tuple[bool, bool] = (False, False)

    def run(self) -> None:
        """Run until the window is closed."""
        print("=== Rollerball ===")
        print("Move the mouse to tilt, click or R for a new round, ESC to quit")
        print()

        loop = self._session.surface_created(self._target)

        try:
            while self._running and loop.is_running and not self._target.is_destroyed:
                self._handle_events()

                x, y, z = mouse_to_tilt(
                    pygame.mouse.get_pos(),
                    (self._window_width, self._window_height),
                    self._config.input.max_tilt,
                    self._config.input.gravity
                )
                self._listener.on_sensor_changed(x, y, z)

                self._report(loop.state())
                time.sleep(self._sample_interval)
        finally:
            self._target.destroy()
            self._session.surface_destroyed()
            pygame.quit()

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key == pygame.K_r:
                    self._session.shake()

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    self._session.shake()

    def _report(self, state: Tuple[bool, bool]) -> None:
        """Print round transitions."""
        if state == self._last_state:
            return
        is_over, has_won = state
        if is_over and has_won:
            print("You won! Click or R to play again")
        elif is_over:
            print("Crashed into a wall. Click or R to try again")
        elif self._last_state[0]:
            print("=== New Round ===")
        self._last_state = state


def main():
    parser = argparse.ArgumentParser(description="Play Rollerball interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=None, help="Window width (default: from config)")
    parser.add_argument("--height", type=int, default=None, help="Window height (default: from config)")
    parser.add_argument("--fps", type=int, default=None, help="Present rate (default: from config)")
    parser.add_argument("--debug", action="store_true", help="Print debug information")

    args = parser.parse_args()

    try:
        config = load_config()
        player = HumanPlayer(
            config=config,
            seed=args.seed,
            window_width=args.width,
            window_height=args.height,
            target_fps=args.fps,
            debug=args.debug
        )
        player.run()
        return 0
    except ImportError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
