"""
Game Loop
=========

Runs update-then-draw on a dedicated thread, decoupled from the threads
that deliver tilt input and reset requests.

Sharing discipline:
- the latest tilt lives in a VelocityCell (last value wins) and is
  snapshotted once per iteration;
- update, draw and reset all run under one lock, so a reset from another
  thread never interleaves with a half-finished tick.
"""

from __future__ import annotations

import threading
from typing import Optional, Tuple

from rollerball.ball import Velocity
from rollerball.config_loader import GameConfig, get_config
from rollerball.game import RollerGame
from rollerball.render_target import RENDER_ERRORS, RenderTarget


class VelocityCell:
    """Mutex-guarded (x, y) slot written by input, read by the loop."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._lock = threading.Lock()
        self._value: Velocity = (float(x), float(y))

    def set(self, x: float, y: float) -> None:
        with self._lock:
            self._value = (float(x), float(y))

    def snapshot(self) -> Velocity:
        with self._lock:
            return self._value


class GameLoop:
    """
    Drives a RollerGame against a RenderTarget.

    The loop has no frame throttle of its own; the target's present step
    sets the pace. It stops when stop() is called or when the target
    stops handing out canvases.

    Example:
        target = OffscreenTarget(800, 1200)
        loop = GameLoop.create(target)
        loop.start()
        loop.change_acceleration(0.0, 5.0)
        ...
        loop.stop()
    """

    def __init__(
        self,
        game: RollerGame,
        render_target: RenderTarget,
        config: Optional[GameConfig] = None,
        debug: bool = False
    ):
        """
        Initialize loop.

        Args:
            game: Game state to drive.
            render_target: Target to render frames onto.
            config: Game configuration. Uses the game's if None.
            debug: Print lifecycle events.
        """
        if config is None:
            config = game.config

        self._game = game
        self._target = render_target
        self._config = config
        self._debug = debug

        self._velocity = VelocityCell()
        self._state_lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._frames: int = 0

    @classmethod
    def create(
        cls,
        render_target: RenderTarget,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        debug: bool = False
    ) -> "GameLoop":
        """
        Build a game sized to the target's current drawable.

        Args:
            render_target: Target to render frames onto.
            config: Game configuration. Uses default if None.
            seed: Random seed for wall placement.
            debug: Print lifecycle and state events.

        Returns:
            A loop that has not been started yet.

        Raises:
            RuntimeError: If the target cannot provide a canvas.
        """
        if config is None:
            config = get_config()

        canvas = render_target.lock_canvas()
        if canvas is None:
            raise RuntimeError("Render target is not ready")
        width, height = canvas.size
        render_target.unlock_canvas_and_post(canvas)

        game = RollerGame(width, height, config=config, seed=seed, debug=debug)
        return cls(game, render_target, config=config, debug=debug)

    @property
    def game(self) -> RollerGame:
        return self._game

    @property
    def render_target(self) -> RenderTarget:
        return self._target

    @property
    def frames(self) -> int:
        """Frames drawn and presented so far."""
        return self._frames

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def velocity(self) -> VelocityCell:
        return self._velocity

    def change_acceleration(self, x: float, y: float) -> None:
        """Store the latest tilt reading. Safe from any thread."""
        self._velocity.set(x, y)

    def request_reset(self) -> None:
        """Start a new round. Safe from any thread; applied before the next update."""
        with self._state_lock:
            self._game.reset()

    def run_iteration(self) -> bool:
        """
        Run one update-then-draw cycle.

        Returns:
            False if the render target was unavailable or went away
            mid-frame, True otherwise.
        """
        canvas = self._target.lock_canvas()
        if canvas is None:
            return False

        velocity = self._velocity.snapshot()
        try:
            with self._state_lock:
                self._game.update(velocity)
                self._game.draw(canvas)
            self._target.unlock_canvas_and_post(canvas)
        except RENDER_ERRORS as e:
            # The frame is dropped; the drawable is already gone
            if self._debug:
                print(f"[DEBUG] Render target lost mid-frame: {e}")
            return False

        self._frames += 1
        return True

    def run(self) -> None:
        """Loop until stopped or the target goes away."""
        while not self._stop_event.is_set():
            if not self.run_iteration():
                if self._debug:
                    print(f"[DEBUG] Render target unavailable after {self._frames} frames, stopping")
                break

    def start(self) -> None:
        """
        Start the loop on a background thread (non-blocking).

        A no-op while the loop is running. A loop that ended on its own, or
        was stopped, starts again on a fresh thread.

        Raises:
            RuntimeError: If a previous stop() timed out and its thread is
                still inside an iteration.
        """
        if self._thread is not None and self._thread.is_alive():
            if self._stop_event.is_set():
                raise RuntimeError("Previous loop thread has not finished")
            return

        self._stop_event.clear()
        self._thread = threading.Thread(target=self.run, name="rollerball-loop", daemon=True)
        self._thread.start()

        if self._debug:
            print(f"[DEBUG] Game loop started ({self._game.surface_width}x{self._game.surface_height})")

    def stop(self, timeout: Optional[float] = None) -> bool:
        """
        Signal the loop to stop and wait for it.

        Args:
            timeout: Seconds to wait for the thread. Uses config if None.

        Returns:
            True once the thread has finished. False if it is still running
            after the timeout; the stop request stays set and stop() can be
            called again.
        """
        self._stop_event.set()
        if timeout is None:
            timeout = self._config.loop.join_timeout

        thread = self._thread
        if thread is not None:
            thread.join(timeout=timeout)
            if thread.is_alive():
                if self._debug:
                    print(f"[DEBUG] Game loop still running after {timeout}s")
                return False
            self._thread = None

        if self._debug:
            print(f"[DEBUG] Game loop stopped after {self._frames} frames")
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the loop thread ends on its own.

        Returns:
            True if the thread has finished.
        """
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout=timeout)
        return not thread.is_alive()

    def state(self) -> Tuple[bool, bool]:
        """(is_over, has_won), read under the state lock."""
        with self._state_lock:
            return self._game.is_over, self._game.has_won
