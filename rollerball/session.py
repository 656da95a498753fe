"""
Session
=======

Ties the game loop's lifetime to a render surface: a loop is created when a
surface appears and stopped before the surface is released.
"""

from __future__ import annotations

from typing import Optional

from rollerball.config_loader import GameConfig, get_config
from rollerball.game_loop import GameLoop
from rollerball.render_target import RenderTarget


class RollerSession:
    """
    Surface lifecycle host.

    Tilt and tap/shake events may arrive before a surface exists or after
    it is gone; they are dropped in that case.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        debug: bool = False
    ):
        if config is None:
            config = get_config()

        self._config = config
        self._seed = seed
        self._debug = debug
        self._loop: Optional[GameLoop] = None

    @property
    def loop(self) -> Optional[GameLoop]:
        return self._loop

    def surface_created(self, render_target: RenderTarget) -> GameLoop:
        """
        Build and start a loop for a new surface.

        Any loop left over from a previous surface is stopped first.

        Args:
            render_target: The new surface.

        Returns:
            The running loop.
        """
        if self._loop is not None:
            self._join(self._loop)

        self._loop = GameLoop.create(
            render_target,
            config=self._config,
            seed=self._seed,
            debug=self._debug
        )
        self._loop.start()
        return self._loop

    def surface_destroyed(self) -> None:
        """Stop the loop; returns once it no longer touches the surface."""
        if self._loop is not None:
            self._join(self._loop)
            self._loop = None

    def change_acceleration(self, x: float, y: float) -> None:
        if self._loop is not None:
            self._loop.change_acceleration(x, y)

    def shake(self) -> None:
        """Tap or shake: start a new round."""
        if self._loop is not None:
            self._loop.request_reset()

    def _join(self, loop: GameLoop) -> None:
        """Stop a loop, retrying the join until its thread has finished."""
        while not loop.stop():
            if self._debug:
                print("[DEBUG] Waiting for the game loop to finish its frame")
