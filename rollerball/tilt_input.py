"""
Tilt Input
==========

Turns raw accelerometer samples into velocity updates and shake-triggered
resets.
"""

from __future__ import annotations

from typing import Callable, Optional

from rollerball.config_loader import GameConfig, get_config


class ShakeDetector:
    """
    Flags a shake when the squared acceleration magnitude jumps.

    The previous reading starts at plain gravity, not gravity squared.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        if config is None:
            config = get_config()

        self._threshold = config.input.shake_threshold
        self._initial = config.input.gravity
        self._last = self._initial

    @property
    def threshold(self) -> float:
        return self._threshold

    def feed(self, x: float, y: float, z: float) -> bool:
        """
        Record a sample.

        Returns:
            True if this sample is a shake.
        """
        current = x * x + y * y + z * z
        delta = current - self._last
        self._last = current
        return abs(delta) > self._threshold

    def reset(self) -> None:
        self._last = self._initial


class TiltSensorListener:
    """
    Accelerometer listener.

    Forwards (x, y) as the ball velocity and calls on_shake when the
    detector fires. z only feeds shake detection.
    """

    def __init__(
        self,
        on_tilt: Callable[[float, float], None],
        on_shake: Callable[[], None],
        config: Optional[GameConfig] = None
    ):
        """
        Initialize listener.

        Args:
            on_tilt: Receives (x, y) for every sample.
            on_shake: Called when a shake is detected.
            config: Game configuration. Uses default if None.
        """
        self._on_tilt = on_tilt
        self._on_shake = on_shake
        self._detector = ShakeDetector(config)

    def on_sensor_changed(self, x: float, y: float, z: float) -> None:
        self._on_tilt(x, y)
        if self._detector.feed(x, y, z):
            self._on_shake()
