"""
Ball
====

Player-controlled ball: velocity-driven motion clamped to the play-field,
and exact circle-vs-rectangle collision against walls.
"""

from __future__ import annotations

from typing import Optional, Tuple

from rollerball.canvas import Canvas
from rollerball.config_loader import GameConfig, get_config
from rollerball.wall import Wall


Velocity = Tuple[float, float]


class Ball:
    """
    Circle confined to the surface.

    Edges clamp the position; they do not reflect it. Only wall contact
    ends a round.
    """

    def __init__(
        self,
        surface_width: int,
        surface_height: int,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize ball in the top-left corner.

        Args:
            surface_width: Width of the play-field.
            surface_height: Height of the play-field.
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._surface_width = surface_width
        self._surface_height = surface_height
        self._radius = config.ball.radius
        self._color = config.ball.color

        self._x = float(self._radius)
        self._y = float(self._radius)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def center(self) -> Tuple[float, float]:
        return (self._x, self._y)

    def set_center(self, x: float, y: float) -> None:
        """Place the ball without clamping."""
        self._x = float(x)
        self._y = float(y)

    def move(self, velocity: Velocity) -> None:
        """
        Displace the ball by one tick of velocity.

        The x component is inverted: tilting the device right yields a
        negative x reading.

        Args:
            velocity: (x, y) tilt reading used as displacement.
        """
        self._x -= velocity[0]
        self._y += velocity[1]

        r = self._radius
        self._x = max(r, min(self._surface_width - r, self._x))
        self._y = max(r, min(self._surface_height - r, self._y))

    def intersects(self, wall: Wall) -> bool:
        """
        Exact circle-vs-rectangle test.

        Args:
            wall: Wall to test against.

        Returns:
            True if the closest point of the wall lies strictly inside the circle.
        """
        rect = wall.rect
        nearest_x = max(rect.left, min(self._x, rect.right))
        nearest_y = max(rect.top, min(self._y, rect.bottom))

        dx = self._x - nearest_x
        dy = self._y - nearest_y
        return dx * dx + dy * dy < self._radius * self._radius

    def bottom(self) -> float:
        """Lowest y-coordinate covered by the ball."""
        return self._y + self._radius

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_circle((self._x, self._y), self._radius, self._color)

    def __repr__(self) -> str:
        return f"Ball(center=({self._x:.1f}, {self._y:.1f}), radius={self._radius})"
