"""
Wall
====

Horizontally oscillating obstacle that bounces between the surface edges.
"""

from __future__ import annotations

from typing import Optional

from rollerball.canvas import Canvas, Rect
from rollerball.config_loader import GameConfig, get_config


class Wall:
    """
    Axis-aligned moving wall.

    Dimensions are a fixed fraction of the surface. Each tick the wall
    shifts by its signed step; on crossing an edge it is snapped back
    onto the edge and its direction flips.
    """

    def __init__(
        self,
        x: int,
        y: int,
        initial_direction_right: bool,
        surface_width: int,
        surface_height: int,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize wall.

        Args:
            x: Requested left edge.
            y: Requested top edge.
            initial_direction_right: Whether the wall starts moving right.
            surface_width: Width of the play-field.
            surface_height: Height of the play-field.
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._surface_width = surface_width
        self._color = config.walls.color

        width = surface_width // config.walls.width_divisor
        height = surface_height // config.walls.height_divisor

        # Keep the wall fully on the surface
        x = min(x, surface_width - width)
        y = min(y, surface_height - height)

        self._rect = Rect(x, y, x + width, y + height)
        self._direction = config.walls.speed if initial_direction_right else -config.walls.speed

    @property
    def rect(self) -> Rect:
        """Current bounding box."""
        return self._rect

    @property
    def direction(self) -> int:
        """Signed horizontal step applied on each move."""
        return self._direction

    def relocate(self, x: int) -> None:
        """
        Move the wall to a new horizontal position.

        Vertical band and direction are left untouched.

        Args:
            x: Requested left edge.
        """
        x = min(x, self._surface_width - self._rect.width)
        self._rect.offset_to(x, self._rect.top)

    def move(self) -> None:
        """Advance one tick, bouncing off the surface edges."""
        self._rect.offset(self._direction, 0)

        if self._rect.right > self._surface_width:
            self._rect.offset_to(self._surface_width - self._rect.width, self._rect.top)
            self._direction = -self._direction
        elif self._rect.left < 0:
            self._rect.offset_to(0, self._rect.top)
            self._direction = -self._direction

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_rect(self._rect, self._color)

    def __repr__(self) -> str:
        r = self._rect
        return f"Wall(rect=({r.left}, {r.top}, {r.right}, {r.bottom}), direction={self._direction})"
