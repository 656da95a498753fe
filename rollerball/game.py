"""
Roller Game
===========

Game state for one play-field: a single ball, a fixed set of walls, and the
latched terminal flag.
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from rollerball.ball import Ball, Velocity
from rollerball.canvas import Canvas, TextStyle
from rollerball.config_loader import GameConfig, get_config
from rollerball.wall import Wall


class RollerGame:
    """
    Main game simulation class.

    One tick = move ball by the tilt velocity, move every wall, then
    evaluate the terminal conditions (wall hit or ball at the bottom).
    Once over, update() is inert until reset().

    Not thread-safe on its own; GameLoop serialises access.
    """

    def __init__(
        self,
        surface_width: int,
        surface_height: int,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        debug: bool = False
    ):
        """
        Initialize game.

        Args:
            surface_width: Width of the drawable surface.
            surface_height: Height of the drawable surface.
            config: Game configuration. Uses default if None.
            seed: Random seed for wall placement.
            debug: Print state transitions.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._surface_width = surface_width
        self._surface_height = surface_height
        self._rng = random.Random(seed)
        self._debug = debug

        self._banner_style = TextStyle(
            size=config.display.banner_font_size,
            color=config.display.banner_color
        )

        self._ball = Ball(surface_width, surface_height, config)

        # Evenly spaced bands, alternating initial direction
        count = config.walls.count
        band = surface_height // (count + 1)
        self._walls: List[Wall] = []
        for index in range(1, count + 1):
            initial_right = index % 2 == 0
            self._walls.append(Wall(
                self._rng.randrange(surface_width),
                band * index,
                initial_right,
                surface_width,
                surface_height,
                config
            ))

        self._is_over: bool = False
        self.reset()

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def surface_width(self) -> int:
        return self._surface_width

    @property
    def surface_height(self) -> int:
        return self._surface_height

    @property
    def ball(self) -> Ball:
        return self._ball

    @property
    def walls(self) -> List[Wall]:
        """Walls in band order (top to bottom)."""
        return self._walls

    @property
    def is_over(self) -> bool:
        """True once the round has ended, until reset."""
        return self._is_over

    @property
    def has_won(self) -> bool:
        """True while the ball touches the bottom edge (live position)."""
        return self._ball.bottom() >= self._surface_height

    def reset(self) -> None:
        """Start a new round: ball back to the top, walls to random spots."""
        self._is_over = False

        self._ball.set_center(
            self._surface_width / 2,
            self._ball.radius + self._config.ball.reset_offset
        )

        for wall in self._walls:
            wall.relocate(self._rng.randrange(self._surface_width))

        if self._debug:
            print(f"[DEBUG] New round: {self._ball}, walls={self._walls}")

    def update(self, velocity: Velocity) -> None:
        """
        Advance one tick.

        Args:
            velocity: (x, y) tilt reading applied to the ball.
        """
        if self._is_over:
            return

        self._ball.move(velocity)
        for wall in self._walls:
            wall.move()

        # Collision
        for wall in self._walls:
            if self._ball.intersects(wall):
                self._is_over = True
                if self._debug:
                    print(f"[DEBUG] Collision: {self._ball} hit {wall}")

        # Win
        if self.has_won:
            self._is_over = True
            if self._debug:
                print(f"[DEBUG] Reached bottom: {self._ball}")

    def draw(self, canvas: Canvas) -> None:
        """
        Render the current state.

        The win banner depends only on the live ball position, not on why
        the round ended.

        Args:
            canvas: Canvas to draw on.
        """
        canvas.clear(self._config.display.background_color)

        self._ball.draw(canvas)
        for wall in self._walls:
            wall.draw(canvas)

        if self.has_won:
            text = self._config.display.banner_text
            bounds = canvas.measure_text(text, self._banner_style)
            canvas.draw_text(
                text,
                (
                    self._surface_width / 2 - bounds.width / 2,
                    self._surface_height / 2 - bounds.height / 2
                ),
                self._banner_style
            )

    def get_info(self) -> Dict[str, Any]:
        """Summary of the current state, for tools and debugging."""
        return {
            "ball_center": self._ball.center,
            "ball_bottom": self._ball.bottom(),
            "walls": [
                (w.rect.left, w.rect.top, w.rect.right, w.rect.bottom, w.direction)
                for w in self._walls
            ],
            "is_over": self._is_over,
            "has_won": self.has_won,
        }
