"""
Canvas
======

Drawing surface abstraction used by the game objects, plus the pygame
implementation and the small geometry types both sides share.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False


Color = Tuple[int, int, int]
Point = Tuple[float, float]


@dataclass
class Rect:
    """Axis-aligned rectangle in surface coordinates."""
    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    def offset(self, dx: int, dy: int) -> None:
        """Translate by (dx, dy)."""
        self.left += dx
        self.right += dx
        self.top += dy
        self.bottom += dy

    def offset_to(self, left: int, top: int) -> None:
        """Move the top-left corner to (left, top), keeping the size."""
        self.offset(left - self.left, top - self.top)


@dataclass(frozen=True)
class TextStyle:
    """Font size and colour for text drawing."""
    size: int
    color: Color


class Canvas(ABC):
    """
    Abstract drawing surface.

    Game objects only ever draw through this interface, so the simulation
    can render to a window, an off-screen buffer, or a test recorder.
    """

    @property
    @abstractmethod
    def size(self) -> Tuple[int, int]:
        """(width, height) of the drawable area."""

    @abstractmethod
    def clear(self, color: Color) -> None:
        ...

    @abstractmethod
    def draw_circle(self, center: Point, radius: float, color: Color) -> None:
        ...

    @abstractmethod
    def draw_rect(self, rect: Rect, color: Color) -> None:
        ...

    @abstractmethod
    def draw_text(self, text: str, position: Point, style: TextStyle) -> None:
        """Draw text with its bounding box's top-left corner at position."""

    @abstractmethod
    def measure_text(self, text: str, style: TextStyle) -> Rect:
        """Bounding box of text drawn at the origin."""


class PygameCanvas(Canvas):
    """Canvas backed by a pygame Surface."""

    def __init__(self, surface: "pygame.Surface"):
        """
        Initialize canvas.

        Args:
            surface: Surface to draw on (display or off-screen).
        """
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame is required for PygameCanvas")

        self._surface = surface
        self._fonts: Dict[int, pygame.font.Font] = {}

    @property
    def surface(self) -> "pygame.Surface":
        return self._surface

    @property
    def size(self) -> Tuple[int, int]:
        return self._surface.get_size()

    def _get_font(self, size: int) -> "pygame.font.Font":
        """Fonts are cached per size."""
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def clear(self, color: Color) -> None:
        self._surface.fill(color)

    def draw_circle(self, center: Point, radius: float, color: Color) -> None:
        pygame.draw.circle(
            self._surface,
            color,
            (int(round(center[0])), int(round(center[1]))),
            int(round(radius))
        )

    def draw_rect(self, rect: Rect, color: Color) -> None:
        pygame.draw.rect(
            self._surface,
            color,
            pygame.Rect(rect.left, rect.top, rect.width, rect.height)
        )

    def draw_text(self, text: str, position: Point, style: TextStyle) -> None:
        rendered = self._get_font(style.size).render(text, True, style.color)
        self._surface.blit(rendered, (int(position[0]), int(position[1])))

    def measure_text(self, text: str, style: TextStyle) -> Rect:
        width, height = self._get_font(style.size).size(text)
        return Rect(0, 0, width, height)
