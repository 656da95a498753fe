"""
Shared test doubles: a canvas that records draw calls, plus render targets
built on it.
"""

import os
import threading
from typing import List, Optional, Tuple

# Headless pygame for the rendering tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from rollerball.canvas import Canvas, Rect, TextStyle
from rollerball.render_target import RenderTarget, RenderTargetLost


class RecordingCanvas(Canvas):
    """Canvas that stores every call as a tuple."""

    CHAR_WIDTH = 10
    LINE_HEIGHT = 20

    def __init__(self, width: int = 800, height: int = 1200):
        self._size = (width, height)
        self.calls: List[tuple] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_circle(self, center, radius, color):
        self.calls.append(("circle", center, radius, color))

    def draw_rect(self, rect, color):
        self.calls.append(("rect", (rect.left, rect.top, rect.right, rect.bottom), color))

    def draw_text(self, text, position, style):
        self.calls.append(("text", text, position, style))

    def measure_text(self, text: str, style: TextStyle) -> Rect:
        return Rect(0, 0, len(text) * self.CHAR_WIDTH, self.LINE_HEIGHT)

    def kinds(self) -> List[str]:
        return [call[0] for call in self.calls]


class RecordingTarget(RenderTarget):
    """Render target over a RecordingCanvas; can run dry or be torn down."""

    def __init__(
        self,
        width: int = 800,
        height: int = 1200,
        max_frames: Optional[int] = None,
        available: bool = True
    ):
        self.canvas = RecordingCanvas(width, height)
        self.max_frames = max_frames
        self.available = available
        self.posted = 0
        self._destroyed = threading.Event()

    def lock_canvas(self) -> Optional[Canvas]:
        if not self.available or self._destroyed.is_set():
            return None
        if self.max_frames is not None and self.posted >= self.max_frames:
            return None
        self.canvas.calls.clear()
        return self.canvas

    def unlock_canvas_and_post(self, canvas: Canvas) -> None:
        self.posted += 1

    def destroy(self) -> None:
        self._destroyed.set()


class GatedTarget(RecordingTarget):
    """
    Holds the loop inside present until released.

    The first post goes through so GameLoop.create can size the game.
    """

    def __init__(self, width: int = 800, height: int = 1200):
        super().__init__(width, height)
        self.entered = threading.Event()
        self.release = threading.Event()

    def unlock_canvas_and_post(self, canvas: Canvas) -> None:
        if self.posted >= 1:
            self.entered.set()
            self.release.wait()
        super().unlock_canvas_and_post(canvas)


class VanishingCanvas(RecordingCanvas):
    """Canvas whose surface is released before the frame is drawn."""

    def clear(self, color):
        raise RenderTargetLost("surface released")
