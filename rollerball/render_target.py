"""
Render Targets
==============

Lock / draw / present protocol around each frame, with a pygame window
implementation for interactive play and an off-screen one for headless
runs and tests.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from rollerball.canvas import Canvas, PygameCanvas


class RenderTargetLost(RuntimeError):
    """The drawable went away while a frame was being drawn or presented."""


# Errors the game loop treats as the end of rendering
if PYGAME_AVAILABLE:
    RENDER_ERRORS = (RenderTargetLost, pygame.error)
else:
    RENDER_ERRORS = (RenderTargetLost,)


class RenderTarget(ABC):
    """
    Something the game loop can draw frames onto.

    lock_canvas() returns None when the target is not ready or has been
    torn down; callers treat that as the end of rendering, not an error.
    A target torn down mid-frame may instead raise one of RENDER_ERRORS
    from drawing or presenting, which the loop also treats as the end.
    """

    @abstractmethod
    def lock_canvas(self) -> Optional[Canvas]:
        """Obtain the drawable for the next frame, or None if unavailable."""

    @abstractmethod
    def unlock_canvas_and_post(self, canvas: Canvas) -> None:
        """Present the frame drawn on canvas."""


class PygameWindowTarget(RenderTarget):
    """
    The pygame display window.

    Presenting flips the display and ticks a clock at the refresh rate,
    which paces the game loop the way vsync would.

    The window is created on the calling thread but flipped from the game
    loop thread. SDL allows that on Linux and Windows; on macOS display
    calls must stay on the main thread, so this target is not usable there.
    """

    def __init__(
        self,
        width: int,
        height: int,
        refresh_rate: int = 60,
        title: str = "Rollerball"
    ):
        """
        Open the window. Must be called from the main thread.

        Args:
            width: Window width.
            height: Window height.
            refresh_rate: Presents per second; 0 disables pacing.
            title: Window caption.
        """
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        if not pygame.get_init():
            pygame.init()

        self._screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self._clock = pygame.time.Clock()
        self._refresh_rate = refresh_rate
        self._canvas = PygameCanvas(self._screen)
        self._destroyed = threading.Event()

    @property
    def size(self) -> Tuple[int, int]:
        return self._screen.get_size()

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed.is_set()

    def lock_canvas(self) -> Optional[Canvas]:
        if self._destroyed.is_set():
            return None
        try:
            if pygame.display.get_surface() is None:
                return None
        except pygame.error:
            return None
        return self._canvas

    def unlock_canvas_and_post(self, canvas: Canvas) -> None:
        if self._destroyed.is_set():
            return
        try:
            pygame.display.flip()
        except pygame.error:
            # Display went away mid-frame
            self._destroyed.set()
            return
        if self._refresh_rate > 0:
            self._clock.tick(self._refresh_rate)

    def destroy(self) -> None:
        """Mark the window as torn down; later lock_canvas() calls return None."""
        self._destroyed.set()


class OffscreenTarget(RenderTarget):
    """
    In-memory pygame surface.

    Optionally stops handing out canvases after max_frames presents, which
    lets a headless loop end on its own.
    """

    def __init__(self, width: int, height: int, max_frames: Optional[int] = None):
        """
        Initialize off-screen target.

        Args:
            width: Surface width.
            height: Surface height.
            max_frames: Frames to present before reporting unavailable. None = unlimited.
        """
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame is required for OffscreenTarget")

        self._surface = pygame.Surface((width, height))
        self._canvas = PygameCanvas(self._surface)
        self._max_frames = max_frames
        self._frames_posted = 0
        self._destroyed = threading.Event()

    @property
    def size(self) -> Tuple[int, int]:
        return self._surface.get_size()

    @property
    def surface(self) -> "pygame.Surface":
        return self._surface

    @property
    def frames_posted(self) -> int:
        return self._frames_posted

    def lock_canvas(self) -> Optional[Canvas]:
        if self._destroyed.is_set():
            return None
        if self._max_frames is not None and self._frames_posted >= self._max_frames:
            return None
        return self._canvas

    def unlock_canvas_and_post(self, canvas: Canvas) -> None:
        self._frames_posted += 1

    def destroy(self) -> None:
        self._destroyed.set()

    def capture_frame(self) -> np.ndarray:
        """
        Copy the last frame as RGB.

        Returns:
            (height, width, 3) uint8 array.
        """
        array = pygame.surfarray.array3d(self._surface)
        return np.transpose(array, (1, 0, 2)).astype(np.uint8)
