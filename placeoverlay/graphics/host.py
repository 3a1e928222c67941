"""Host-side contracts for overlay renderers.

The host owns the window, frame scheduling and the pause/resume controls.
A renderer registers with an explicitly passed host instead of looking up
a process-wide GUI object.

Usage:
    gui = Gui()
    graphics = PlacementGraphics(snapshot, gui, OverlayConfig(draw_bins=True))

    for iteration in range(100):
        # ... placement step ...
        graphics.cell_plot(pause=debug_step)   # blocks until gui.resume()
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Tuple
import logging

from .painter import Painter, RecordingPainter

logger = logging.getLogger(__name__)


class Renderer(ABC):
    """An overlay the host calls back to draw and pick."""

    @abstractmethod
    def draw_objects(self, painter: Painter):
        """Draw the overlay for one frame."""

    @abstractmethod
    def select(self, layer: Optional[Any], point: Tuple[float, float]):
        """Resolve a pointer click to a selection result."""


class Host(ABC):
    """Visualization host a renderer attaches to."""

    @abstractmethod
    def register_renderer(self, renderer: Renderer):
        """Make renderer the active overlay."""

    @abstractmethod
    def redraw(self):
        """Request a new frame (non-blocking)."""

    @abstractmethod
    def pause(self):
        """Block the calling thread until the host resumes it."""

    @abstractmethod
    def status(self, message: str):
        """Show a message in the host status display."""

    @abstractmethod
    def is_active(self) -> bool:
        """Whether the host is running (False in headless mode)."""


class Gui(Host):
    """In-process host.

    Frames are drawn synchronously on redraw() into a painter produced by
    painter_factory. pause() waits on an event that resume() or shutdown()
    sets; there is no timeout. The event is consumed when pause() returns,
    so one resume releases exactly one pause.
    """

    def __init__(self, painter_factory: Callable[[], Painter] = RecordingPainter):
        self.painter_factory = painter_factory
        self.renderer: Optional[Renderer] = None
        self.last_frame: Optional[Painter] = None
        self.frames_drawn = 0
        self.status_messages: List[str] = []

        self._active = True
        self._resume_event = threading.Event()
        self._paused = threading.Event()

    def register_renderer(self, renderer: Renderer):
        if self.renderer is not None and self.renderer is not renderer:
            logger.warning(
                f"Replacing active renderer {type(self.renderer).__name__} "
                f"with {type(renderer).__name__}"
            )
        self.renderer = renderer
        logger.debug(f"Registered renderer {type(renderer).__name__}")

    def redraw(self):
        if not self._active or self.renderer is None:
            return

        painter = self.painter_factory()
        self.renderer.draw_objects(painter)
        self.last_frame = painter
        self.frames_drawn += 1

    def pause(self):
        if not self._active:
            return

        self._paused.set()
        logger.info("Paused; waiting for resume")
        try:
            self._resume_event.wait()
        finally:
            self._paused.clear()
            if self._active:
                self._resume_event.clear()

    def resume(self):
        """Release a thread blocked in pause().

        A resume that arrives while nobody is paused is kept, and the next
        pause() returns at once.
        """
        self._resume_event.set()

    @property
    def is_paused(self) -> bool:
        return self._paused.is_set()

    def wait_until_paused(self, timeout: Optional[float] = None) -> bool:
        """Wait for another thread to enter pause()."""
        return self._paused.wait(timeout)

    def status(self, message: str):
        self.status_messages.append(message)
        logger.info(message)

    def is_active(self) -> bool:
        return self._active

    def click(self, point: Tuple[float, float], layer: Optional[Any] = None):
        """Forward a pointer click to the active renderer and redraw."""
        if not self._active or self.renderer is None:
            return None

        result = self.renderer.select(layer, point)
        self.redraw()
        return result

    def shutdown(self):
        """Deactivate the host and release any paused caller."""
        self._active = False
        self._resume_event.set()
        logger.info("Host shut down")
