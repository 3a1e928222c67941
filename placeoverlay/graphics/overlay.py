"""Placement overlay renderer.

PlacementGraphics is what a global placer constructs when debug graphics
are requested. It registers itself with the host, draws the overlay
frames and handles point selection. Every entry point is a no-op while no
active host is attached.
"""

from typing import Any, Optional, Tuple
import logging

from ..placement.abstraction import PlacementSnapshot
from ..visualization_color_manager import ColorManager
from .composer import FrameComposer, OverlayConfig
from .host import Host, Renderer
from .painter import Painter
from .picker import SelectionResult, SpatialPicker
from .selection import SelectionState

logger = logging.getLogger(__name__)


class PlacementGraphics(Renderer):
    """Debug overlay for a placement snapshot."""

    def __init__(
        self,
        snapshot: PlacementSnapshot,
        host: Optional[Host],
        config: Optional[OverlayConfig] = None,
        colors: Optional[ColorManager] = None,
    ):
        """
        Args:
            snapshot: Placement state to visualize, owned by the placer
            host: Visualization host, or None when running headless
            config: Overlay options (default: bins off)
            colors: Color configuration (default: packaged colors)
        """
        self.snapshot = snapshot
        self.host = host
        self.config = config or OverlayConfig()
        self.selection = SelectionState()
        self.picker = SpatialPicker(self.selection)
        self.composer = FrameComposer(snapshot, self.selection, self.config, colors)

        if self.is_host_active():
            self.host.register_renderer(self)

    def is_host_active(self) -> bool:
        return self.host is not None and self.host.is_active()

    def draw_objects(self, painter: Painter):
        if not self.is_host_active():
            return
        self.composer.compose(painter)

    def select(
        self, layer: Optional[Any], point: Tuple[float, float]
    ) -> SelectionResult:
        if not self.is_host_active():
            return SelectionResult.none()
        return self.picker.pick(self.snapshot.cells, point, layer)

    def status(self, message: str):
        if self.is_host_active():
            self.host.status(message)

    def request_redraw(self):
        if self.is_host_active():
            self.host.redraw()

    def request_redraw_and_wait(self):
        """Redraw, then block until the host resumes."""
        if not self.is_host_active():
            return
        self.host.redraw()
        self.host.pause()

    def cell_plot(self, pause: bool = False):
        """Show the current cell placement, optionally pausing the placer."""
        if pause:
            self.request_redraw_and_wait()
        else:
            self.request_redraw()

    def clear_selection(self):
        """Drop the selection, e.g. before the placer destroys cells."""
        self.selection.clear()
