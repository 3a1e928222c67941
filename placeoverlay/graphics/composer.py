"""Frame composition for the placement overlay.

A frame is drawn as five fixed layers, each finished before the next
starts:

1. Core region boundary
2. Bin density shading (draw_bins only)
3. Placeable cells, with the selection highlighted
4. Connectivity of the selected cell
5. Bin force vectors (draw_bins only)
"""

import math
from dataclasses import dataclass
from typing import Optional
import logging

from ..placement.abstraction import PlacementSnapshot
from ..visualization_color_manager import ColorManager, get_color_manager
from .force_field import ForceFieldNormalizer
from .painter import Color, Painter
from .selection import SelectionState

logger = logging.getLogger(__name__)

LAYER_REGION = "region"
LAYER_BINS = "bins"
LAYER_CELLS = "cells"
LAYER_NETS = "nets"
LAYER_FORCES = "forces"

LAYER_ORDER = (LAYER_REGION, LAYER_BINS, LAYER_CELLS, LAYER_NETS, LAYER_FORCES)


@dataclass
class OverlayConfig:
    """Configuration for the placement overlay."""
    draw_bins: bool = False  # Density shading and force vectors

    # Density shading: channel = int(clamp(density * scale + offset)), then inverted
    density_scale: float = 50.0
    density_offset: float = 20.0
    shade_min: int = 20
    shade_max: int = 255


def shade_for_density(density: float, config: Optional[OverlayConfig] = None) -> int:
    """Gray level used to fill a bin.

    The raw channel is clamped to [shade_min, shade_max] and then inverted,
    so denser bins render darker but never fully black or fully clear.
    Infinite densities clamp to the nearest bound; NaN reads as empty.
    """
    config = config or OverlayConfig()
    raw = density * config.density_scale + config.density_offset
    if math.isnan(raw):
        raw = config.shade_min
    channel = int(max(config.shade_min, min(config.shade_max, raw)))
    return 255 - channel


class FrameComposer:
    """Draw one deterministic overlay frame from a placement snapshot."""

    def __init__(
        self,
        snapshot: PlacementSnapshot,
        selection: SelectionState,
        config: Optional[OverlayConfig] = None,
        colors: Optional[ColorManager] = None,
    ):
        self.snapshot = snapshot
        self.selection = selection
        self.config = config or OverlayConfig()
        self.colors = colors or get_color_manager()
        self.normalizer = ForceFieldNormalizer()

    def compose(self, painter: Painter):
        """Draw all layers in order onto painter."""
        self._draw_region(painter)
        if self.config.draw_bins:
            self._draw_bins(painter)
        self._draw_cells(painter)
        self._draw_nets(painter)
        if self.config.draw_bins:
            self._draw_forces(painter)

    def _begin(self, painter: Painter, layer: str):
        # Only recording painters track layers
        begin_layer = getattr(painter, "begin_layer", None)
        if begin_layer is not None:
            begin_layer(layer)

    def _draw_region(self, painter: Painter):
        region = self.snapshot.region
        if region is None:
            return

        self._begin(painter, LAYER_REGION)
        painter.set_pen(self.colors.get_color("region"), cosmetic=True)
        painter.draw_line(region.lx, region.ly, region.ux, region.ly)
        painter.draw_line(region.ux, region.ly, region.ux, region.uy)
        painter.draw_line(region.ux, region.uy, region.lx, region.uy)
        painter.draw_line(region.lx, region.uy, region.lx, region.ly)

    def _draw_bins(self, painter: Painter):
        if not self.snapshot.bins:
            return

        self._begin(painter, LAYER_BINS)
        alpha = self.colors.get_alpha("bins")
        painter.set_pen(self.colors.get_color("bin_outline"), cosmetic=True)
        for b in self.snapshot.bins:
            shade = shade_for_density(b.density, self.config)
            painter.set_brush(Color(shade, shade, shade, alpha))
            painter.draw_rect(b.lx, b.ly, b.ux, b.uy)

    def _draw_cells(self, painter: Painter):
        if not self.snapshot.cells:
            return

        self._begin(painter, LAYER_CELLS)
        alpha = self.colors.get_alpha("cells")
        instance_color = self.colors.get_color("instance").with_alpha(alpha)
        filler_color = self.colors.get_color("filler").with_alpha(alpha)
        selected_color = self.colors.get_color("selected").with_alpha(alpha)

        painter.set_pen(self.colors.get_color("cell_outline"))
        for cell in self.snapshot.cells:
            color = instance_color if cell.is_instance else filler_color
            if self.selection.is_selected(cell):
                color = selected_color

            painter.set_brush(color)
            painter.draw_rect(*cell.bounding_box())

    def _draw_nets(self, painter: Painter):
        selected = self.selection.current()
        if selected is None:
            return

        self._begin(painter, LAYER_NETS)
        painter.set_pen(self.colors.get_color("net"), cosmetic=True)
        count = 0
        for pin in selected.pins:
            if pin.net is None:
                continue
            for other in pin.net.pins:
                if other.cell is selected:
                    continue
                painter.draw_line(pin.cx, pin.cy, other.cx, other.cy)
                count += 1

        logger.debug(f"Drew {count} connections for {selected.name or 'selection'}")

    def _draw_forces(self, painter: Painter):
        if not self.snapshot.bins:
            return

        self._begin(painter, LAYER_FORCES)
        painter.set_pen(self.colors.get_color("force"), cosmetic=True)
        for segment in self.normalizer.normalize(self.snapshot.bins):
            painter.draw_line(segment.x1, segment.y1, segment.x2, segment.y2)
