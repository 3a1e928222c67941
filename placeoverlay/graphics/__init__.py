"""Overlay rendering, picking and host integration."""

from .painter import (
    Color,
    DrawCommand,
    Painter,
    Pen,
    RecordingPainter,
)
from .force_field import ForceFieldNormalizer, ForceSegment
from .selection import SelectionState
from .picker import SelectionKind, SelectionResult, SpatialPicker
from .composer import FrameComposer, OverlayConfig, shade_for_density
from .host import Gui, Host, Renderer
from .overlay import PlacementGraphics

__all__ = [
    "Color",
    "DrawCommand",
    "Painter",
    "Pen",
    "RecordingPainter",
    "ForceFieldNormalizer",
    "ForceSegment",
    "SelectionState",
    "SelectionKind",
    "SelectionResult",
    "SpatialPicker",
    "FrameComposer",
    "OverlayConfig",
    "shade_for_density",
    "Gui",
    "Host",
    "Renderer",
    "PlacementGraphics",
]
