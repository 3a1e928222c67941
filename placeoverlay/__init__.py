"""
PlaceOverlay - Debug Overlay for Global Placement

Draws the state of an electrostatic global placer (core region, density
bins, cells, selected-cell connectivity and bin force vectors) into a host
visualization tool, and resolves pointer clicks to placed cells.
"""

__version__ = "0.1.0"

from .placement.abstraction import Bin, CellKind, GCell, Net, Pin, PlacementSnapshot, Region
from .graphics import Gui, OverlayConfig, PlacementGraphics, SelectionKind, SelectionResult

__all__ = [
    "Bin",
    "CellKind",
    "GCell",
    "Net",
    "Pin",
    "PlacementSnapshot",
    "Region",
    "Gui",
    "OverlayConfig",
    "PlacementGraphics",
    "SelectionKind",
    "SelectionResult",
]
