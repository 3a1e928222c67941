"""Placement snapshot model and loaders."""

from .abstraction import (
    Bin,
    CellKind,
    GCell,
    Net,
    Pin,
    PlacementSnapshot,
    Region,
)
from .snapshot_loader import load_snapshot, snapshot_from_dict

__all__ = [
    "Bin",
    "CellKind",
    "GCell",
    "Net",
    "Pin",
    "PlacementSnapshot",
    "Region",
    "load_snapshot",
    "snapshot_from_dict",
]
