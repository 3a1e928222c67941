"""
Placement Snapshot Abstraction

Read-only view of the placement engine state consumed by the overlay:
the core region, density bins, placeable cells (gCells), their pins and
the nets connecting them. The engine owns and mutates these objects; the
overlay only reads them while drawing a frame or resolving a pick.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple


class CellKind(Enum):
    """Kinds of placeable cells."""
    INSTANCE = "instance"  # Real design instance
    FILLER = "filler"      # Pads free space during density spreading


@dataclass
class Region:
    """Core region boundary (axis-aligned)."""
    lx: float
    ly: float
    ux: float
    uy: float

    @property
    def width(self) -> float:
        return self.ux - self.lx

    @property
    def height(self) -> float:
        return self.uy - self.ly


@dataclass
class Bin:
    """A density bin with its aggregated electrostatic force."""
    lx: float
    ly: float
    ux: float
    uy: float
    density: float = 0.0
    electro_force_x: float = 0.0
    electro_force_y: float = 0.0

    @property
    def dx(self) -> float:
        return self.ux - self.lx

    @property
    def dy(self) -> float:
        return self.uy - self.ly

    @property
    def cx(self) -> float:
        return (self.lx + self.ux) / 2

    @property
    def cy(self) -> float:
        return (self.ly + self.uy) / 2


@dataclass(eq=False)
class Pin:
    """A connection point on a cell, member of at most one net."""
    cx: float
    cy: float
    name: str = ""
    cell: Optional["GCell"] = None
    net: Optional["Net"] = None


@dataclass(eq=False)
class GCell:
    """A placeable cell: either a design instance or a filler.

    Cells compare by identity, so the same geometry at two list positions
    still counts as two distinct objects for selection purposes.
    """
    cx: float
    cy: float
    dx: float
    dy: float
    kind: CellKind = CellKind.INSTANCE
    instance: Any = None  # External instance handle, INSTANCE kind only
    name: str = ""
    pins: List[Pin] = field(default_factory=list)

    def __post_init__(self):
        if self.kind == CellKind.INSTANCE and self.instance is None:
            raise ValueError(f"Instance cell '{self.name}' requires an instance handle")
        if self.kind == CellKind.FILLER and self.instance is not None:
            raise ValueError(f"Filler cell '{self.name}' cannot carry an instance handle")
        for pin in self.pins:
            pin.cell = self

    @property
    def is_instance(self) -> bool:
        return self.kind == CellKind.INSTANCE

    @property
    def is_filler(self) -> bool:
        return self.kind == CellKind.FILLER

    def add_pin(self, pin: Pin) -> Pin:
        """Attach a pin to this cell."""
        pin.cell = self
        self.pins.append(pin)
        return pin

    def bounding_box(self) -> Tuple[float, float, float, float]:
        """
        Get the axis-aligned bounding box of the cell.

        Returns:
            (xl, yl, xh, yh) from the center plus/minus half the extents
        """
        hw, hh = self.dx / 2, self.dy / 2
        return (self.cx - hw, self.cy - hh, self.cx + hw, self.cy + hh)

    def contains_point(self, x: float, y: float) -> bool:
        """Check if point lies inside the cell, edges included."""
        xl, yl, xh, yh = self.bounding_box()
        return xl <= x <= xh and yl <= y <= yh


@dataclass(eq=False)
class Net:
    """A connectivity group of pins."""
    name: str
    pins: List[Pin] = field(default_factory=list)

    def add_pin(self, pin: Pin) -> Pin:
        """Add a pin to this net, linking both directions."""
        if pin.net is not None and pin.net is not self:
            raise ValueError(
                f"Pin '{pin.name}' already belongs to net '{pin.net.name}'"
            )
        if pin.net is None:
            pin.net = self
            self.pins.append(pin)
        return pin


@dataclass
class PlacementSnapshot:
    """Placement state visible to the overlay for one frame.

    Cell order is the natural iteration order used by picking and drawing.
    """
    region: Optional[Region] = None
    bins: List[Bin] = field(default_factory=list)
    cells: List[GCell] = field(default_factory=list)
    nets: List[Net] = field(default_factory=list)

    def add_cell(self, cell: GCell) -> GCell:
        self.cells.append(cell)
        return cell

    def add_net(self, net: Net) -> Net:
        self.nets.append(net)
        return net

    def remove_cell(self, cell: GCell):
        """Remove a cell and detach its pins from their nets."""
        self.cells.remove(cell)
        for pin in cell.pins:
            if pin.net is not None:
                pin.net.pins.remove(pin)
                pin.net = None

    def get_net(self, name: str) -> Optional[Net]:
        for net in self.nets:
            if net.name == name:
                return net
        return None
