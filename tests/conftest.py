"""
Shared test fixtures for PlaceOverlay tests.

Provides reusable snapshots, painters and host fixtures for testing
picking, frame composition and the renderer entry points.
"""

import pytest

from placeoverlay.placement.abstraction import (
    Bin,
    CellKind,
    GCell,
    Net,
    Pin,
    PlacementSnapshot,
    Region,
)
from placeoverlay.graphics.painter import RecordingPainter
from placeoverlay.graphics.host import Gui


def make_instance(name: str, cx: float, cy: float, dx: float = 10.0, dy: float = 10.0) -> GCell:
    """Instance cell whose external handle is its name."""
    return GCell(cx=cx, cy=cy, dx=dx, dy=dy, kind=CellKind.INSTANCE, instance=name, name=name)


def make_filler(name: str, cx: float, cy: float, dx: float = 10.0, dy: float = 10.0) -> GCell:
    return GCell(cx=cx, cy=cy, dx=dx, dy=dy, kind=CellKind.FILLER, name=name)


@pytest.fixture
def single_cell_snapshot() -> PlacementSnapshot:
    """Region (0,0)-(100,100), one bin over it, one 10x10 instance at (50,50)."""
    snapshot = PlacementSnapshot(region=Region(0, 0, 100, 100))
    snapshot.bins.append(Bin(0, 0, 100, 100, density=0.6))
    snapshot.add_cell(make_instance("u1", 50, 50))
    return snapshot


@pytest.fixture
def grid_bins():
    """A 2x2 grid of 50x50 bins with different forces."""
    return [
        Bin(0, 0, 50, 50, density=0.2, electro_force_x=3.0, electro_force_y=4.0),
        Bin(50, 0, 100, 50, density=1.5, electro_force_x=-1.0, electro_force_y=0.0),
        Bin(0, 50, 50, 100, density=-0.5, electro_force_x=0.0, electro_force_y=-2.5),
        Bin(50, 50, 100, 100, density=10.0, electro_force_x=0.0, electro_force_y=0.0),
    ]


@pytest.fixture
def connected_snapshot() -> PlacementSnapshot:
    """Cell A with pins p1 (on net N) and p2 (no net); N also reaches B and C.

    Layout:
        A at (20, 20), B at (60, 20), C at (60, 60)
        N = {p1, p3, p4}
    """
    snapshot = PlacementSnapshot(region=Region(0, 0, 100, 100))

    a = snapshot.add_cell(make_instance("A", 20, 20))
    b = snapshot.add_cell(make_instance("B", 60, 20))
    c = snapshot.add_cell(make_filler("C", 60, 60))

    p1 = a.add_pin(Pin(18, 20, name="p1"))
    a.add_pin(Pin(22, 20, name="p2"))
    p3 = b.add_pin(Pin(58, 20, name="p3"))
    p4 = c.add_pin(Pin(60, 58, name="p4"))

    net = snapshot.add_net(Net(name="N"))
    for pin in (p1, p3, p4):
        net.add_pin(pin)

    return snapshot


@pytest.fixture
def painter() -> RecordingPainter:
    return RecordingPainter()


@pytest.fixture
def gui():
    """An in-process host, shut down after the test."""
    host = Gui()
    yield host
    host.shutdown()
