"""Tests for point-based cell picking."""

import pytest

from placeoverlay.placement.abstraction import CellKind, GCell
from placeoverlay.graphics.picker import SelectionKind, SelectionResult, SpatialPicker
from placeoverlay.graphics.selection import SelectionState


def instance(name, cx=50.0, cy=50.0, dx=10.0, dy=10.0):
    return GCell(cx=cx, cy=cy, dx=dx, dy=dy, kind=CellKind.INSTANCE, instance=f"inst:{name}", name=name)


def filler(name, cx=50.0, cy=50.0, dx=10.0, dy=10.0):
    return GCell(cx=cx, cy=cy, dx=dx, dy=dy, kind=CellKind.FILLER, name=name)


@pytest.fixture
def selection():
    return SelectionState()


@pytest.fixture
def picker(selection):
    return SpatialPicker(selection)


class TestContainment:
    """Tests for the inclusive bounding-box test."""

    def test_center_hit(self, picker, selection):
        cell = instance("u1")
        result = picker.pick([cell], (50, 50))
        assert result.kind == SelectionKind.INSTANCE
        assert result.handle == "inst:u1"
        assert selection.current() is cell

    @pytest.mark.parametrize("point", [(45, 45), (55, 55), (45, 55), (55, 50)])
    def test_edges_are_inclusive(self, picker, point):
        result = picker.pick([instance("u1")], point)
        assert result.kind == SelectionKind.INSTANCE

    @pytest.mark.parametrize("point", [(44.9, 50), (50, 55.1), (0, 0), (100, 100)])
    def test_outside(self, picker, selection, point):
        result = picker.pick([instance("u1")], point)
        assert result == SelectionResult.none()
        assert selection.is_empty

    def test_no_cells(self, picker, selection):
        assert picker.pick([], (0, 0)).kind == SelectionKind.NONE
        assert selection.is_empty


class TestLayerDiscriminator:
    """A layer-specific pick always declines."""

    @pytest.mark.parametrize("layer", ["metal1", 0, object()])
    def test_declines(self, picker, selection, layer):
        result = picker.pick([instance("u1")], (50, 50), layer=layer)
        assert result.kind == SelectionKind.NONE
        assert selection.is_empty

    def test_decline_clears_previous_selection(self, picker, selection):
        cell = instance("u1")
        picker.pick([cell], (50, 50))
        assert selection.current() is cell

        picker.pick([cell], (50, 50), layer="metal1")
        assert selection.is_empty


class TestTieBreak:
    """Last match wins, but an instance ends the scan."""

    def test_last_filler_wins(self, picker, selection):
        f1, f2 = filler("f1"), filler("f2")
        result = picker.pick([f1, f2], (50, 50))
        assert result.kind == SelectionKind.INTERNAL
        assert result.handle is None
        assert selection.current() is f2

    def test_instance_after_filler_wins(self, picker, selection):
        f1, u1 = filler("f1"), instance("u1")
        result = picker.pick([f1, u1], (50, 50))
        assert result.kind == SelectionKind.INSTANCE
        assert result.handle == "inst:u1"
        assert selection.current() is u1

    def test_instance_before_filler_stops_scan(self, picker, selection):
        u1, f1 = instance("u1"), filler("f1")
        result = picker.pick([u1, f1], (50, 50))
        assert result.handle == "inst:u1"
        assert selection.current() is u1

    def test_first_instance_wins_over_later_instance(self, picker, selection):
        u1, u2 = instance("u1"), instance("u2")
        result = picker.pick([u1, u2], (50, 50))
        assert result.handle == "inst:u1"
        assert selection.current() is u1

    def test_non_containing_cells_ignored(self, picker, selection):
        far = instance("far", cx=10, cy=10)
        f1 = filler("f1")
        result = picker.pick([f1, far], (50, 50))
        assert result.kind == SelectionKind.INTERNAL
        assert selection.current() is f1


class TestSelectionResult:

    def test_truthiness(self):
        assert SelectionResult.instance("x")
        assert not SelectionResult.internal()
        assert not SelectionResult.none()
