"""Integration tests for `placeoverlay inspect` on snapshot files."""

import pytest

from placeoverlay.cli import main


SNAPSHOT_YAML = """
region: {lx: 0, ly: 0, ux: 100, uy: 100}
bins:
  - {lx: 0, ly: 0, ux: 100, uy: 100, density: 0.6, force_x: 2.0, force_y: 1.0}
cells:
  - name: u1
    cx: 50
    cy: 50
    dx: 10
    dy: 10
    pins:
      - {name: A, x: 48, y: 50, net: clk}
  - name: u2
    cx: 80
    cy: 80
    dx: 10
    dy: 10
    pins:
      - {name: A, x: 78, y: 80, net: clk}
  - {name: f1, kind: filler, cx: 20, cy: 20, dx: 6, dy: 6}
"""


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text(SNAPSHOT_YAML)
    return path


def test_inspect_summary(snapshot_file, capsys):
    assert main(["inspect", str(snapshot_file)]) == 0

    out = capsys.readouterr().out
    assert "Cells: 3" in out
    assert "Nets: 1" in out
    assert "region: 4 primitives" in out
    assert "cells: 3 primitives" in out
    assert "bins:" not in out
    assert "forces:" not in out


def test_inspect_draw_bins(snapshot_file, capsys):
    assert main(["inspect", str(snapshot_file), "--draw-bins"]) == 0

    out = capsys.readouterr().out
    assert "bins: 1 primitives" in out
    assert "forces: 1 primitives" in out


def test_inspect_pick_instance(snapshot_file, capsys):
    assert main(["inspect", str(snapshot_file), "--pick", "50", "50"]) == 0

    out = capsys.readouterr().out
    assert "Pick at (50, 50): instance" in out
    assert "Instance: u1" in out
    assert "nets: 1 primitives" in out


def test_inspect_pick_filler(snapshot_file, capsys):
    assert main(["inspect", str(snapshot_file), "--pick", "20", "20"]) == 0

    out = capsys.readouterr().out
    assert "Pick at (20, 20): internal" in out
    assert "Selected cell: f1 (filler)" in out


def test_inspect_pick_nothing(snapshot_file, capsys):
    assert main(["inspect", str(snapshot_file), "--pick", "0", "0"]) == 0
    assert "Pick at (0, 0): none" in capsys.readouterr().out


def test_inspect_custom_colors(snapshot_file, tmp_path, capsys):
    colors = tmp_path / "colors.yaml"
    colors.write_text("colors:\n  instance: '#123456'\n")
    assert main(["inspect", str(snapshot_file), "--colors", str(colors)]) == 0


def test_inspect_missing_file(tmp_path, capsys):
    assert main(["inspect", str(tmp_path / "missing.yaml")]) == 1
    assert "Error: Snapshot file not found" in capsys.readouterr().out


def test_inspect_bad_snapshot(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("cells:\n  - {name: u1, cx: 0}\n")
    assert main(["inspect", str(path)]) == 1
    assert "missing 'cy'" in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == 1


@pytest.mark.parametrize("content", ["cells: [5]\n", "cells:\n  - {name: u1, cx: 0, cy: 0, dx: 1, dy: 1, pins: [A]}\n"])
def test_inspect_malformed_entries(tmp_path, capsys, content):
    path = tmp_path / "malformed.yaml"
    path.write_text(content)
    assert main(["inspect", str(path)]) == 1
    assert "expected a mapping" in capsys.readouterr().out
