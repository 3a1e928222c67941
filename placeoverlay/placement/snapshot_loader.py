"""
Placement Snapshot Loader

Builds a PlacementSnapshot from a YAML description, for inspecting a
captured placer state offline.

File Format (YAML):
```yaml
region: {lx: 0, ly: 0, ux: 100, uy: 100}
bins:
  - {lx: 0, ly: 0, ux: 50, uy: 50, density: 0.6, force_x: 1.0, force_y: -2.0}
cells:
  - name: u1
    kind: instance
    instance: u1
    cx: 20
    cy: 20
    dx: 10
    dy: 6
    pins:
      - {name: A, x: 18, y: 20, net: n1}
  - {name: f1, kind: filler, cx: 70, cy: 70, dx: 4, dy: 4}
```

Nets are created from pin net names in file order. An instance cell
without an explicit `instance` handle uses its name.
"""

from pathlib import Path
from typing import Any, Dict, Union
import logging

import yaml

from .abstraction import Bin, CellKind, GCell, Net, Pin, PlacementSnapshot, Region

logger = logging.getLogger(__name__)


def _require_mapping(entry: Any, where: str) -> Dict[str, Any]:
    if not isinstance(entry, dict):
        raise ValueError(f"{where}: expected a mapping, got {entry!r}")
    return entry


def _sequence(value: Any, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{where}: expected a list, got {value!r}")
    return value


def _number(entry: Dict[str, Any], key: str, where: str, default=None) -> float:
    value = _require_mapping(entry, where).get(key, default)
    if value is None:
        raise ValueError(f"{where}: missing '{key}'")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{where}: '{key}' must be a number, got {value!r}")


def _parse_kind(value: Any, where: str) -> CellKind:
    try:
        return CellKind(str(value).lower())
    except ValueError:
        valid = ", ".join(k.value for k in CellKind)
        raise ValueError(f"{where}: unknown kind {value!r} (expected one of: {valid})")


def snapshot_from_dict(data: Dict[str, Any]) -> PlacementSnapshot:
    """Build a snapshot from parsed YAML data.

    Raises:
        ValueError: If an entry is missing a field or has a bad value
    """
    if not isinstance(data, dict):
        raise ValueError("Snapshot must be a mapping")

    snapshot = PlacementSnapshot()

    region = data.get("region")
    if region is not None:
        snapshot.region = Region(
            lx=_number(region, "lx", "region"),
            ly=_number(region, "ly", "region"),
            ux=_number(region, "ux", "region"),
            uy=_number(region, "uy", "region"),
        )

    for i, entry in enumerate(_sequence(data.get("bins"), "bins")):
        where = f"bins[{i}]"
        snapshot.bins.append(Bin(
            lx=_number(entry, "lx", where),
            ly=_number(entry, "ly", where),
            ux=_number(entry, "ux", where),
            uy=_number(entry, "uy", where),
            density=_number(entry, "density", where, 0.0),
            electro_force_x=_number(entry, "force_x", where, 0.0),
            electro_force_y=_number(entry, "force_y", where, 0.0),
        ))

    nets: Dict[str, Net] = {}
    for i, entry in enumerate(_sequence(data.get("cells"), "cells")):
        entry = _require_mapping(entry, f"cells[{i}]")
        name = str(entry.get("name", f"cell_{i}"))
        where = f"cells[{i}] ({name})"
        kind = _parse_kind(entry.get("kind", "instance"), where)
        if kind == CellKind.INSTANCE:
            instance = entry.get("instance", name)
        else:
            instance = entry.get("instance")

        cx = _number(entry, "cx", where)
        cy = _number(entry, "cy", where)
        dx = _number(entry, "dx", where)
        dy = _number(entry, "dy", where)
        try:
            cell = GCell(cx=cx, cy=cy, dx=dx, dy=dy, kind=kind, instance=instance, name=name)
        except ValueError as e:
            raise ValueError(f"{where}: {e}")

        for j, pin_entry in enumerate(_sequence(entry.get("pins"), f"{where} pins")):
            pin_where = f"{where} pin {j}"
            pin_entry = _require_mapping(pin_entry, pin_where)
            pin = cell.add_pin(Pin(
                cx=_number(pin_entry, "x", pin_where),
                cy=_number(pin_entry, "y", pin_where),
                name=str(pin_entry.get("name", j)),
            ))
            net_name = pin_entry.get("net")
            if net_name is not None:
                net_name = str(net_name)
                if net_name not in nets:
                    nets[net_name] = snapshot.add_net(Net(name=net_name))
                nets[net_name].add_pin(pin)

        snapshot.add_cell(cell)

    logger.debug(
        f"Built snapshot: {len(snapshot.bins)} bins, "
        f"{len(snapshot.cells)} cells, {len(snapshot.nets)} nets"
    )
    return snapshot


def load_snapshot(path: Union[str, Path]) -> PlacementSnapshot:
    """Load a placement snapshot from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid YAML or has bad entries
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}")

    snapshot = snapshot_from_dict(data or {})
    logger.info(f"Loaded snapshot from {path}")
    return snapshot
