"""Point-based cell picking for interactive inspection.

Picking is a linear scan over the snapshot cells in their natural order.
Each containing cell replaces the running match, so the last match wins,
except that an instance cell ends the scan the moment it is found.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Tuple
import logging

from ..placement.abstraction import GCell
from .selection import SelectionState

logger = logging.getLogger(__name__)


class SelectionKind(Enum):
    """Outcome of a pick."""
    NONE = "none"          # Nothing under the point, or pick declined
    INSTANCE = "instance"  # Matched a design instance, handle available
    INTERNAL = "internal"  # Matched a filler, no external handle


@dataclass(frozen=True)
class SelectionResult:
    """Pick result reported back to the host."""
    kind: SelectionKind = SelectionKind.NONE
    handle: Any = None

    @classmethod
    def none(cls) -> "SelectionResult":
        return cls(SelectionKind.NONE)

    @classmethod
    def instance(cls, handle: Any) -> "SelectionResult":
        return cls(SelectionKind.INSTANCE, handle)

    @classmethod
    def internal(cls) -> "SelectionResult":
        return cls(SelectionKind.INTERNAL)

    def __bool__(self):
        return self.kind == SelectionKind.INSTANCE


class SpatialPicker:
    """Resolve a layout point to a cell and update the selection."""

    def __init__(self, selection: SelectionState):
        self.selection = selection

    def pick(
        self,
        cells: Sequence[GCell],
        point: Tuple[float, float],
        layer: Optional[Any] = None,
    ) -> SelectionResult:
        """
        Find the cell under a point.

        Args:
            cells: Cells in iteration order
            point: (x, y) in layout coordinates
            layer: Host layer discriminator. Any non-None value declines the
                pick, which only applies to the layer-independent view.

        Returns:
            SelectionResult describing the match
        """
        self.selection.clear()

        if layer is not None:
            return SelectionResult.none()

        x, y = point
        match: Optional[GCell] = None
        for cell in cells:
            if not cell.contains_point(x, y):
                continue

            match = cell
            if cell.is_instance:
                self.selection.set(cell)
                logger.debug(f"Picked instance {cell.name or cell.instance} at ({x}, {y})")
                return SelectionResult.instance(cell.instance)

        if match is None:
            return SelectionResult.none()

        self.selection.set(match)
        logger.debug(f"Picked filler {match.name} at ({x}, {y})")
        return SelectionResult.internal()
