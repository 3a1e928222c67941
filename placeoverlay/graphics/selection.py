"""Current-selection slot for the placement overlay."""

import weakref
from typing import Optional

from ..placement.abstraction import GCell


class SelectionState:
    """Holds at most one selected cell without owning it.

    The cell belongs to the placement engine. Only a weak reference is kept,
    so a cell destroyed by the engine reads back as no selection.
    """

    def __init__(self):
        self._ref: Optional[weakref.ref] = None

    def clear(self):
        self._ref = None

    def set(self, cell: Optional[GCell]):
        self._ref = weakref.ref(cell) if cell is not None else None

    def current(self) -> Optional[GCell]:
        if self._ref is None:
            return None
        return self._ref()

    @property
    def is_empty(self) -> bool:
        return self.current() is None

    def is_selected(self, cell: GCell) -> bool:
        return cell is not None and self.current() is cell

    def __repr__(self):
        cell = self.current()
        if cell is None:
            return "SelectionState(empty)"
        return f"SelectionState({cell.name or (cell.cx, cell.cy)})"
