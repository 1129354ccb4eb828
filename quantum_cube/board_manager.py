"""Board state for the quantum cube.

The :class:`Board` is the single owner of the 27 cells and of the ordered
marker registry. Cells refer to their marker by id and markers refer to
their cell by coordinate; neither holds a pointer to the other.

Board methods trust their callers: moves are expected to have passed
:func:`quantum_cube.rules.validator.can_place` first, and a move that did not
is rejected with :class:`InvalidMoveError` rather than silently ignored.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .errors import InvalidMoveError, InvalidStateError
from .models import (
    CellState,
    CellStatus,
    Coordinate,
    CoordinateLike,
    Marker,
    MarkerKind,
    MoveOutcome,
    SymbolKind,
    all_coordinates,
)

__all__ = ["Board", "Cell"]

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    """One grid position: its symbolic state and at most one marker id."""
    coordinate: Coordinate
    state: CellState
    marker_id: int | None = None


class Board:
    """The 3x3x3 cube of cells plus the registry of placed markers.

    The registry keeps insertion order. Pending markers and the inert
    records left behind by collapsed markers live side by side; destroyed
    markers are removed.
    """

    def __init__(self) -> None:
        self._cells: dict[Coordinate, Cell] = {
            coord: Cell(coordinate=coord, state=CellState.empty())
            for coord in all_coordinates()
        }
        self._markers: list[Marker] = []
        self._next_marker_id = 1

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def cell(self, coordinate: CoordinateLike) -> Cell:
        return self._cells[Coordinate.parse(coordinate)]

    def cell_state(self, coordinate: CoordinateLike) -> CellState:
        """Return the state of the cell at ``coordinate``."""
        return self.cell(coordinate).state

    def cells(self) -> Iterator[Cell]:
        """Iterate cells in x, y, z order."""
        return iter(self._cells.values())

    @property
    def markers(self) -> tuple[Marker, ...]:
        """Full registry in insertion order, collapsed records included."""
        return tuple(self._markers)

    def pending_markers(self) -> list[Marker]:
        """Markers still awaiting a collapse, in registry order."""
        return [m for m in self._markers if not m.collapsed]

    def get_marker(self, marker_id: int) -> Marker | None:
        for marker in self._markers:
            if marker.id == marker_id:
                return marker
        return None

    def marker_for(self, coordinate: CoordinateLike) -> Marker | None:
        """Return the marker owned by the cell at ``coordinate``, if any."""
        cell = self.cell(coordinate)
        if cell.marker_id is None:
            return None
        return self.get_marker(cell.marker_id)

    def summary(self) -> dict[str, int]:
        """Count cells by status."""
        counts = {status.value: 0 for status in CellStatus}
        for cell in self._cells.values():
            counts[cell.state.status.value] += 1
        return counts

    def snapshot(self) -> tuple:
        """Hashable structural summary of cells and registry.

        Two snapshots compare equal iff every cell state, every cell's
        marker id and the ordered registry are identical.
        """
        cells = tuple(
            (coord.as_tuple(), cell.state.status.value,
             cell.state.symbol.value if cell.state.symbol else None,
             cell.marker_id)
            for coord, cell in self._cells.items()
        )
        registry = tuple(
            (m.id, m.kind.value, m.owning_cell.as_tuple(), m.collapsed)
            for m in self._markers
        )
        return cells, registry

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def apply_move(self, coordinate: CoordinateLike, player: SymbolKind) -> MoveOutcome:
        """Register ``player``'s move on ``coordinate``.

        An empty cell becomes tentative for ``player``. A cell holding the
        opponent's tentative marker becomes entangled: the opponent's
        marker leaves the registry and a single PENDING_BOTH marker takes
        its place. Any other target is a contract violation.
        """
        cell = self.cell(coordinate)
        state = cell.state

        if state.is_empty:
            new_state = CellState.tentative(player)
            kind = MarkerKind.for_symbol(player)
        elif state.status is CellStatus.TENTATIVE and state.symbol is player.opponent:
            self._drop_marker(cell)
            new_state = CellState.entangled()
            kind = MarkerKind.PENDING_BOTH
        else:
            raise InvalidMoveError(
                f"player {player.value} cannot move onto {state} cell",
                context={"coordinate": cell.coordinate.to_key()},
            )

        marker = Marker(id=self._next_marker_id, kind=kind, owning_cell=cell.coordinate)
        self._next_marker_id += 1
        self._markers.append(marker)
        cell.state = new_state
        cell.marker_id = marker.id

        logger.debug(
            "move %s -> %s at %s (marker %d)",
            player.value, new_state, cell.coordinate.to_key(), marker.id,
        )
        return MoveOutcome(
            coordinate=cell.coordinate,
            player=player,
            new_state=new_state,
            marker_kind=kind,
        )

    def reset_cell(self, coordinate: CoordinateLike) -> None:
        """Empty the cell and forget its marker."""
        cell = self.cell(coordinate)
        self._drop_marker(cell)
        cell.state = CellState.empty()

    def collapse_cell(self, coordinate: CoordinateLike, symbol: SymbolKind) -> Marker:
        """Resolve the cell to ``symbol`` and retire its marker.

        The pending marker is replaced in place by its collapsed record,
        which is returned.
        """
        cell = self.cell(coordinate)
        if cell.marker_id is None:
            raise InvalidStateError(
                "cannot collapse a cell without a marker",
                context={"coordinate": cell.coordinate.to_key()},
            )
        position = self._registry_index(cell.marker_id)
        record = self._markers[position].as_collapsed(symbol)
        self._markers[position] = record
        cell.state = CellState.collapsed(symbol)
        return record

    def compact_registry(self) -> int:
        """Drop registry entries no longer referenced by their owning cell.

        Returns the number of entries removed.
        """
        live = [
            m for m in self._markers
            if self._cells[m.owning_cell].marker_id == m.id
        ]
        removed = len(self._markers) - len(live)
        self._markers = live
        return removed

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _registry_index(self, marker_id: int) -> int:
        for position, marker in enumerate(self._markers):
            if marker.id == marker_id:
                return position
        raise InvalidStateError(
            "marker missing from registry", context={"marker_id": marker_id}
        )

    def _drop_marker(self, cell: Cell) -> None:
        if cell.marker_id is None:
            return
        self._markers.pop(self._registry_index(cell.marker_id))
        cell.marker_id = None
