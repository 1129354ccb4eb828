"""Move legality.

Placement rules:

- an empty cell accepts either symbol;
- a tentative cell accepts only the opponent's symbol, which entangles it;
- entangled and collapsed cells accept nothing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import CellState, CellStatus, Coordinate, SymbolKind

if TYPE_CHECKING:
    from ..board_manager import Board

__all__ = ["can_place", "legal_coordinates", "rejection_reason"]

OWN_TENTATIVE = "own-tentative"
ENTANGLED = "entangled"
COLLAPSED = "collapsed"


def rejection_reason(state: CellState, player: SymbolKind) -> str | None:
    """Return the rule that forbids ``player`` on ``state``, or ``None``."""
    if state.status is CellStatus.EMPTY:
        return None
    if state.status is CellStatus.TENTATIVE:
        return OWN_TENTATIVE if state.symbol is player else None
    if state.status is CellStatus.ENTANGLED:
        return ENTANGLED
    return COLLAPSED


def can_place(state: CellState, player: SymbolKind) -> bool:
    """Return True if ``player`` may target a cell in ``state``."""
    return rejection_reason(state, player) is None


def legal_coordinates(board: "Board", player: SymbolKind) -> list[Coordinate]:
    """Coordinates ``player`` may currently target, in x, y, z order."""
    return [
        cell.coordinate for cell in board.cells()
        if can_place(cell.state, player)
    ]
