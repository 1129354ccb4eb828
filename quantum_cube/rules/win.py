"""Win detection over fully collapsed lines.

Only COLLAPSED cells count. Tentative and entangled cells never complete a
line for either symbol, even when every cell of a line shows the same
pending symbol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..models import SymbolKind, WinResult
from .geometry import WINNING_LINES

if TYPE_CHECKING:
    from ..board_manager import Board

__all__ = ["check_win"]

_SYMBOL_ORDER = (SymbolKind.X, SymbolKind.O)


def check_win(board: "Board") -> WinResult | None:
    """Return the first completed line, or ``None``.

    Lines are tested in :data:`WINNING_LINES` order and X is tested before O
    on each line. The board is not modified.
    """
    for a, b, c in WINNING_LINES:
        states = (board.cell_state(a), board.cell_state(b), board.cell_state(c))
        for symbol in _SYMBOL_ORDER:
            if all(state.is_collapsed_to(symbol) for state in states):
                return WinResult(start=a, end=c, winner=symbol)
    return None
