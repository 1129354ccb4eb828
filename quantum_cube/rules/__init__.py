"""Rules layer: placement legality, collapse resolution and win detection."""

from .collapse import CollapseResolver
from .geometry import WINNING_LINES, lines_through, winning_lines
from .validator import can_place, legal_coordinates, rejection_reason
from .win import check_win

__all__ = [
    "CollapseResolver",
    "WINNING_LINES",
    "can_place",
    "check_win",
    "legal_coordinates",
    "lines_through",
    "rejection_reason",
    "winning_lines",
]
