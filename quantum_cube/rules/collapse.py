"""Collapse resolution.

Once per completed round every pending marker on the board is adjudicated
at once. One X candidate and one O candidate are drawn (plus one entangled
candidate when any exist), a branch is chosen, the rescued candidates
collapse to a permanent symbol and every other pending marker is destroyed.

Branch table when at least one PENDING_BOTH marker exists (``roll`` uniform
in [0, 1)):

==================  ===========================  =========================
roll                survivors                    entangled survivor
==================  ===========================  =========================
``[0, 0.25)``       drawn X, drawn O             none, all destroyed
``[0.25, 0.5)``     drawn X, drawn entangled     resolves to O
``[0.5, 1)``        drawn O, drawn entangled     resolves to X
==================  ===========================  =========================

Without entangled markers the drawn X and drawn O survive and no roll is
drawn. Draws are always taken in the order X, O, entangled, roll so that a
seeded source replays a game exactly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .. import metrics
from ..models import CollapseBranch, CollapseReport, Coordinate, MarkerKind, SymbolKind
from ..random_source import RandomSource, SeededRandomSource

if TYPE_CHECKING:
    from ..board_manager import Board

__all__ = ["CollapseResolver", "INDEPENDENT_THRESHOLD", "BOTH_TO_O_THRESHOLD"]

logger = logging.getLogger(__name__)

INDEPENDENT_THRESHOLD = 0.25
BOTH_TO_O_THRESHOLD = 0.5


class CollapseResolver:
    """Resolve the board's pending markers using an injected RandomSource."""

    def __init__(self, random_source: RandomSource | None = None):
        self.random_source = random_source or SeededRandomSource()

    def resolve(self, board: "Board") -> CollapseReport:
        """Run one collapse event over ``board`` and describe what happened.

        When there is not at least one pending X and one pending O the
        board is left untouched and a NO_OP report is returned.
        """
        xs: list[int] = []
        os_: list[int] = []
        both: list[int] = []
        buckets = {
            MarkerKind.PENDING_X: xs,
            MarkerKind.PENDING_O: os_,
            MarkerKind.PENDING_BOTH: both,
        }
        pending = board.pending_markers()
        for marker in pending:
            buckets[marker.kind].append(marker.id)

        if not xs or not os_:
            logger.debug(
                "collapse skipped: %d pending x, %d pending o", len(xs), len(os_)
            )
            report = CollapseReport(branch=CollapseBranch.NO_OP)
            metrics.observe_collapse(report)
            return report

        rx = self.random_source.choice(xs)
        ro = self.random_source.choice(os_)
        rb = self.random_source.choice(both) if both else None

        roll: float | None = None
        # marker id -> symbol the rescued marker resolves to
        rescued: dict[int, SymbolKind] = {}
        if rb is None:
            branch = CollapseBranch.CLASSIC
            rescued[rx] = SymbolKind.X
            rescued[ro] = SymbolKind.O
        else:
            roll = self.random_source.random()
            if roll < INDEPENDENT_THRESHOLD:
                branch = CollapseBranch.INDEPENDENT
                rescued[rx] = SymbolKind.X
                rescued[ro] = SymbolKind.O
            elif roll < BOTH_TO_O_THRESHOLD:
                branch = CollapseBranch.BOTH_TO_O
                rescued[rx] = SymbolKind.X
                rescued[rb] = SymbolKind.O
            else:
                branch = CollapseBranch.BOTH_TO_X
                rescued[ro] = SymbolKind.O
                rescued[rb] = SymbolKind.X

        collapsed: list[tuple[Coordinate, SymbolKind]] = []
        destroyed: list[Coordinate] = []
        for marker in pending:
            cell = marker.owning_cell
            symbol = rescued.get(marker.id)
            if symbol is None:
                board.reset_cell(cell)
                destroyed.append(cell)
            else:
                board.collapse_cell(cell, symbol)
                collapsed.append((cell, symbol))
        board.compact_registry()

        report = CollapseReport(
            branch=branch, roll=roll, collapsed=collapsed, destroyed=destroyed
        )
        logger.info(
            "collapse %s (roll=%s): %d collapsed, %d destroyed",
            branch.value,
            "n/a" if roll is None else f"{roll:.3f}",
            len(collapsed),
            len(destroyed),
        )
        metrics.observe_collapse(report)
        return report
