"""Plain-text rendering of a quantum cube board."""

from __future__ import annotations

from ..board_manager import Board
from ..models import GRID_SIZE, CellState, CellStatus, CollapseReport, Coordinate, TurnResult

EMPTY_GLYPH = " . "
ENTANGLED_GLYPH = "x|o"


def cell_glyph(state: CellState) -> str:
    """Three-character glyph: ``?`` marks a tentative symbol, capitals a
    collapsed one."""
    if state.status is CellStatus.EMPTY:
        return EMPTY_GLYPH
    if state.status is CellStatus.ENTANGLED:
        return ENTANGLED_GLYPH
    if state.status is CellStatus.TENTATIVE:
        return f"{state.symbol.value}? "
    return f" {state.symbol.value.upper()} "


def render_board(board: Board) -> str:
    """Render the cube as three z-slices side by side (x across, y down)."""
    header = "   ".join(
        f"z={z}".center(GRID_SIZE * 4 - 1) for z in range(GRID_SIZE)
    )
    rows = [header]
    for y in range(GRID_SIZE):
        slices = []
        for z in range(GRID_SIZE):
            glyphs = [
                cell_glyph(board.cell_state(Coordinate(x=x, y=y, z=z)))
                for x in range(GRID_SIZE)
            ]
            slices.append("|".join(glyphs))
        rows.append("   ".join(slices))
    return "\n".join(rows)


def describe_collapse(report: CollapseReport) -> str:
    if report.is_noop:
        return "Collapse: nothing to resolve."
    kept = ", ".join(
        f"{coord.to_key()}={symbol.value.upper()}" for coord, symbol in report.collapsed
    )
    lost = ", ".join(coord.to_key() for coord in report.destroyed) or "none"
    return f"Collapse ({report.branch.value}): kept {kept}; destroyed {lost}."


def describe_turn(result: TurnResult) -> str:
    outcome = result.outcome
    lines = [
        f"Move {result.move_number}: {outcome.player.value.upper()} -> "
        f"{outcome.coordinate.to_key()} ({outcome.new_state})"
    ]
    if result.collapse is not None:
        lines.append(describe_collapse(result.collapse))
    return "\n".join(lines)
