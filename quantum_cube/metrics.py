"""Prometheus metrics for the quantum cube engine.

This module centralises counters so that the board, the collapse resolver
and the game engine can record lightweight telemetry without each managing
its own metric instances. Labels stay coarse (player, branch, outcome) so
the series count is fixed.
"""

from __future__ import annotations

from typing import Final

from prometheus_client import Counter

from .models import CollapseReport, GameStatus, MoveOutcome, SymbolKind


MOVES_APPLIED: Final[Counter] = Counter(
    "quantum_cube_moves_applied_total",
    "Total moves registered on a board, labeled by player and resulting cell status.",
    labelnames=("player", "cell_status"),
)

COLLAPSE_EVENTS: Final[Counter] = Counter(
    "quantum_cube_collapse_events_total",
    "Total collapse events, labeled by the branch the resolver took.",
    labelnames=("branch",),
)

MARKERS_RESOLVED: Final[Counter] = Counter(
    "quantum_cube_markers_resolved_total",
    "Total markers resolved by collapse events, labeled by fate (collapsed or destroyed).",
    labelnames=("fate",),
)

GAMES_COMPLETED: Final[Counter] = Counter(
    "quantum_cube_games_completed_total",
    "Total finished games, labeled by outcome (x, o or draw).",
    labelnames=("outcome",),
)


def observe_move(outcome: MoveOutcome) -> None:
    MOVES_APPLIED.labels(
        player=outcome.player.value,
        cell_status=outcome.new_state.status.value,
    ).inc()


def observe_collapse(report: CollapseReport) -> None:
    COLLAPSE_EVENTS.labels(branch=report.branch.value).inc()
    if report.collapsed:
        MARKERS_RESOLVED.labels(fate="collapsed").inc(len(report.collapsed))
    if report.destroyed:
        MARKERS_RESOLVED.labels(fate="destroyed").inc(len(report.destroyed))


def observe_game_end(status: GameStatus, winner: SymbolKind | None) -> None:
    outcome = winner.value if status is GameStatus.WON and winner else "draw"
    GAMES_COMPLETED.labels(outcome=outcome).inc()
