"""Turn-based driver for quantum cube games.

:class:`GameEngine` owns a :class:`Board` and a :class:`CollapseResolver` and
enforces the order of operations for one game:

1. the move is checked against the placement rules and registered;
2. the board is checked for a win;
3. once the player to move has made ``moves_per_turn`` moves the turn passes
   to the opponent, and when it comes back to the first player the round is
   complete: a collapse event runs and the board is checked for a win again;
4. if the game is still active but the player to move has no legal cell, the
   game is drawn.

Presentation layers drive the engine through :meth:`GameEngine.play_move`
and read back state through the query methods; they never mutate the board
directly.
"""

from __future__ import annotations

import logging

from . import metrics
from .board_manager import Board
from .config import GameConfig
from .errors import InvalidMoveError, RulesViolationError
from .models import (
    CellState,
    CollapseReport,
    Coordinate,
    CoordinateLike,
    GameStatus,
    Marker,
    SymbolKind,
    TurnResult,
    WinResult,
)
from .random_source import RandomSource, SeededRandomSource
from .rules.collapse import CollapseResolver
from .rules.validator import can_place, legal_coordinates, rejection_reason
from .rules.win import check_win

__all__ = ["GameEngine"]

logger = logging.getLogger(__name__)


class GameEngine:
    """Two-player quantum cube game.

    Args:
        config: Engine settings; defaults to :class:`GameConfig` defaults.
        random_source: Source used for collapse draws. When omitted a
            :class:`SeededRandomSource` seeded from ``config.rng_seed`` is
            used.
        first_player: Symbol that opens every round (X by default).
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        random_source: RandomSource | None = None,
        first_player: SymbolKind = SymbolKind.X,
    ):
        self.config = config or GameConfig()
        self.random_source = random_source or SeededRandomSource(self.config.rng_seed)
        self.resolver = CollapseResolver(self.random_source)
        self.first_player = first_player
        self.reset()

    def reset(self) -> None:
        """Start a new game on a fresh board."""
        self.board = Board()
        self.current_player = self.first_player
        self.moves_this_turn = 0
        self.move_number = 0
        self.collapse_count = 0
        self.status = GameStatus.ACTIVE
        self.win: WinResult | None = None
        self.last_collapse: CollapseReport | None = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.status is GameStatus.ACTIVE

    @property
    def winner(self) -> SymbolKind | None:
        return self.win.winner if self.win else None

    def cell_state(self, coordinate: CoordinateLike) -> CellState:
        return self.board.cell_state(coordinate)

    def can_place(
        self, coordinate: CoordinateLike, player: SymbolKind | None = None
    ) -> bool:
        """Return True if ``player`` (default: player to move) may target
        ``coordinate``."""
        return can_place(
            self.board.cell_state(coordinate), player or self.current_player
        )

    def legal_moves(self, player: SymbolKind | None = None) -> list[Coordinate]:
        return legal_coordinates(self.board, player or self.current_player)

    def pending_markers(self) -> list[Marker]:
        return self.board.pending_markers()

    def markers(self) -> tuple[Marker, ...]:
        return self.board.markers

    def check_win(self) -> WinResult | None:
        return check_win(self.board)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def play_move(self, coordinate: CoordinateLike) -> TurnResult:
        """Play the current player's move on ``coordinate``.

        Raises:
            InvalidMoveError: the game is already over.
            RulesViolationError: the placement rules forbid the target cell.
            InvalidCoordinateError: ``coordinate`` is outside the cube.
        """
        if not self.is_active:
            raise InvalidMoveError(
                "game is over", context={"status": self.status.value}
            )

        coord = Coordinate.parse(coordinate)
        player = self.current_player
        state = self.board.cell_state(coord)
        reason = rejection_reason(state, player)
        if reason is not None:
            raise RulesViolationError(
                f"player {player.value} cannot place on a {state} cell",
                rule_ref=reason,
                context={"coordinate": coord.to_key()},
            )

        outcome = self.board.apply_move(coord, player)
        metrics.observe_move(outcome)
        self.move_number += 1

        collapse: CollapseReport | None = None
        win = self.check_win()
        if win is None:
            self.moves_this_turn += 1
            if self.moves_this_turn >= self.config.moves_per_turn:
                self.moves_this_turn = 0
                self.current_player = player.opponent
                if self.current_player is self.first_player:
                    collapse = self.perform_collapse()
                    win = self.check_win()

        if win is not None:
            self._finish(GameStatus.WON, win)
        elif not self.legal_moves():
            self._finish(GameStatus.DRAWN, None)

        return TurnResult(
            outcome=outcome,
            collapse=collapse,
            win=win,
            status=self.status,
            next_player=self.current_player,
            move_number=self.move_number,
        )

    def perform_collapse(self) -> CollapseReport:
        """Run one collapse event over the board.

        :meth:`play_move` calls this at the end of every round. Drivers that
        manage rounds themselves may call it directly and are then
        responsible for calling :meth:`check_win` afterwards.
        """
        report = self.resolver.resolve(self.board)
        self.collapse_count += 1
        self.last_collapse = report
        return report

    def _finish(self, status: GameStatus, win: WinResult | None) -> None:
        self.status = status
        self.win = win
        if win is not None:
            logger.info(
                "player %s wins on line %s -> %s after %d moves",
                win.winner.value, win.start.to_key(), win.end.to_key(),
                self.move_number,
            )
        else:
            logger.info(
                "game drawn: player %s has no legal move after %d moves",
                self.current_player.value, self.move_number,
            )
        metrics.observe_game_end(status, self.winner)
