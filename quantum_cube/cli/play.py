"""Interactive text-mode game.

Usage:
    quantum-cube [--seed N] [--moves-per-turn N] [--log-level LEVEL]

Enter coordinates as ``x y z`` (or ``x,y,z``), each 0-2. ``q`` quits.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from ..config import GameConfig
from ..errors import ConfigurationError, InvalidCoordinateError, RulesViolationError
from ..game_engine import GameEngine
from ..logging_config import COMPACT_FORMAT, setup_logging
from ..models import GameStatus
from .render import describe_turn, render_board

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"q", "quit", "exit"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quantum-cube",
        description="Quantum tic-tac-toe on a 3x3x3 cube.",
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for collapse draws (overrides QCUBE_RNG_SEED)")
    parser.add_argument("--moves-per-turn", type=int, default=None,
                        help="Moves per player turn (overrides QCUBE_MOVES_PER_TURN)")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (overrides QCUBE_LOG_LEVEL)")
    return parser


def run_game(engine: GameEngine, stdin: TextIO, stdout: TextIO) -> GameStatus:
    """Play one game reading moves from ``stdin`` until it ends or the
    player quits."""
    print(render_board(engine.board), file=stdout)
    while engine.is_active:
        print(
            f"Player {engine.current_player.value.upper()} to move "
            f"({engine.moves_this_turn + 1}/{engine.config.moves_per_turn}): ",
            end="", file=stdout,
        )
        stdout.flush()
        line = stdin.readline()
        if not line:
            print(file=stdout)
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in QUIT_COMMANDS:
            break
        try:
            result = engine.play_move(line)
        except (InvalidCoordinateError, RulesViolationError) as exc:
            print(f"Rejected: {exc.message}", file=stdout)
            continue
        print(describe_turn(result), file=stdout)
        print(render_board(engine.board), file=stdout)

    if engine.status is GameStatus.WON:
        win = engine.win
        print(
            f"Player {win.winner.value.upper()} wins! "
            f"Line {win.start.to_key()} -> {win.end.to_key()}",
            file=stdout,
        )
    elif engine.status is GameStatus.DRAWN:
        print("No legal moves remain. It's a draw.", file=stdout)
    return engine.status


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    try:
        config = GameConfig.from_env(
            rng_seed=args.seed,
            moves_per_turn=args.moves_per_turn,
            log_level=args.log_level,
        )
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    setup_logging("quantum_cube", level=config.log_level, fmt=COMPACT_FORMAT)
    logger.debug("starting game with %s", config)
    engine = GameEngine(config)
    run_game(engine, stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
