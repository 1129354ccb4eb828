"""Quantum tic-tac-toe on a 3x3x3 cube.

Usage:
    from quantum_cube import GameEngine

    engine = GameEngine()
    result = engine.play_move((1, 1, 1))
"""

from .board_manager import Board, Cell
from .config import GameConfig
from .errors import (
    ConfigurationError,
    InvalidCoordinateError,
    InvalidMoveError,
    InvalidStateError,
    QuantumCubeError,
    RulesViolationError,
)
from .game_engine import GameEngine
from .models import (
    CellState,
    CellStatus,
    CollapseBranch,
    CollapseReport,
    Coordinate,
    GameStatus,
    Marker,
    MarkerKind,
    MoveOutcome,
    SymbolKind,
    TurnResult,
    WinResult,
)
from .random_source import RandomSource, ScriptedRandomSource, SeededRandomSource

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Cell",
    "CellState",
    "CellStatus",
    "CollapseBranch",
    "CollapseReport",
    "ConfigurationError",
    "Coordinate",
    "GameConfig",
    "GameEngine",
    "GameStatus",
    "InvalidCoordinateError",
    "InvalidMoveError",
    "InvalidStateError",
    "Marker",
    "MarkerKind",
    "MoveOutcome",
    "QuantumCubeError",
    "RandomSource",
    "RulesViolationError",
    "ScriptedRandomSource",
    "SeededRandomSource",
    "SymbolKind",
    "TurnResult",
    "WinResult",
]
