"""
Shared pytest fixtures for quantum cube tests.

Board and engine fixtures are function-scoped so every test starts from a
fresh 27-cell cube and an empty marker registry.
"""

from pathlib import Path
import sys
from typing import Callable, Iterable, Optional

import pytest

# Ensure the project root is on sys.path so `import quantum_cube` works when
# pytest runs without the package installed.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from quantum_cube.board_manager import Board
from quantum_cube.config import GameConfig
from quantum_cube.game_engine import GameEngine
from quantum_cube.models import Coordinate, SymbolKind
from quantum_cube.random_source import ScriptedRandomSource
from tests.helpers import O, X

# =============================================================================
# BOARD FIXTURES
# =============================================================================


@pytest.fixture
def board() -> Board:
    """Fresh empty board."""
    return Board()


@pytest.fixture
def entangle() -> Callable[[Board, Coordinate], None]:
    """Helper that turns an empty cell into an entangled one (X then O)."""

    def _entangle(target: Board, c: Coordinate) -> None:
        target.apply_move(c, X)
        target.apply_move(c, O)

    return _entangle


@pytest.fixture
def collapse_to() -> Callable[[Board, Coordinate, SymbolKind], None]:
    """Helper that places ``symbol`` on an empty cell and collapses it."""

    def _collapse_to(target: Board, c: Coordinate, symbol: SymbolKind) -> None:
        target.apply_move(c, symbol)
        target.collapse_cell(c, symbol)

    return _collapse_to


# =============================================================================
# RANDOMNESS AND ENGINE FACTORIES
# =============================================================================


@pytest.fixture
def scripted_source() -> Callable[..., ScriptedRandomSource]:
    """Factory for deterministic random sources."""

    def _create(index: int = 0, rolls: Iterable[float] = (0.0,)) -> ScriptedRandomSource:
        return ScriptedRandomSource(index=index, rolls=rolls)

    return _create


@pytest.fixture
def engine_factory() -> Callable[..., GameEngine]:
    """Factory for engines with scripted randomness and custom turn size."""

    def _create(
        moves_per_turn: int = 1,
        rolls: Iterable[float] = (0.0,),
        index: int = 0,
        seed: Optional[int] = None,
    ) -> GameEngine:
        config = GameConfig(moves_per_turn=moves_per_turn, rng_seed=seed)
        return GameEngine(config, random_source=ScriptedRandomSource(index, rolls))

    return _create
