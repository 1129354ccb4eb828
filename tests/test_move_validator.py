"""Tests for placement legality."""

import pytest

from quantum_cube.models import CellState
from quantum_cube.rules.validator import (
    COLLAPSED,
    ENTANGLED,
    OWN_TENTATIVE,
    can_place,
    legal_coordinates,
    rejection_reason,
)
from tests.helpers import O, X, coord


@pytest.mark.parametrize(
    "state,player,expected",
    [
        (CellState.empty(), X, True),
        (CellState.empty(), O, True),
        (CellState.tentative(X), X, False),
        (CellState.tentative(O), O, False),
        (CellState.tentative(X), O, True),
        (CellState.tentative(O), X, True),
        (CellState.entangled(), X, False),
        (CellState.entangled(), O, False),
        (CellState.collapsed(X), X, False),
        (CellState.collapsed(X), O, False),
        (CellState.collapsed(O), X, False),
        (CellState.collapsed(O), O, False),
    ],
)
def test_can_place_table(state, player, expected):
    assert can_place(state, player) is expected


def test_rejection_reasons():
    assert rejection_reason(CellState.empty(), X) is None
    assert rejection_reason(CellState.tentative(X), X) == OWN_TENTATIVE
    assert rejection_reason(CellState.tentative(X), O) is None
    assert rejection_reason(CellState.entangled(), O) == ENTANGLED
    assert rejection_reason(CellState.collapsed(O), O) == COLLAPSED


def test_legal_coordinates_on_fresh_board(board):
    assert len(legal_coordinates(board, X)) == 27
    assert len(legal_coordinates(board, O)) == 27


def test_legal_coordinates_follow_cell_states(board, entangle, collapse_to):
    board.apply_move(coord(0, 0, 0), X)
    entangle(board, coord(0, 0, 1))
    collapse_to(board, coord(0, 0, 2), O)

    x_moves = legal_coordinates(board, X)
    o_moves = legal_coordinates(board, O)
    assert len(x_moves) == 24
    assert coord(0, 0, 0) not in x_moves
    assert coord(0, 0, 0) in o_moves
    assert len(o_moves) == 25
    assert coord(0, 0, 1) not in o_moves
    assert coord(0, 0, 2) not in o_moves
