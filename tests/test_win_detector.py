"""Win detection and winning-line geometry tests."""

import pytest

from quantum_cube.models import WinResult
from quantum_cube.rules.geometry import (
    AXIS_LINE_COUNT,
    PLANAR_DIAGONAL_COUNT,
    SPACE_DIAGONAL_COUNT,
    WINNING_LINES,
    lines_through,
)
from quantum_cube.rules.win import check_win
from tests.helpers import O, X, coord


class TestGeometry:

    def test_line_counts(self):
        assert len(WINNING_LINES) == 49
        assert AXIS_LINE_COUNT + PLANAR_DIAGONAL_COUNT + SPACE_DIAGONAL_COUNT == 49

    def test_lines_are_distinct(self):
        assert len({frozenset(line) for line in WINNING_LINES}) == 49

    def test_enumeration_order(self):
        assert WINNING_LINES[0] == (coord(0, 0, 0), coord(1, 0, 0), coord(2, 0, 0))
        assert WINNING_LINES[1] == (coord(0, 0, 0), coord(0, 1, 0), coord(0, 2, 0))
        assert WINNING_LINES[2] == (coord(0, 0, 0), coord(0, 0, 1), coord(0, 0, 2))
        assert WINNING_LINES[27] == (coord(0, 0, 0), coord(0, 1, 1), coord(0, 2, 2))
        assert WINNING_LINES[32] == (coord(2, 0, 0), coord(1, 1, 0), coord(0, 2, 0))
        assert WINNING_LINES[45] == (coord(0, 0, 0), coord(1, 1, 1), coord(2, 2, 2))
        assert WINNING_LINES[48] == (coord(0, 0, 2), coord(1, 1, 1), coord(2, 2, 0))

    def test_every_line_is_straight(self):
        for a, b, c in WINNING_LINES:
            for axis in range(3):
                pa, pb, pc = a.as_tuple()[axis], b.as_tuple()[axis], c.as_tuple()[axis]
                assert pb - pa == pc - pb
            assert b.as_tuple() != a.as_tuple()

    def test_lines_through_center_and_corner(self):
        assert len(lines_through(coord(1, 1, 1))) == 13
        assert len(lines_through(coord(0, 0, 0))) == 7
        assert len(lines_through(coord(1, 0, 0))) == 4


class TestCheckWin:

    def test_empty_board_has_no_winner(self, board):
        assert check_win(board) is None

    @pytest.mark.parametrize("index", range(49))
    @pytest.mark.parametrize("symbol", [X, O])
    def test_each_canonical_line(self, board, collapse_to, index, symbol):
        a, b, c = WINNING_LINES[index]
        for cell in (a, b, c):
            collapse_to(board, cell, symbol)

        result = check_win(board)
        assert result == WinResult(start=a, end=c, winner=symbol)
        assert check_win(board) == result

    def test_tentative_line_does_not_win(self, board):
        for cell in WINNING_LINES[0]:
            board.apply_move(cell, X)
        assert check_win(board) is None

    def test_entangled_line_does_not_win(self, board, entangle):
        for cell in WINNING_LINES[45]:
            entangle(board, cell)
        assert check_win(board) is None

    def test_mixed_collapsed_and_entangled_does_not_win(self, board, collapse_to, entangle):
        a, b, c = WINNING_LINES[3]
        collapse_to(board, a, O)
        collapse_to(board, b, O)
        entangle(board, c)
        assert check_win(board) is None

    def test_mixed_symbols_do_not_win(self, board, collapse_to):
        a, b, c = WINNING_LINES[10]
        collapse_to(board, a, X)
        collapse_to(board, b, O)
        collapse_to(board, c, X)
        assert check_win(board) is None

    def test_first_line_in_order_wins(self, board, collapse_to):
        for cell in WINNING_LINES[40]:
            collapse_to(board, cell, X)
        for cell in WINNING_LINES[4]:
            collapse_to(board, cell, O)

        result = check_win(board)
        assert result.winner is O
        assert (result.start, result.end) == (WINNING_LINES[4][0], WINNING_LINES[4][2])

    def test_check_win_does_not_mutate(self, board, collapse_to):
        for cell in WINNING_LINES[20]:
            collapse_to(board, cell, X)
        before = board.snapshot()
        check_win(board)
        check_win(board)
        assert board.snapshot() == before
