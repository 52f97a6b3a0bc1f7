"""Tests for per-move timeouts and referee enforcement."""

import time
import pytest

from Gomoku_Minimax_AI.Board import Board
from Gomoku_Minimax_AI.engine import referee
from Gomoku_Minimax_AI.utils import timer


def test_timeout_rejected():
    b = Board(size=9)
    deadline = time.time() - 0.1
    with pytest.raises(TimeoutError):
        referee.check_move((4, 4), b, deadline)


def test_valid_move_passes():
    b = Board(size=9)
    assert referee.check_move((4, 4), b, time.time() + 1) is True
    assert referee.check_move((0, 0), b) is True


@pytest.mark.parametrize("move", [(9, 0), (-1, 3), (0, 0), "x", None])
def test_invalid_moves_rejected(move):
    b = Board(size=9)
    b.place(0, 0, "B")
    with pytest.raises(ValueError):
        referee.check_move(move, b)


def test_untimed_deadline():
    assert timer.deadline_after(None) is None
    assert timer.deadline_after(0) is None
