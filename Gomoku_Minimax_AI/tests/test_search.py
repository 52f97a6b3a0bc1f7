"""Search-level tests: terminal sentinels, depth-0 heuristic, pruning parity."""

import random
import time

import pytest

from Gomoku_Minimax_AI.Board import Board
from Gomoku_Minimax_AI.ai import heuristic, search_minimax
from Gomoku_Minimax_AI.engine import rules

INF = float("inf")


def _unpruned(searcher, board, depth, maximizing, visited=None):
    """Plain minimax with the same terminal and leaf rules, no cutoffs."""
    if visited is not None:
        visited.append(1)
    score = searcher.terminal_score(board)
    if score is not None:
        return score
    if depth == 0:
        return searcher.heuristic_score(board)
    symbol = searcher.ai_symbol if maximizing else searcher.opponent_symbol
    scores = []
    for r, c in list(board.empty_cells()):
        with rules.simulate(board, r, c, symbol):
            scores.append(_unpruned(searcher, board, depth - 1, not maximizing, visited))
    return max(scores) if maximizing else min(scores)


def _random_board(rng, size, win_length, stones):
    b = Board(size=size, win_length=win_length)
    cells = [(r, c) for r in range(size) for c in range(size)]
    rng.shuffle(cells)
    placed = 0
    for r, c in cells:
        if placed == stones:
            break
        symbol = "B" if placed % 2 == 0 else "W"
        b.place(r, c, symbol)
        if b.check_win(r, c, symbol):
            b.remove(r, c)
            continue
        placed += 1
    return b


def test_depth_zero_equals_heuristic():
    b = Board(size=9)
    for r, c, s in [(4, 4, "B"), (4, 5, "B"), (4, 6, "B"), (0, 0, "W"), (1, 0, "W")]:
        b.place(r, c, s)
    score = search_minimax.evaluate(b, 0, True, -INF, INF, "B", "W")
    assert score == heuristic.score_board(b, "B", "W") == 100


def test_terminal_win_and_loss_sentinels():
    b = Board(size=9)
    for c in range(5):
        b.place(3, c, "B")
    assert search_minimax.evaluate(b, 3, False, -INF, INF, "B", "W") == 100000
    assert search_minimax.evaluate(b, 0, True, -INF, INF, "W", "B") == -100000


def test_terminal_check_runs_before_depth_check():
    scoring = heuristic.ScoringConfig(win_score=7, lose_score=-7)
    b = Board(size=9)
    for r in range(5):
        b.place(r, 0, "W")
    assert search_minimax.evaluate(b, 0, True, -INF, INF, "W", "B", scoring=scoring) == 7


def test_full_board_returns_draw_sentinel():
    b = Board(size=5)
    pattern = ["BBWWB", "WWBBW", "BBWWB", "WWBBW", "BBWWB"]
    for r, row in enumerate(pattern):
        for c, s in enumerate(row):
            b.place(r, c, s)
    assert b.is_full()
    scoring = heuristic.ScoringConfig(draw_score=-3)
    assert search_minimax.evaluate(b, 2, True, -INF, INF, "B", "W", scoring=scoring) == -3


def test_search_restores_board():
    b = Board(size=5, win_length=3)
    b.place(2, 2, "B")
    b.place(1, 1, "W")
    before = b.grid_copy()
    search_minimax.evaluate(b, 3, True, -INF, INF, "B", "W")
    assert b.cells == before


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("maximizing", [True, False])
def test_alpha_beta_matches_unpruned_minimax(seed, maximizing):
    rng = random.Random(seed)
    b = _random_board(rng, size=5, win_length=3, stones=4)
    before = b.grid_copy()
    searcher = search_minimax.MinimaxSearcher("B", "W")

    pruned = searcher.evaluate(b, 2, maximizing, -INF, INF)
    assert b.cells == before
    assert pruned == _unpruned(searcher, b, 2, maximizing)
    assert b.cells == before


def test_alpha_beta_matches_unpruned_at_depth_three():
    b = Board(size=4, win_length=3)
    b.place(1, 1, "B")
    b.place(2, 2, "W")
    b.place(0, 3, "B")
    searcher = search_minimax.MinimaxSearcher("W", "B")
    assert searcher.evaluate(b, 3, True, -INF, INF) == _unpruned(searcher, b, 3, True)


def test_pruning_visits_fewer_nodes():
    b = Board(size=5, win_length=3)
    b.place(2, 2, "B")
    b.place(0, 0, "W")
    searcher = search_minimax.MinimaxSearcher("B", "W")
    visited = []
    assert searcher.evaluate(b, 3, True, -INF, INF) == _unpruned(searcher, b, 3, True, visited)
    assert 0 < searcher.node_counter < len(visited)


def test_expired_deadline_raises_and_restores_board(monkeypatch):
    # Check the clock every 16 nodes so the timeout fires mid-recursion.
    monkeypatch.setattr(search_minimax, "TIME_CHECK_MASK", 15)
    b = Board(size=9)
    b.place(4, 4, "B")
    b.place(4, 5, "W")
    before = b.grid_copy()
    searcher = search_minimax.MinimaxSearcher("B", "W", deadline=time.time() - 1)
    with pytest.raises(TimeoutError):
        searcher.evaluate(b, 2, True, -INF, INF)
    assert b.cells == before
