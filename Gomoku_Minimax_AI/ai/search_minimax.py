"""Minimax with alpha-beta pruning over a shared board, with full-board terminal checks."""

import logging
import time

from . import heuristic

try:
    from engine import rules
except ImportError:
    from Gomoku_Minimax_AI.engine import rules


LOGGER = logging.getLogger(__name__)

INF = float("inf")
TIME_CHECK_MASK = 1023  # check every 1024 nodes


class MinimaxSearcher:
    """Encapsulates the symbols, scoring and bookkeeping for a minimax search."""

    def __init__(self, ai_symbol, opponent_symbol, scoring=None, deadline=None):
        self.ai_symbol = ai_symbol
        self.opponent_symbol = opponent_symbol
        self.scoring = scoring or heuristic.DEFAULT_SCORING
        self.deadline = deadline
        self.node_counter = 0

    def _time_ok(self):
        self.node_counter += 1
        if self.deadline is not None and (self.node_counter & TIME_CHECK_MASK) == 0:
            if time.time() > self.deadline:
                raise TimeoutError("Search timed out")

    def terminal_score(self, board):
        """Return the sentinel for a finished position, or None if play can continue."""
        # No last-move context survives recursion, so every cell is scanned.
        if rules.has_winning_line(board, self.ai_symbol):
            return self.scoring.win_score
        if rules.has_winning_line(board, self.opponent_symbol):
            return self.scoring.lose_score
        if board.is_full():
            return self.scoring.draw_score
        return None

    def heuristic_score(self, board):
        return heuristic.score_board(board, self.ai_symbol, self.opponent_symbol, self.scoring)

    def evaluate(self, board, depth, maximizing, alpha, beta):
        """Score board from the AI's perspective, searching depth plies ahead."""
        self._time_ok()

        score = self.terminal_score(board)
        if score is not None:
            return score
        if depth <= 0:
            return self.heuristic_score(board)

        if maximizing:
            return self._search_max(board, depth, alpha, beta)
        return self._search_min(board, depth, alpha, beta)

    def _search_max(self, board, depth, alpha, beta):
        best_score = -INF
        # Materialized so the simulated placements do not disturb iteration.
        for r, c in list(board.empty_cells()):
            with rules.simulate(board, r, c, self.ai_symbol):
                score = self.evaluate(board, depth - 1, False, alpha, beta)
            best_score = max(best_score, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break
        return best_score

    def _search_min(self, board, depth, alpha, beta):
        best_score = INF
        for r, c in list(board.empty_cells()):
            with rules.simulate(board, r, c, self.opponent_symbol):
                score = self.evaluate(board, depth - 1, True, alpha, beta)
            best_score = min(best_score, score)
            beta = min(beta, score)
            if beta <= alpha:
                break
        return best_score


def evaluate(board, depth, maximizing, alpha, beta, ai_symbol, opponent_symbol, scoring=None, deadline=None):
    """
    Public function to score a position. Instantiates and uses MinimaxSearcher.
    Larger results favor ai_symbol.
    """
    searcher = MinimaxSearcher(ai_symbol, opponent_symbol, scoring=scoring, deadline=deadline)
    return searcher.evaluate(board, depth, maximizing, alpha, beta)
