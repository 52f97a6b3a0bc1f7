"""Root move selection: score every empty cell and break ties at random."""

import logging
import random
import time

from . import search_minimax

try:
    from engine import rules
except ImportError:
    from Gomoku_Minimax_AI.engine import rules


LOGGER = logging.getLogger(__name__)

# Returned when the board has no empty cell; never a valid coordinate.
NO_MOVE = (-1, -1)


class MoveSelector:
    """Root-level driver around MinimaxSearcher for one automated player."""

    def __init__(self, depth, ai_symbol, opponent_symbol, scoring=None, rng=None, empty=".", stats=None):
        if not isinstance(depth, int) or isinstance(depth, bool) or depth < 1:
            raise ValueError(f"search depth must be a positive integer, got {depth!r}")
        if ai_symbol == empty or opponent_symbol == empty:
            raise ValueError("player symbols must not be the empty symbol")
        if ai_symbol == opponent_symbol:
            raise ValueError("AI and opponent symbols must differ")
        self.depth = depth
        self.ai_symbol = ai_symbol
        self.opponent_symbol = opponent_symbol
        self.scoring = scoring
        self.rng = rng or random.Random()
        self.stats_list = stats
        self.last_score = None

    def score_moves(self, board, deadline=None):
        """Return (best_score, tied_moves, nodes) over all empty cells in row-major order."""
        searcher = search_minimax.MinimaxSearcher(
            self.ai_symbol,
            self.opponent_symbol,
            scoring=self.scoring,
            deadline=deadline,
        )
        best_score = -search_minimax.INF
        best_moves = []
        for r, c in list(board.empty_cells()):
            with rules.simulate(board, r, c, self.ai_symbol):
                score = searcher.evaluate(
                    board,
                    self.depth - 1,
                    False,
                    -search_minimax.INF,
                    search_minimax.INF,
                )
            if score > best_score:
                best_score = score
                best_moves = [(r, c)]
            elif score == best_score:
                best_moves.append((r, c))
        return best_score, best_moves, searcher.node_counter

    def find_best_move(self, board, deadline=None):
        """
        Return (row, col) of the best move for ai_symbol, or NO_MOVE when the board is full.
        The board is restored to its original content before returning.
        """
        start = time.time()
        best_score, best_moves, nodes = self.score_moves(board, deadline=deadline)
        elapsed = time.time() - start

        if not best_moves:
            LOGGER.warning("No empty cell available for %s; returning NO_MOVE", self.ai_symbol)
            self.last_score = None
            return NO_MOVE

        self.last_score = best_score
        move = self.rng.choice(best_moves)
        LOGGER.debug(
            "AI (%s) depth %d chose %s: score=%s ties=%d nodes=%d time=%.3fs",
            self.ai_symbol,
            self.depth,
            move,
            best_score,
            len(best_moves),
            nodes,
            elapsed,
        )
        if self.stats_list is not None:
            self.stats_list.append({
                "symbol": self.ai_symbol,
                "depth": self.depth,
                "score": best_score,
                "nodes": nodes,
                "time": elapsed,
            })
        return move


def find_best_move(board, depth, ai_symbol, opponent_symbol, scoring=None, rng=None, deadline=None):
    """Public function to pick a move. Instantiates and uses MoveSelector."""
    selector = MoveSelector(depth, ai_symbol, opponent_symbol, scoring=scoring, rng=rng, empty=board.empty)
    return selector.find_best_move(board, deadline=deadline)
