"""Player interface for human or AI controllers."""

try:
    from ai.move_selector import MoveSelector, NO_MOVE
except ImportError:
    from Gomoku_Minimax_AI.ai.move_selector import MoveSelector, NO_MOVE


class Player:
    is_human = False

    def __init__(self, symbol, name=None):
        self.symbol = symbol
        self.name = name or symbol

    def next_move(self, board, deadline=None):
        """Return (row, col) for next move within time limit."""
        raise NotImplementedError


class HumanPlayer(Player):
    is_human = True

    def __init__(self, symbol, name=None, input_fn=input):
        super().__init__(symbol, name)
        self.input_fn = input_fn

    def next_move(self, board, deadline=None):
        """Text-input player; the referee enforces the deadline after input returns."""
        prompt = f"{self.name} ({self.symbol}) enter move as 'row col' (0-{board.size - 1}): "
        raw = self.input_fn(prompt).strip()
        try:
            r_str, c_str = raw.split()
            return int(r_str), int(c_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc


class AIPlayer(Player):
    def __init__(self, symbol, opponent_symbol, depth=3, scoring=None, rng=None, name="AI", empty=".", stats=None):
        super().__init__(symbol, name)
        self.selector = MoveSelector(
            depth,
            symbol,
            opponent_symbol,
            scoring=scoring,
            rng=rng,
            empty=empty,
            stats=stats,
        )

    def next_move(self, board, deadline=None):
        move = self.selector.find_best_move(board, deadline=deadline)
        if move == NO_MOVE:
            raise ValueError("No legal move available")
        return move
