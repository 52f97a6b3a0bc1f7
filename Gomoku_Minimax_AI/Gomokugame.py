"""Game loop and turn management for five-in-a-row."""

try:
    from Board import Board, BLACK, WHITE
    from engine import referee, rules
    from utils import timer
    from utils.logger import log_event
except ImportError:
    from Gomoku_Minimax_AI.Board import Board, BLACK, WHITE
    from Gomoku_Minimax_AI.engine import referee, rules
    from Gomoku_Minimax_AI.utils import timer
    from Gomoku_Minimax_AI.utils.logger import log_event


class Gomokugame:
    def __init__(self, board_size, black_player, white_player, win_length=5, move_timeout=None, logger=log_event, renderer=None):
        self.board = Board(size=board_size, win_length=win_length, symbols=(BLACK, WHITE))
        self.move_timeout = move_timeout
        self.players = {BLACK: black_player, WHITE: white_player}
        self.logger = logger
        self.renderer = renderer
        self.move_index = 0

    def play(self):
        """Run a single game. Returns the winning symbol, or None for a draw."""
        self.board.clear()
        symbol = BLACK  # black starts
        game_over = False
        winner = None
        while not game_over:
            if self.renderer:
                self.renderer(self.board)

            player = self.players[symbol]
            deadline = timer.deadline_after(self.move_timeout)
            try:
                move = player.next_move(self.board, deadline=deadline)
                referee.check_move(move, self.board, deadline)
            except (TimeoutError, ValueError) as exc:
                if player.is_human and not isinstance(exc, TimeoutError):
                    self.logger(f"Invalid move by {player.name}: {exc}. Try again.")
                    continue
                self.logger(f"Disqualification: {player.name} ({symbol}) - {exc}")
                winner = self._opponent(symbol)
                break

            r, c = move
            self.board.place(r, c, symbol)
            self.move_index += 1
            self.logger(f"Move {self.move_index}: {player.name} ({symbol}) places at ({r}, {c})")

            if rules.is_win_after_move(self.board, r, c, symbol):
                winner = symbol
                game_over = True
            elif self.board.is_full():
                game_over = True
            else:
                symbol = self._opponent(symbol)

        if self.renderer:
            self.renderer(self.board)
        if winner is None:
            self.logger("Result: Draw (board full)")
        else:
            self.logger(f"Winner: {self.players[winner].name} ({winner})")
        return winner

    @staticmethod
    def _opponent(symbol):
        return WHITE if symbol == BLACK else BLACK
