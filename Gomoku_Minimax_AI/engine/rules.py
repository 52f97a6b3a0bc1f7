"""Five-in-a-row rule helpers: scoped simulated moves and whole-board win scans."""

from contextlib import contextmanager

try:
    from Board import Board
except ImportError:
    from Gomoku_Minimax_AI.Board import Board


@contextmanager
def simulate(board: Board, r: int, c: int, symbol: str):
    """Place a symbol for the duration of the block; the cell is cleared on every exit path."""
    if not board.place(r, c, symbol):
        raise ValueError(f"cannot simulate move at ({r}, {c}): cell unavailable")
    try:
        yield
    finally:
        board.remove(r, c)


def is_win_after_move(board: Board, r: int, c: int, symbol: str) -> bool:
    """Assumes the symbol is already placed at (r, c)."""
    return board.check_win(r, c, symbol)


def has_winning_line(board: Board, symbol: str) -> bool:
    """Scan every cell holding symbol for a win line through it."""
    for r in range(board.size):
        for c in range(board.size):
            if board.cells[r][c] == symbol and board.check_win(r, c, symbol):
                return True
    return False

