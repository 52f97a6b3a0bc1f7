"""Board state container and local five-in-a-row checking."""

EMPTY = "."
BLACK = "B"
WHITE = "W"

DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


class Board:
    def __init__(self, size=9, win_length=5, empty=EMPTY, symbols=(BLACK, WHITE)):
        if size < 1:
            raise ValueError("board size must be positive")
        if win_length < 1:
            raise ValueError("win length must be positive")
        if empty in symbols:
            raise ValueError("player symbols must differ from the empty symbol")
        self.size = size
        self.win_length = win_length
        self.empty = empty
        self.symbols = tuple(symbols)
        # Cells are indexed cells[row][col]
        self.cells = [[empty] * size for _ in range(size)]

    def in_bounds(self, r, c):
        return 0 <= r < self.size and 0 <= c < self.size

    def is_empty(self, r, c):
        return self.in_bounds(r, c) and self.cells[r][c] == self.empty

    def get_symbol(self, r, c):
        if self.in_bounds(r, c):
            return self.cells[r][c]
        return None

    def place(self, r, c, symbol):
        """Place a symbol; return False (board unchanged) if out of bounds or occupied."""
        if symbol not in self.symbols:
            raise ValueError(f"symbol must be one of {self.symbols}, got {symbol!r}")
        if not self.is_empty(r, c):
            return False
        self.cells[r][c] = symbol
        return True

    def remove(self, r, c):
        """Clear a cell. Only meant for undoing a placement made during search."""
        if self.in_bounds(r, c):
            self.cells[r][c] = self.empty

    def clear(self):
        for row in self.cells:
            for c in range(self.size):
                row[c] = self.empty

    def is_full(self):
        return all(cell != self.empty for row in self.cells for cell in row)

    def empty_cells(self):
        """Yield empty (row, col) pairs in row-major order."""
        for r in range(self.size):
            for c in range(self.size):
                if self.cells[r][c] == self.empty:
                    yield r, c

    def grid_copy(self):
        return [row[:] for row in self.cells]

    def check_win(self, r, c, symbol):
        """Check for win_length or more through (r, c); only meaningful for the cell just placed."""
        if not self.in_bounds(r, c) or self.cells[r][c] != symbol:
            return False
        for dr, dc in DIRECTIONS:
            forward = self._count_dir(r, c, dr, dc, symbol)
            backward = self._count_dir(r, c, -dr, -dc, symbol)
            if 1 + forward + backward >= self.win_length:
                return True
        return False

    def _count_dir(self, r, c, dr, dc, symbol):
        """Count contiguous symbols from (r, c) (exclusive) in (dr, dc), at most win_length - 1."""
        count = 0
        cr, cc = r + dr, c + dc
        while count < self.win_length - 1 and self.in_bounds(cr, cc) and self.cells[cr][cc] == symbol:
            count += 1
            cr += dr
            cc += dc
        return count

    def render(self):
        header = "  " + " ".join(str(c) for c in range(self.size))
        rows = [f"{r} " + " ".join(self.cells[r]) for r in range(self.size)]
        return "\n".join([header] + rows)

    def __str__(self):
        return self.render()
