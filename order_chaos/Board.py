"""Board state container for Order & Chaos (write-once cells, 6x6 grid)."""

BOARD_SIZE = 6

# Cells hold 0 (empty), -1 (blue) or 1 (red)
EMPTY = 0
BLUE = -1
RED = 1

PIECE_NAMES = {EMPTY: "Empty", BLUE: "Blue", RED: "Red"}


class MoveError(ValueError):
    """Base class for rejected moves."""


class OutOfBounds(MoveError):
    pass


class CellOccupied(MoveError):
    pass


class Board:
    def __init__(self, size=BOARD_SIZE):
        self.size = size
        self.cells = [[EMPTY] * size for _ in range(size)]
        self.move_count = 0
        self.history = []

    def in_bounds(self, row, col):
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row, col):
        if not self.in_bounds(row, col):
            raise OutOfBounds(f"({row}, {col}) is outside the {self.size}x{self.size} board")
        return self.cells[row][col]

    def place(self, row, col, piece):
        """Place a piece; raise if out of bounds or occupied."""
        if piece not in (BLUE, RED):
            raise ValueError("piece must be -1 (blue) or 1 (red)")
        if not self.in_bounds(row, col):
            raise OutOfBounds(f"({row}, {col}) is outside the {self.size}x{self.size} board")
        if self.cells[row][col] != EMPTY:
            raise CellOccupied(f"({row}, {col}) already holds {PIECE_NAMES[self.cells[row][col]]}")
        self.cells[row][col] = piece
        self.move_count += 1
        self.history.append((row, col, piece))

    def is_full(self):
        return all(cell != EMPTY for row in self.cells for cell in row)

    def empty_cells(self):
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] == EMPTY
        ]

    def rows(self):
        """Row-major snapshot; each row is a fresh list."""
        return [row[:] for row in self.cells]

    def __iter__(self):
        return iter(self.rows())

