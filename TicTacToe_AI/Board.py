"""Board state container and terminal-state checking (full-line rule).

Cells are addressed as ``cells[x][y]`` where ``x`` is the row and ``y`` the
column, so row-major order means ``x`` in the outer loop.
"""

from enum import Enum, IntEnum

try:
    from engine.errors import CellOccupied, InvalidCoordinate
except ImportError:
    from TicTacToe_AI.engine.errors import CellOccupied, InvalidCoordinate


class Mark(IntEnum):
    EMPTY = 0
    CROSS = -1
    CIRCLE = 1

    @property
    def symbol(self):
        return _SYMBOLS[self]

    def opposite(self):
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite mark")
        return Mark(-self.value)

    @classmethod
    def from_symbol(cls, text):
        """Parse 'X'/'O' (and '_', '.', ' ' for empty), case-insensitive."""
        key = str(text).strip().upper() or " "
        for mark, symbol in _SYMBOLS.items():
            if key == symbol:
                return mark
        if key in ("_", ".", " "):
            return cls.EMPTY
        raise ValueError(f"unknown mark symbol: {text!r}")


_SYMBOLS = {Mark.EMPTY: "_", Mark.CROSS: "X", Mark.CIRCLE: "O"}


class Outcome(Enum):
    ONGOING = "ongoing"
    CROSS_WINS = "cross_wins"
    CIRCLE_WINS = "circle_wins"
    TIE = "tie"

    @property
    def is_terminal(self):
        return self is not Outcome.ONGOING

    @property
    def winner(self):
        """Winning mark, or None for a tie or an unfinished game."""
        if self is Outcome.CROSS_WINS:
            return Mark.CROSS
        if self is Outcome.CIRCLE_WINS:
            return Mark.CIRCLE
        return None

    @classmethod
    def win_for(cls, mark):
        if mark == Mark.CROSS:
            return cls.CROSS_WINS
        if mark == Mark.CIRCLE:
            return cls.CIRCLE_WINS
        raise ValueError("only CROSS or CIRCLE can win")


def _is_index(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _build_lines(size):
    """All rows, all columns and the two main diagonals as coordinate tuples."""
    lines = []
    for i in range(size):
        lines.append(tuple((i, j) for j in range(size)))
        lines.append(tuple((j, i) for j in range(size)))
    lines.append(tuple((i, i) for i in range(size)))
    lines.append(tuple((i, size - 1 - i) for i in range(size)))
    return tuple(lines)


class Board:
    def __init__(self, size=3):
        if size < 1:
            raise ValueError("board size must be at least 1")
        self.size = size
        self.cells = [[Mark.EMPTY] * size for _ in range(size)]
        self.move_count = 0
        self.history = []
        self._lines = _build_lines(size)

    @classmethod
    def from_rows(cls, rows):
        """Build a board from text rows, e.g. ``["XO_", "_X_", "__O"]``."""
        rows = [row.replace(" ", "").replace("/", "") for row in rows]
        board = cls(len(rows))
        for x, row in enumerate(rows):
            if len(row) != board.size:
                raise ValueError(f"row {x} has {len(row)} cells, expected {board.size}")
            for y, ch in enumerate(row):
                mark = Mark.from_symbol(ch)
                if mark != Mark.EMPTY:
                    board.place(x, y, mark)
        return board

    def in_bounds(self, x, y):
        if not (_is_index(x) and _is_index(y)):
            return False
        return 0 <= x < self.size and 0 <= y < self.size

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[x][y] == Mark.EMPTY

    def is_full(self):
        return self.move_count >= self.size * self.size

    def place(self, x, y, mark):
        """Place a mark; raise if out of bounds or occupied."""
        if mark not in (Mark.CROSS, Mark.CIRCLE):
            raise ValueError("mark must be CROSS or CIRCLE")
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(x, y, self.size)
        if self.cells[x][y] != Mark.EMPTY:
            raise CellOccupied(x, y, self.cells[x][y])
        self._push_mark(x, y, Mark(mark))

    def clear(self, x, y):
        """Reset a cell to EMPTY."""
        if not self.in_bounds(x, y):
            raise InvalidCoordinate(x, y, self.size)
        if self.cells[x][y] == Mark.EMPTY:
            return
        self.cells[x][y] = Mark.EMPTY
        self.move_count -= 1
        self.history.remove((x, y))

    # Unchecked placement used by the search; every push is paired with a pop.
    def _push_mark(self, x, y, mark):
        self.cells[x][y] = mark
        self.move_count += 1
        self.history.append((x, y))

    def _pop_mark(self, x, y):
        self.cells[x][y] = Mark.EMPTY
        self.move_count -= 1
        self.history.pop()

    def winner(self):
        """Return the Outcome: a completed line first, then the tie scan."""
        cells = self.cells
        for line in self._lines:
            x0, y0 = line[0]
            first = cells[x0][y0]
            if first == Mark.EMPTY:
                continue
            if all(cells[x][y] == first for x, y in line[1:]):
                return Outcome.win_for(first)

        for row in cells:
            if Mark.EMPTY in row:
                return Outcome.ONGOING
        return Outcome.TIE

    def open_cells(self):
        """Yield empty (x, y) in row-major order; recomputed on every call."""
        for x in range(self.size):
            for y in range(self.size):
                if self.cells[x][y] == Mark.EMPTY:
                    yield (x, y)

    def clone(self):
        new_board = Board(self.size)
        new_board.cells = [row[:] for row in self.cells]
        new_board.move_count = self.move_count
        new_board.history = self.history[:]
        return new_board

    def snapshot(self):
        """Hashable copy of the full state, used to check the board is untouched."""
        return (tuple(tuple(row) for row in self.cells), self.move_count, tuple(self.history))

    def __str__(self):
        return "\n".join(" ".join(mark.symbol for mark in row) for row in self.cells)

    def __repr__(self):
        rows = ["".join(mark.symbol for mark in row) for row in self.cells]
        return f"Board.from_rows({rows!r})"
