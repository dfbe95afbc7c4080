"""Board state container: flat cell array, neighbours, and line counting."""

from __future__ import annotations

import enum
from typing import Iterator, NamedTuple

BLACK = -1
WHITE = 1
EMPTY = 0

MIN_SIZE = 4
MAX_SIZE = 19

DIAGONAL = ((1, 1), (1, -1), (-1, 1), (-1, -1))
LINE_DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))


class GameType(enum.Enum):
    GO = "go"
    GOMOKU = "gomoku"


class Stone(NamedTuple):
    color: int
    x: int
    y: int

    @property
    def stone_id(self) -> str:
        # Renderer-facing identifier only; the rules never read it.
        return f"{color_name(self.color)}-{self.x}-{self.y}"


def color_name(color: int) -> str:
    return "black" if color == BLACK else "white"


def check_color(color: int) -> None:
    if color not in (BLACK, WHITE):
        raise ValueError("color must be -1 (black) or 1 (white)")


class Board:
    def __init__(self, size=19):
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(f"board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}")
        # Row-major: index = y * size + x; -1 black, 0 empty, 1 white
        self.size = size
        self.cells = [EMPTY] * (size * size)

    def idx(self, x, y):
        return y * self.size + x

    def xy(self, index):
        return index % self.size, index // self.size

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x, y):
        return self.cells[y * self.size + x]

    def is_empty(self, x, y):
        return self.in_bounds(x, y) and self.cells[y * self.size + x] == EMPTY

    def place(self, x, y, color):
        """Place a stone without applying any rules; raise if out of bounds or occupied."""
        check_color(color)
        if not self.in_bounds(x, y):
            raise ValueError("move out of bounds")
        if self.cells[y * self.size + x] != EMPTY:
            raise ValueError("cell already occupied")
        self.cells[y * self.size + x] = color

    def _push_stone(self, x, y, color):
        self.cells[y * self.size + x] = color

    def _pop_stone(self, x, y):
        self.cells[y * self.size + x] = EMPTY

    def clone(self):
        new_board = Board.__new__(Board)
        new_board.size = self.size
        new_board.cells = self.cells[:]
        return new_board

    def neighbors(self, x, y):
        """Orthogonal neighbours of (x, y) that lie on the board."""
        size = self.size
        out = []
        if x > 0:
            out.append((x - 1, y))
        if x < size - 1:
            out.append((x + 1, y))
        if y > 0:
            out.append((x, y - 1))
        if y < size - 1:
            out.append((x, y + 1))
        return out

    def stone_count(self):
        return sum(1 for v in self.cells if v != EMPTY)

    def is_blank(self):
        return not any(self.cells)

    def empty_points(self):
        size = self.size
        return [(i % size, i // size) for i, v in enumerate(self.cells) if v == EMPTY]

    def stones(self) -> Iterator[Stone]:
        size = self.size
        for i, v in enumerate(self.cells):
            if v != EMPTY:
                yield Stone(v, i % size, i // size)

    def has_five_or_more(self, x, y):
        """Check for 5+ in any direction through (x, y)."""
        return self.max_line_length(x, y) >= 5

    def max_line_length(self, x, y):
        """Return the maximum contiguous line length through (x, y)."""
        color = self.get(x, y)
        if color == EMPTY:
            return 0
        best = 0
        for dx, dy in LINE_DIRECTIONS:
            forward = self._count_dir(x, y, dx, dy, color)
            backward = self._count_dir(x, y, -dx, -dy, color)
            best = max(best, 1 + forward + backward)
        return best

    def _count_dir(self, x, y, dx, dy, color):
        """Count contiguous stones of color from (x,y) (exclusive) in (dx,dy)."""
        count = 0
        cx, cy = x + dx, y + dy
        while self.in_bounds(cx, cy) and self.cells[cy * self.size + cx] == color:
            count += 1
            cx += dx
            cy += dy
        return count

    def rows(self):
        size = self.size
        return [self.cells[y * size:(y + 1) * size] for y in range(size)]

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __hash__(self):
        return hash((self.size, tuple(self.cells)))

    def __str__(self):
        symbols = {BLACK: "X", WHITE: "O", EMPTY: "."}
        header = "   " + " ".join(f"{x % 10}" for x in range(self.size))
        lines = [header]
        for y, row in enumerate(self.rows()):
            lines.append(f"{y:2d} " + " ".join(symbols[v] for v in row))
        return "\n".join(lines)

    @classmethod
    def from_rows(cls, rows):
        """Build a board from strings using X (black), O (white) and . (empty)."""
        size = len(rows)
        board = cls(size)
        mapping = {"X": BLACK, "B": BLACK, "O": WHITE, "W": WHITE, ".": EMPTY, "+": EMPTY}
        for y, row in enumerate(rows):
            row = row.replace(" ", "")
            if len(row) != size:
                raise ValueError(f"row {y} has length {len(row)}, expected {size}")
            for x, ch in enumerate(row):
                try:
                    board.cells[y * size + x] = mapping[ch]
                except KeyError:
                    raise ValueError(f"unknown board symbol {ch!r}") from None
        return board


def create_board(size):
    return Board(size)
