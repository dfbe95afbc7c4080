"""Corner opening lookup normalised under the symmetries of the square."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from ..Board import EMPTY
from ..engine import go_rules

LOGGER = logging.getLogger(__name__)

CORNER_WINDOW = 9

# Canonical top-left coordinates (0-indexed), colors relative to the first stone
# found scanning rows outward from the corner: 1 = same as that stone, -1 = other.
# Keys are sorted, matching signature().
DEFAULT_TABLE = {
    # 4-4 point
    ((3, 3, 1),): (5, 2),                   # enclose
    ((3, 3, 1), (3, 6, -1)): (5, 2),        # knight approach
    ((2, 5, -1), (3, 3, 1)): (2, 2),        # low approach, take 3-3
    # 3-4 point
    ((2, 3, 1),): (5, 3),                   # approach
    ((2, 3, 1), (5, 3, -1)): (3, 5),        # answer the approach
    ((2, 3, 1), (5, 2, 1)): (2, 6),         # enclosed: extend along the side
    # 3-3 invasion under the 4-4 (the invader is scanned first)
    ((2, 2, 1), (3, 3, -1)): (2, 3),        # block
    ((2, 2, 1), (2, 3, -1), (3, 3, -1)): (3, 2),  # hane
}

# Corner id -> (flip_x, flip_y) mapping the corner onto the top-left.
CORNERS = (
    (False, False),  # top-left
    (True, False),   # top-right
    (False, True),   # bottom-left
    (True, True),    # bottom-right
)


def signature(pieces):
    """Order-independent key for a set of (x, y, relative_color) pieces."""
    return tuple(sorted(pieces))


def load_table(path="config/joseki.yaml"):
    """Load the corner table from YAML; fallback to the built-in table when missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_TABLE)

    table = {}
    for entry in data.get("joseki", []):
        stones = entry.get("stones")
        reply = entry.get("reply")
        if not stones or not reply:
            raise ValueError(f"joseki entry needs 'stones' and 'reply': {entry!r}")
        key = signature(tuple(int(v) for v in stone) for stone in stones)
        table[key] = (int(reply[0]), int(reply[1]))
    return table or dict(DEFAULT_TABLE)


class JosekiMatcher:
    def __init__(self, size, table=None, window=CORNER_WINDOW):
        self.size = size
        self.table = DEFAULT_TABLE if table is None else table
        self.window = min(window, (size + 1) // 2)

    def to_canonical(self, x, y, corner):
        flip_x, flip_y = CORNERS[corner]
        last = self.size - 1
        return (last - x if flip_x else x), (last - y if flip_y else y)

    # Reflections are their own inverse.
    from_canonical = to_canonical

    def corner_pieces(self, board, corner):
        """Stones inside the corner window in canonical coordinates, row-major from the corner."""
        pieces = []
        for ly in range(self.window):
            for lx in range(self.window):
                x, y = self.from_canonical(lx, ly, corner)
                value = board.get(x, y)
                if value != EMPTY:
                    pieces.append((lx, ly, value))
        return pieces

    def lookup(self, pieces):
        """Canonical reply for the pieces, trying the diagonal transpose as well."""
        if not pieces:
            return None
        first = pieces[0][2]
        relative = [(x, y, 1 if c == first else -1) for x, y, c in pieces]
        reply = self.table.get(signature(relative))
        if reply is not None:
            return reply
        transposed = [(y, x, c) for x, y, c in relative]
        reply = self.table.get(signature(transposed))
        if reply is not None:
            return reply[1], reply[0]
        return None

    def find_move(self, board, color, previous_hash=None):
        for corner in range(len(CORNERS)):
            reply = self.lookup(self.corner_pieces(board, corner))
            if reply is None:
                continue
            x, y = self.from_canonical(reply[0], reply[1], corner)
            if go_rules.is_legal(board, x, y, color, previous_hash=previous_hash):
                LOGGER.debug("joseki reply %s in corner %d", (x, y), corner)
                return x, y
        return None


def get_joseki_move(board, color, previous_hash=None, table=None):
    return JosekiMatcher(board.size, table=table).find_move(board, color, previous_hash)
