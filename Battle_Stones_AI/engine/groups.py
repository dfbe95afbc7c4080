"""Connected-group and liberty analysis (breadth-first flood fill)."""

from __future__ import annotations

from collections import deque
from typing import NamedTuple, Optional

from ..Board import Board, EMPTY


class Group(NamedTuple):
    color: int
    stones: tuple
    liberty_points: frozenset

    @property
    def liberties(self) -> int:
        return len(self.liberty_points)

    def __len__(self):
        return len(self.stones)


def group_of(board: Board, point) -> Optional[Group]:
    """
    Return the group containing `point`, or None if the point is empty.
    Liberties are the distinct empty neighbours of the whole group, keyed by flat index.
    """
    x, y = point
    if not board.in_bounds(x, y):
        raise ValueError(f"point {point} is outside a {board.size}x{board.size} board")
    size = board.size
    cells = board.cells
    start = y * size + x
    color = cells[start]
    if color == EMPTY:
        return None

    visited = {start}
    liberties = set()
    stones = []
    queue = deque([start])
    while queue:
        current = queue.popleft()
        stones.append((current % size, current // size))
        cx, cy = current % size, current // size
        for nx, ny in board.neighbors(cx, cy):
            n = ny * size + nx
            value = cells[n]
            if value == EMPTY:
                liberties.add(n)
            elif value == color and n not in visited:
                visited.add(n)
                queue.append(n)

    return Group(color, tuple(stones), frozenset(board.xy(i) for i in liberties))


def all_groups(board: Board) -> list[Group]:
    """Partition every stone on the board into exactly one group."""
    size = board.size
    seen = set()
    groups = []
    for index, value in enumerate(board.cells):
        if value == EMPTY or index in seen:
            continue
        group = group_of(board, (index % size, index // size))
        seen.update(y * size + x for x, y in group.stones)
        groups.append(group)
    return groups


def adjacent_groups(board: Board, point, color: int) -> list[Group]:
    """Distinct groups of `color` orthogonally touching `point`."""
    size = board.size
    found = []
    seen = set()
    for nx, ny in board.neighbors(*point):
        if board.get(nx, ny) != color or ny * size + nx in seen:
            continue
        group = group_of(board, (nx, ny))
        seen.update(y * size + x for x, y in group.stones)
        found.append(group)
    return found
