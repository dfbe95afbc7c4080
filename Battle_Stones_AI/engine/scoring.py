"""Area (Chinese-style) scoring with komi."""

from __future__ import annotations

import math
from collections import deque
from typing import NamedTuple

from ..Board import Board, BLACK, WHITE, EMPTY

DEFAULT_KOMI = 7.5
SMALL_BOARD_KOMI = 6.5
WIN_RATE_SLOPE = 0.12
WIN_RATE_MIN_STONES = 10


class Score(NamedTuple):
    black: float
    white: float

    def margin(self, color: int) -> float:
        """Score differential from `color`'s point of view."""
        return self.black - self.white if color == BLACK else self.white - self.black

    def winner(self) -> int:
        return BLACK if self.black > self.white else WHITE


class ScoreBreakdown(NamedTuple):
    black_stones: int
    white_stones: int
    black_territory: int
    white_territory: int
    dame: int

    def total_cells(self) -> int:
        return sum(self)


def default_komi(size: int) -> float:
    return SMALL_BOARD_KOMI if size <= 9 else DEFAULT_KOMI


def _empty_regions(board: Board):
    """Yield (region_size, touches_black, touches_white) for every empty region, each cell once."""
    size = board.size
    cells = board.cells
    visited = set()
    for start, value in enumerate(cells):
        if value != EMPTY or start in visited:
            continue
        visited.add(start)
        queue = deque([start])
        region = 0
        touches_black = touches_white = False
        while queue:
            current = queue.popleft()
            region += 1
            for nx, ny in board.neighbors(current % size, current // size):
                n = ny * size + nx
                neighbor = cells[n]
                if neighbor == BLACK:
                    touches_black = True
                elif neighbor == WHITE:
                    touches_white = True
                elif n not in visited:
                    visited.add(n)
                    queue.append(n)
        yield region, touches_black, touches_white


def score_breakdown(board: Board) -> ScoreBreakdown:
    black_stones = sum(1 for v in board.cells if v == BLACK)
    white_stones = sum(1 for v in board.cells if v == WHITE)
    black_territory = white_territory = dame = 0
    for region, touches_black, touches_white in _empty_regions(board):
        if touches_black and not touches_white:
            black_territory += region
        elif touches_white and not touches_black:
            white_territory += region
        else:
            dame += region
    return ScoreBreakdown(black_stones, white_stones, black_territory, white_territory, dame)


def calculate_score(board: Board, komi: float = DEFAULT_KOMI) -> Score:
    """Stones plus surrounded empty regions per color; komi goes to white."""
    parts = score_breakdown(board)
    black = parts.black_stones + parts.black_territory
    white = parts.white_stones + parts.white_territory + komi
    return Score(black, white)


def estimate_win_rate(board: Board, komi: float = DEFAULT_KOMI) -> float:
    """Black's win percentage from a logistic over the area-score margin."""
    if board.stone_count() < WIN_RATE_MIN_STONES:
        return 50.0
    score = calculate_score(board, komi)
    diff = score.black - score.white
    return 100.0 / (1.0 + math.exp(-WIN_RATE_SLOPE * diff))
