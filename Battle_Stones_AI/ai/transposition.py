"""Zobrist hashing and transposition table helpers."""

import random
from functools import lru_cache


def zobrist_init(size=19, seed=None):
    rng = random.Random(seed)
    return [[rng.getrandbits(64) for _ in range(2)] for _ in range(size * size)]


@lru_cache(maxsize=None)
def shared_table(size):
    """Per-size table with a fixed seed so hashes compare equal across calls."""
    return tuple(tuple(row) for row in zobrist_init(size, seed=size))


def color_index(color):
    return 0 if color == -1 else 1


def hash_board(board, table):
    """Compute Zobrist hash for a Board (-1 black, 1 white)."""
    h = 0
    for i, v in enumerate(board.cells):
        if v == 0:
            continue
        h ^= table[i][color_index(v)]
    return h


def get_board_hash(board):
    return hash_board(board, shared_table(board.size))


def toggle(h, table, index, color):
    """Hash after adding or removing a stone of `color` at flat `index`."""
    return h ^ table[index][color_index(color)]
