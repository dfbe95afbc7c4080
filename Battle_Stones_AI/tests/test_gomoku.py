"""Freestyle Gomoku win detection."""

import pytest

from Battle_Stones_AI.Board import BLACK, WHITE, Board
from Battle_Stones_AI.engine.gomoku_rules import check_gomoku_win, find_winner, is_win_after_move


@pytest.mark.parametrize(
    "line",
    [
        [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)],
        [(6, 2), (6, 3), (6, 4), (6, 5), (6, 6)],
        [(0, 0), (1, 1), (2, 2), (3, 3), (4, 4)],
        [(6, 0), (5, 1), (4, 2), (3, 3), (2, 4)],
    ],
    ids=["horizontal", "vertical", "diagonal", "anti-diagonal"],
)
def test_five_wins_in_every_direction(line):
    b = Board(size=7)
    for x, y in line[:-1]:
        b.place(x, y, WHITE)
    assert not check_gomoku_win(b, line[-2])
    b.place(*line[-1], WHITE)
    assert check_gomoku_win(b, line[-1])
    assert check_gomoku_win(b, line[2])
    assert find_winner(b) == WHITE


def test_blocked_four_is_not_a_win():
    b = Board(size=9)
    b.place(0, 4, WHITE)
    for x in range(1, 5):
        b.place(x, 4, BLACK)
    b.place(5, 4, WHITE)
    assert not is_win_after_move(b, 4, 4, BLACK)
    assert find_winner(b) is None


def test_overline_wins():
    b = Board(size=9)
    for x in range(6):
        b.place(x, 0, BLACK)
    assert is_win_after_move(b, 5, 0, BLACK)


def test_wrong_color_or_empty_point_is_not_a_win():
    b = Board(size=9)
    for x in range(5):
        b.place(x, 0, BLACK)
    assert not is_win_after_move(b, 2, 0, WHITE)
    assert not check_gomoku_win(b, (8, 8))
    assert not check_gomoku_win(b, None)
