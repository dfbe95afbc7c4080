"""Area scoring with komi."""

import pytest

from Battle_Stones_AI.Board import BLACK, WHITE, Board
from Battle_Stones_AI.engine.scoring import (
    Score,
    calculate_score,
    default_komi,
    estimate_win_rate,
    score_breakdown,
)


def test_empty_board_scores_only_komi():
    b = Board(size=9)
    assert calculate_score(b, komi=7.5) == Score(0, 7.5)
    assert calculate_score(b).white == 7.5


def test_walls_split_territory_and_dame():
    b = Board.from_rows([
        ".X.O.",
        ".X.O.",
        ".X.O.",
        ".X.O.",
        ".X.O.",
    ])
    parts = score_breakdown(b)
    assert parts.black_territory == 5
    assert parts.white_territory == 5
    assert parts.dame == 5
    score = calculate_score(b, komi=0.5)
    assert score == Score(10, 10.5)
    assert score.winner() == WHITE
    assert score.margin(BLACK) == pytest.approx(-0.5)


def test_every_cell_is_counted_exactly_once():
    b = Board.from_rows([
        "..X.O..",
        ".XX.OO.",
        "X..X...",
        ".X.O.O.",
        "XX..O..",
        "..O.X..",
        "O....X.",
    ])
    assert score_breakdown(b).total_cells() == 49


def test_lone_stone_owns_the_board():
    b = Board(size=5)
    b.place(2, 2, BLACK)
    score = calculate_score(b, komi=6.5)
    assert score.black == 25
    assert score.winner() == BLACK


def test_default_komi_depends_on_size():
    assert default_komi(9) == 6.5
    assert default_komi(7) == 6.5
    assert default_komi(13) == 7.5
    assert default_komi(19) == 7.5


def test_win_rate_is_neutral_early_and_favours_the_leader():
    b = Board(size=9)
    b.place(4, 4, BLACK)
    assert estimate_win_rate(b) == 50.0
    for x in range(9):
        b.place(x, 2, BLACK)
    assert estimate_win_rate(b, komi=0.5) > 50.0
