"""Group flood fill and liberty counting."""

import pytest

from Battle_Stones_AI.Board import BLACK, WHITE, Board
from Battle_Stones_AI.engine.groups import adjacent_groups, all_groups, group_of


def test_single_stone_liberties_by_position():
    b = Board(size=5)
    b.place(2, 2, BLACK)
    b.place(0, 0, WHITE)
    b.place(4, 2, BLACK)
    assert group_of(b, (2, 2)).liberties == 4
    assert group_of(b, (0, 0)).liberties == 2
    assert group_of(b, (4, 2)).liberties == 3


def test_shared_liberty_is_counted_once():
    # (2, 2) touches both (2, 1) and (1, 2).
    b = Board.from_rows([
        ".....",
        ".XX..",
        ".X...",
        ".....",
        ".....",
    ])
    group = group_of(b, (1, 1))
    assert sorted(group.stones) == [(1, 1), (1, 2), (2, 1)]
    assert len(group) == 3
    assert group.liberties == 7
    assert (2, 2) in group.liberty_points


def test_empty_point_has_no_group():
    b = Board(size=4)
    assert group_of(b, (1, 1)) is None


def test_out_of_range_point_raises():
    b = Board(size=4)
    with pytest.raises(ValueError):
        group_of(b, (4, 0))


def test_all_groups_partition_every_stone():
    b = Board.from_rows([
        "XXO..",
        "X.O.X",
        "..OOX",
        "O....",
        "OX.XX",
    ])
    groups = all_groups(b)
    seen = [p for g in groups for p in g.stones]
    assert len(seen) == len(set(seen)) == b.stone_count()
    assert sorted(len(g) for g in groups) == [1, 2, 2, 2, 3, 4]
    for g in groups:
        assert all(b.get(x, y) == g.color for x, y in g.stones)


def test_adjacent_groups_are_distinct():
    b = Board.from_rows([
        ".O...",
        "O.O..",
        ".O...",
        ".....",
        ".....",
    ])
    assert len(adjacent_groups(b, (1, 1), WHITE)) == 4
    assert adjacent_groups(b, (1, 1), BLACK) == []


def test_groups_on_largest_board_edge():
    b = Board(size=19)
    for x in range(19):
        b.place(x, 18, WHITE)
    group = group_of(b, (18, 18))
    assert len(group) == 19
    assert group.liberties == 19
