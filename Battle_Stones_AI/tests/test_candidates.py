"""Candidate generation around existing stones and on empty boards."""

from Battle_Stones_AI.Board import BLACK, WHITE, Board
from Battle_Stones_AI.ai import move_selector


def test_empty_board_uses_opening_points():
    assert move_selector.generate_candidates(Board(size=5)) == [(2, 2)]
    nine = move_selector.generate_candidates(Board(size=9))
    assert nine[0] == (4, 4)
    assert set(nine) == {(4, 4), (2, 2), (6, 2), (2, 6), (6, 6)}
    nineteen = move_selector.generate_candidates(Board(size=19))
    assert set(nineteen) == {(9, 9), (3, 3), (15, 3), (3, 15), (15, 15)}


def test_candidates_stay_within_radius_and_empty():
    b = Board(size=9)
    b.place(0, 0, BLACK)
    cands = move_selector.generate_candidates(b)
    assert len(cands) == 8
    assert all(max(x, y) <= 2 for x, y in cands)
    assert (0, 0) not in cands
    assert cands == sorted(cands, key=lambda p: (p[1], p[0]))


def test_neighbourhood_is_the_full_square_around_a_stone():
    b = Board(size=9)
    b.place(4, 4, WHITE)
    cands = move_selector.generate_candidates(b)
    assert len(cands) == 24
    assert (2, 2) in cands and (6, 6) in cands
    assert all(max(abs(x - 4), abs(y - 4)) <= 2 for x, y in cands)
    assert move_selector.generate_candidates(b, radius=1) == [
        (3, 3), (4, 3), (5, 3), (3, 4), (5, 4), (3, 5), (4, 5), (5, 5),
    ]


def test_full_board_has_no_candidates():
    b = Board(size=4)
    for i in range(16):
        b.cells[i] = BLACK if (i // 4 + i % 4) % 2 else WHITE
    assert move_selector.generate_candidates(b) == []


def test_local_candidates_clip_at_edges():
    b = Board(size=5)
    b.place(0, 0, BLACK)
    local = move_selector.local_candidates(b, (0, 0), radius=1)
    assert sorted(local) == [(0, 1), (1, 0), (1, 1)]
