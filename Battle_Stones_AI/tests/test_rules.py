"""Go move legality: captures, suicide, simple ko, and groups never left without liberties."""

import random

from Battle_Stones_AI.Board import BLACK, EMPTY, WHITE, Board, GameType
from Battle_Stones_AI.ai.transposition import get_board_hash
from Battle_Stones_AI.engine import go_rules
from Battle_Stones_AI.engine.go_rules import Illegal, IllegalReason, MoveResult, attempt_move, is_legal
from Battle_Stones_AI.engine.groups import all_groups


def _surrounded_center():
    return Board.from_rows([
        ".....",
        "..O..",
        ".O.O.",
        "..O..",
        ".....",
    ])


def test_suicide_is_illegal():
    b = _surrounded_center()
    result = attempt_move(b, 2, 2, BLACK)
    assert isinstance(result, Illegal)
    assert result.reason is IllegalReason.SUICIDE
    assert not result
    # Filling its own eye is legal for the surrounding color.
    assert is_legal(b, 2, 2, WHITE)


def test_capture_removes_stones_and_counts_them():
    b = Board.from_rows([
        ".....",
        "..X..",
        ".XOX.",
        ".XOX.",
        ".....",
    ])
    result = attempt_move(b, 2, 4, BLACK)
    assert isinstance(result, MoveResult)
    assert result.captured == 2
    assert result.board.get(2, 2) == EMPTY
    assert result.board.get(2, 3) == EMPTY
    assert result.board.get(2, 4) == BLACK


def test_capture_is_resolved_before_suicide():
    b = Board.from_rows([
        ".OX..",
        "OX...",
        ".....",
        ".....",
        ".....",
    ])
    result = attempt_move(b, 0, 0, BLACK)
    assert isinstance(result, MoveResult)
    assert result.captured == 1
    assert result.board.get(1, 0) == EMPTY
    assert result.ko_point == (1, 0)


def test_simple_ko_retake_is_rejected():
    before = Board.from_rows([
        ".OX..",
        "OX...",
        ".....",
        ".....",
        ".....",
    ])
    taken = attempt_move(before, 0, 0, BLACK)
    retake = attempt_move(taken.board, 1, 0, WHITE, previous_hash=get_board_hash(before))
    assert isinstance(retake, Illegal)
    assert retake.reason is IllegalReason.KO
    # The marker alone rejects the retake too.
    assert attempt_move(taken.board, 1, 0, WHITE, ko_point=taken.ko_point).reason is IllegalReason.KO
    # Without any lookback the retake is an ordinary capture.
    plain = attempt_move(taken.board, 1, 0, WHITE)
    assert isinstance(plain, MoveResult)
    assert plain.captured == 1


def test_occupied_and_out_of_bounds():
    b = Board(size=5)
    b.place(1, 1, WHITE)
    assert attempt_move(b, 1, 1, BLACK).reason is IllegalReason.OCCUPIED
    assert attempt_move(b, 5, 1, BLACK).reason is IllegalReason.OUT_OF_BOUNDS
    assert attempt_move(b, -1, 0, BLACK).reason is IllegalReason.OUT_OF_BOUNDS


def test_input_board_is_never_mutated():
    b = Board.from_rows([
        ".....",
        "..X..",
        ".XOX.",
        ".....",
        ".....",
    ])
    before = list(b.cells)
    attempt_move(b, 2, 3, BLACK)
    attempt_move(b, 2, 2, BLACK)
    attempt_move(b, 0, 0, WHITE)
    assert b.cells == before


def test_gomoku_moves_never_capture():
    b = _surrounded_center()
    result = attempt_move(b, 2, 2, BLACK, GameType.GOMOKU)
    assert isinstance(result, MoveResult)
    assert result.captured == 0
    assert result.board.get(2, 2) == BLACK
    assert result.board.get(2, 1) == WHITE


def test_no_group_is_left_without_liberties():
    rng = random.Random(7)
    board = Board(size=7)
    color = BLACK
    prev = None
    for _ in range(300):
        x, y = rng.randrange(7), rng.randrange(7)
        result = attempt_move(board, x, y, color, previous_hash=prev)
        if not isinstance(result, MoveResult):
            continue
        prev = get_board_hash(board)
        board = result.board
        color = -color
        assert all(g.liberties > 0 for g in all_groups(board))


def test_ko_marker_only_for_single_stone_recapture():
    b = Board.from_rows([
        ".....",
        "..X..",
        ".XOX.",
        ".....",
        ".....",
    ])
    result = attempt_move(b, 2, 3, BLACK)
    assert result.captured == 1
    assert result.ko_point is None
    assert go_rules.is_legal(result.board, 2, 2, WHITE) is False
