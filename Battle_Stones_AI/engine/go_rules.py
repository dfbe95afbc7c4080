"""Move validation and execution: occupancy, captures, suicide, simple ko."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

from ..Board import Board, EMPTY, GameType, check_color
from ..ai import transposition
from .groups import group_of


class IllegalReason(enum.Enum):
    OUT_OF_BOUNDS = "out of bounds"
    OCCUPIED = "cell already occupied"
    SUICIDE = "suicide"
    KO = "ko repetition"


@dataclass(frozen=True)
class Illegal:
    reason: IllegalReason

    def __bool__(self):
        return False


@dataclass(frozen=True)
class MoveResult:
    board: Board
    captured: int
    ko_point: Optional[tuple] = None


MoveOutcome = Union[MoveResult, Illegal]


def attempt_move(board: Board, x: int, y: int, player: int, game_type=GameType.GO, previous_hash=None, ko_point=None) -> MoveOutcome:
    """
    Try to play `player` at (x, y). Returns a MoveResult with a new board, or an
    Illegal value. The input board is never modified.

    previous_hash is the hash of the board as it stood before the opponent's last
    move; a result equal to it is a ko repetition (single-ply lookback only).
    """
    check_color(player)
    if not board.in_bounds(x, y):
        return Illegal(IllegalReason.OUT_OF_BOUNDS)
    if board.get(x, y) != EMPTY:
        return Illegal(IllegalReason.OCCUPIED)
    if ko_point is not None and tuple(ko_point) == (x, y):
        return Illegal(IllegalReason.KO)

    new_board = board.clone()
    new_board._push_stone(x, y, player)

    if GameType(game_type) is GameType.GOMOKU:
        return MoveResult(new_board, 0)

    captured = 0
    captured_points = []
    for nx, ny in new_board.neighbors(x, y):
        if new_board.get(nx, ny) != -player:
            continue
        group = group_of(new_board, (nx, ny))
        if group.liberties == 0:
            for sx, sy in group.stones:
                new_board._pop_stone(sx, sy)
            captured += len(group.stones)
            captured_points.extend(group.stones)

    own = group_of(new_board, (x, y))
    if own.liberties == 0 and captured == 0:
        return Illegal(IllegalReason.SUICIDE)

    if previous_hash is not None and transposition.get_board_hash(new_board) == previous_hash:
        return Illegal(IllegalReason.KO)

    new_ko = None
    if captured == 1 and len(own.stones) == 1 and own.liberties == 1:
        new_ko = captured_points[0]

    return MoveResult(new_board, captured, new_ko)


def is_legal(board: Board, x: int, y: int, player: int, game_type=GameType.GO, previous_hash=None) -> bool:
    return isinstance(attempt_move(board, x, y, player, game_type, previous_hash), MoveResult)
