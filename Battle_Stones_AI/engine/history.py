"""Move history entries and the single-ply ko lookback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..Board import Board
from ..ai import transposition


@dataclass(frozen=True)
class HistoryEntry:
    """Snapshot taken before `player` moved; last_move is None for a pass."""

    board: Board
    player: int
    black_captures: int
    white_captures: int
    last_move: Optional[tuple]
    consecutive_passes: int


def previous_hash(history: Sequence[HistoryEntry]):
    """
    Hash of the board before the opponent's last move. A move recreating it
    is a ko repetition. Longer cycles are not detected.
    """
    if not history:
        return None
    return transposition.get_board_hash(history[-1].board)


def moves_of(history: Sequence[HistoryEntry]):
    """(color, point-or-None) pairs in play order."""
    return [(entry.player, entry.last_move) for entry in history]
