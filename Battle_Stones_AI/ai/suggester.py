"""Contract for an external move suggester (e.g. a neural network service)."""

from __future__ import annotations

from typing import NamedTuple, Optional, Protocol, Sequence


class Suggestion(NamedTuple):
    move: Optional[tuple]  # None means pass
    win_rate: float


class MoveSuggester(Protocol):
    def suggest(
        self, board, history: Sequence, color: int, simulations: int, komi: float, temperature: float
    ) -> Suggestion:
        """
        Return a move (or None to pass) and the mover's estimated win rate in percent.
        temperature 0 means always take the top move; higher values sample more widely.
        """
        ...
