"""Move validation, time control, and disqualification handling."""

from ..Board import GameType
from ..utils import timer
from . import go_rules


def check_move(move, board, color, game_type=GameType.GO, deadline=None, previous_hash=None):
    """
    Validate a move against time and the ruleset, returning the MoveResult.
    Raises TimeoutError past the deadline and ValueError on an illegal move.
    """
    if timer.expired(deadline):
        raise TimeoutError("Move exceeded allotted time")

    try:
        x, y = move
    except (TypeError, ValueError):
        raise ValueError(f"Malformed move {move!r}") from None

    result = go_rules.attempt_move(board, x, y, color, game_type, previous_hash)
    if not isinstance(result, go_rules.MoveResult):
        raise ValueError(f"Illegal move {move}: {result.reason.value}")
    return result
