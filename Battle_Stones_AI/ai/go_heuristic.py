"""Single-move evaluation for Go: captures, atari, safety, shape, position, and resignation."""

from __future__ import annotations

import dataclasses
import logging
import random

from ..Board import DIAGONAL, EMPTY
from ..engine import go_rules
from ..engine.groups import adjacent_groups, group_of
from ..engine.scoring import calculate_score
from . import move_selector

LOGGER = logging.getLogger(__name__)

CAPTURE_BASE = 100
CAPTURE_PER_STONE = 25
SAVE_ALLY_BONUS = 80
ATARI_BONUS = 40
CONTACT_BONUS = 5
CONNECT_BONUS = 10
TIGER_MOUTH_BONUS = 8
CUT_BONUS = 15
SNAPBACK_BONUS = 20
CORNER_BONUS = 30
FIRST_LINE_PENALTY = 50
SECOND_LINE_PENALTY = 10
CENTER_WEIGHT = 0.5
POSITION_MIN_SIZE = 9
LOOKAHEAD_RADIUS = 2


def is_eye(board, x, y, color):
    """True when every orthogonal neighbour of an empty point is `color`."""
    if board.get(x, y) != EMPTY:
        return False
    return all(board.get(nx, ny) == color for nx, ny in board.neighbors(x, y))


def shape_score(board, x, y, color):
    """Local shape bonus for `color` at (x, y) on the board before the move."""
    score = 0
    friendly = enemy = 0
    for nx, ny in board.neighbors(x, y):
        value = board.get(nx, ny)
        if value == color:
            friendly += 1
        elif value == -color:
            enemy += 1

    if enemy >= 1:
        score += CONTACT_BONUS
    if friendly >= 2:
        score += CONNECT_BONUS

    # Tiger's mouth: diagonal friend with neither shared orthogonal point held by us.
    for dx, dy in DIAGONAL:
        dxp, dyp = x + dx, y + dy
        if not board.in_bounds(dxp, dyp) or board.get(dxp, dyp) != color:
            continue
        if board.get(x + dx, y) != color and board.get(x, y + dy) != color:
            score += TIGER_MOUTH_BONUS

    if len(adjacent_groups(board, (x, y), -color)) >= 2:
        score += CUT_BONUS
    return score


def position_score(board, x, y):
    """Corner/star preference, first/second line penalties, and a center pull."""
    size = board.size
    score = 0.0
    if size >= POSITION_MIN_SIZE:
        line_x = min(x, size - 1 - x)
        line_y = min(y, size - 1 - y)
        if line_x in (2, 3) and line_y in (2, 3):
            if all(board.get(nx, ny) == EMPTY for nx, ny in board.neighbors(x, y)):
                score += CORNER_BONUS
        if line_x == 0 or line_y == 0:
            score -= FIRST_LINE_PENALTY
        elif line_x == 1 or line_y == 1:
            score -= SECOND_LINE_PENALTY
    center = size // 2
    distance = max(abs(x - center), abs(y - center))
    score += (center - distance) * CENTER_WEIGHT
    return score


def evaluate_move(board, x, y, color, config, previous_hash=None, rng=None, lookahead=None):
    """
    Score a candidate move for `color`. Returns None when the move is illegal.
    With lookahead, the opponent's best local reply (same scoring, no jitter) is
    subtracted, scaled by config.lookahead_weight.
    """
    sim = go_rules.attempt_move(board, x, y, color, previous_hash=previous_hash)
    if not isinstance(sim, go_rules.MoveResult):
        return None

    rng = rng or random
    weight = rng.random() * config.jitter if config.jitter else 0.0

    if sim.captured > 0:
        weight += CAPTURE_BASE + sim.captured * CAPTURE_PER_STONE

    own = group_of(sim.board, (x, y))
    saved_ally = False
    for ally in adjacent_groups(board, (x, y), color):
        if ally.liberties == 1 and own.liberties > 1:
            weight += SAVE_ALLY_BONUS
            saved_ally = True

    if own.liberties == 1 and sim.captured == 0 and not saved_ally:
        weight -= config.self_atari_penalty

    if config.use_shape:
        for enemy in adjacent_groups(sim.board, (x, y), -color):
            if enemy.liberties == 1:
                weight += ATARI_BONUS
        weight += shape_score(board, x, y, color)

    if config.use_position:
        weight += position_score(board, x, y)
        if sim.captured > 0 and own.liberties == 1:
            weight += SNAPBACK_BONUS

    use_lookahead = config.lookahead if lookahead is None else lookahead
    if use_lookahead:
        reply = best_reply_score(sim.board, (x, y), -color, config)
        if reply is not None:
            weight -= reply * config.lookahead_weight

    return weight


def best_reply_score(board, point, color, config):
    """Best static score `color` can get near `point` (no jitter, no further lookahead)."""
    quiet = dataclasses.replace(config, jitter=0.0, lookahead=False)
    best = None
    for rx, ry in move_selector.local_candidates(board, point, LOOKAHEAD_RADIUS):
        if is_eye(board, rx, ry, color):
            continue
        score = evaluate_move(board, rx, ry, color, quiet, lookahead=False)
        if score is not None and (best is None or score > best):
            best = score
    return best


def should_resign(board, color, config, move_number=None, komi=7.5):
    """
    Resign only late and when clearly behind: the board must be more than
    resign_fill_ratio full, the area margin below -resign_margin, and the game
    past resign_min_moves.
    """
    if not config.may_resign:
        return False
    size = board.size
    stones = board.stone_count()
    if stones <= size * size * config.resign_fill_ratio:
        return False
    min_moves = config.resign_min_moves if config.resign_min_moves is not None else 2 * size
    moves = move_number if move_number is not None else stones
    if moves < min_moves:
        return False
    margin = calculate_score(board, komi).margin(color)
    if margin < -config.resign_margin:
        LOGGER.debug("resigning: margin %.1f at move %d", margin, moves)
        return True
    return False
