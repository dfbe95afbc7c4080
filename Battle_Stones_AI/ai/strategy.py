"""AI move selection for both rulesets across difficulty tiers."""

from __future__ import annotations

import logging
import random

from ..Board import GameType, check_color
from ..engine import go_rules
from ..engine.scoring import default_komi
from ..utils import timer
from . import go_heuristic, heuristic, joseki, move_selector, search_minimax
from .config import Difficulty, rank_config, tier_config

LOGGER = logging.getLogger(__name__)

PASS = "PASS"
RESIGN = "RESIGN"

EASY_TIE_MARGIN = 10


def get_ai_move(
    board,
    player,
    game_type=GameType.GO,
    difficulty=Difficulty.MEDIUM,
    previous_hash=None,
    *,
    move_number=None,
    deadline=None,
    rng=None,
    suggester=None,
    history=(),
    komi=None,
    rank=None,
    tier_overrides=None,
    weights=None,
    joseki_table=None,
):
    """
    Pick a move for `player`: an (x, y) point, PASS, or RESIGN.

    difficulty selects the tier config; a kyu/dan `rank` overrides it and also
    sets the simulation budget for `suggester`. The deadline (epoch seconds) is a
    soft budget: once it passes, the best candidate seen so far is returned.
    """
    check_color(player)
    game_type = GameType(game_type)
    rng = rng or random.Random()
    komi = default_komi(board.size) if komi is None else komi

    ranked = rank_config(rank) if rank is not None else None
    if ranked is not None:
        difficulty = ranked.difficulty
    config = tier_config(difficulty, tier_overrides)

    use_model = ranked.use_model if ranked is not None else config.use_model
    if suggester is not None and use_model:
        simulations = ranked.simulations if ranked is not None else 1
        temperature = ranked.temperature if ranked is not None else 0.0
        move = _from_suggester(
            board, player, game_type, previous_hash, suggester, history, simulations, komi, temperature
        )
        if move is not None:
            return move

    if game_type is GameType.GOMOKU:
        return _gomoku_move(board, player, config, rng, deadline, weights)
    return _go_move(board, player, config, rng, deadline, previous_hash, move_number, komi, joseki_table)


def _from_suggester(board, player, game_type, previous_hash, suggester, history, simulations, komi, temperature):
    suggestion = suggester.suggest(board, history, player, simulations, komi, temperature)
    LOGGER.debug("suggester proposed %s (win rate %.1f%%)", suggestion.move, suggestion.win_rate)
    if suggestion.move is None:
        return PASS if game_type is GameType.GO else None
    x, y = suggestion.move
    if go_rules.is_legal(board, x, y, player, game_type, previous_hash):
        return (x, y)
    LOGGER.warning("suggester proposed illegal move %s; falling back to heuristics", suggestion.move)
    return None


# --- Gomoku ---------------------------------------------------------------------

def _gomoku_move(board, player, config, rng, deadline, weights):
    candidates = [mv for mv in move_selector.generate_candidates(board) if board.is_empty(*mv)]
    if not candidates:
        return PASS

    if config.search_depth > 0:
        return search_minimax.choose_move(
            board,
            player,
            depth=config.search_depth,
            deadline=deadline,
            beam_width=config.beam_width,
            root_beam_width=config.root_beam_width,
            weights=weights,
        )

    scored = []
    for x, y in candidates:
        score = heuristic.gomoku_score(board, x, y, player, strict=config.strict, weights=weights)
        if config.gomoku_noise:
            score += rng.random() * config.gomoku_noise
        scored.append(((x, y), score))
        if timer.expired(deadline):
            break

    # Noisy tiers pick among near-ties; the others among exact ties.
    best_score = max(score for _, score in scored)
    margin = EASY_TIE_MARGIN if config.gomoku_noise else 0
    near = [move for move, score in scored if best_score - score <= margin]
    return rng.choice(near)


# --- Go -------------------------------------------------------------------------

def _go_move(board, player, config, rng, deadline, previous_hash, move_number, komi, joseki_table):
    if go_heuristic.should_resign(board, player, config, move_number=move_number, komi=komi):
        return RESIGN

    if config.use_joseki and board.size >= config.joseki_min_size:
        move = joseki.get_joseki_move(board, player, previous_hash, table=joseki_table)
        if move is not None:
            return move

    best_move = None
    best_weight = -float("inf")
    for x, y in move_selector.generate_candidates(board):
        if go_heuristic.is_eye(board, x, y, player):
            continue
        weight = go_heuristic.evaluate_move(board, x, y, player, config, previous_hash=previous_hash, rng=rng)
        if weight is None:
            continue
        if weight > best_weight:
            best_weight = weight
            best_move = (x, y)
        if best_move is not None and timer.expired(deadline):
            LOGGER.debug("go budget exhausted; keeping %s", best_move)
            break

    return best_move if best_move is not None else PASS
