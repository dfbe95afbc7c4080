"""Gomoku minimax with alpha-beta pruning, beam-limited move ordering, and a time budget."""

import logging
import time

from . import heuristic
from . import move_selector
from . import transposition
from ..engine import gomoku_rules

LOGGER = logging.getLogger(__name__)

WIN_VALUE = 10 ** 8
FUTURE_DISCOUNT = 0.8
TIME_CHECK_MASK = 255  # check every 256 nodes


class MinimaxSearcher:
    """Encapsulates the state and logic for a beam-limited alpha-beta search."""

    def __init__(self, board_size, color, depth=4, beam_width=8, root_beam_width=10, weights=None, cache=None, zobrist_table=None, stats=None):
        self.board_size = board_size
        self.color = color
        self.depth = depth
        self.beam_width = beam_width
        self.root_beam_width = root_beam_width
        self.weights = weights or heuristic.DEFAULT_WEIGHTS
        self.cache = {} if cache is None else cache
        self.zobrist_table = transposition.zobrist_init(board_size) if zobrist_table is None else zobrist_table
        self.stats_list = stats

        # Internal state
        self.node_counter = 0
        self.deadline = None
        self.start_time = None

    def choose_move(self, board, deadline=None):
        """
        Return the best move for self.color. The root is scored statically, then each
        of the top root_beam_width moves is searched to self.depth plies. When the
        deadline passes, the best move found so far is returned.
        """
        self.deadline = deadline
        self.start_time = time.time()
        self.node_counter = 0
        board = board.clone()

        # Tactical guardrails: immediate win or block before deeper search.
        win_move = self._find_immediate_win(board, self.color)
        if win_move is not None:
            return win_move
        block_move = self._find_immediate_win(board, -self.color)
        if block_move is not None:
            return block_move

        ordered = self._order_moves(board, self.color, self.root_beam_width)
        if not ordered:
            raise ValueError("No legal moves available for search")

        best_move, best_value = ordered[0][0], -float("inf")
        root_hash = transposition.hash_board(board, self.zobrist_table)
        try:
            for move, static_score in ordered:
                x, y = move
                board._push_stone(x, y, self.color)
                try:
                    child_hash = transposition.toggle(root_hash, self.zobrist_table, y * self.board_size + x, self.color)
                    value = static_score + self._minimax(board, self.depth - 1, -float("inf"), float("inf"), -self.color, child_hash)
                finally:
                    board._pop_stone(x, y)
                if value > best_value:
                    best_value = value
                    best_move = move
        except TimeoutError:
            LOGGER.debug("search budget exhausted after %d nodes; keeping %s", self.node_counter, best_move)

        if self.stats_list is not None:
            self._record_stats()
        return best_move

    def _time_ok(self):
        self.node_counter += 1
        if self.deadline is not None and (self.node_counter & TIME_CHECK_MASK) == 0:
            if time.time() > self.deadline:
                raise TimeoutError("Search timed out")

    def _find_immediate_win(self, board, color):
        for x, y in move_selector.generate_candidates(board):
            board._push_stone(x, y, color)
            try:
                if gomoku_rules.is_win_after_move(board, x, y, color):
                    return (x, y)
            finally:
                board._pop_stone(x, y)
        return None

    def _order_moves(self, board, node_color, limit):
        """Top `limit` candidates by strict static score for the side to move."""
        scored = []
        for x, y in move_selector.generate_candidates(board):
            if board.cells[y * self.board_size + x] != 0:
                continue
            score = heuristic.gomoku_score(board, x, y, node_color, strict=True, weights=self.weights)
            scored.append(((x, y), score))
        scored.sort(key=lambda item: item[1], reverse=True)
        return scored[:limit]

    def _minimax(self, board, depth, alpha, beta, node_color, current_hash):
        """
        Value of the position for self.color with node_color to move. Each ply adds
        the mover's static score (negated for the opponent) plus the discounted
        value of the reply; a five ends the line immediately.
        """
        self._time_ok()
        if depth == 0:
            return 0.0

        key = (current_hash, node_color, depth, self.color)
        cached = self.cache.get(key)
        if cached is not None:
            cached_value, cached_flag = cached
            if cached_flag == "EXACT":
                return cached_value
            if cached_flag == "LOWER":
                alpha = max(alpha, cached_value)
            elif cached_flag == "UPPER":
                beta = min(beta, cached_value)
            if alpha >= beta:
                return cached_value

        ordered = self._order_moves(board, node_color, self.beam_width)
        if not ordered:
            return 0.0

        maximizing = node_color == self.color
        alpha_orig, beta_orig = alpha, beta
        best = -float("inf") if maximizing else float("inf")
        for (x, y), static_score in ordered:
            board._push_stone(x, y, node_color)
            try:
                if gomoku_rules.is_win_after_move(board, x, y, node_color):
                    value = WIN_VALUE + depth
                    return value if maximizing else -value
                next_hash = transposition.toggle(current_hash, self.zobrist_table, y * self.board_size + x, node_color)
                future = self._minimax(board, depth - 1, alpha, beta, -node_color, next_hash)
            finally:
                board._pop_stone(x, y)

            value = (static_score if maximizing else -static_score) + future * FUTURE_DISCOUNT
            if maximizing:
                best = max(best, value)
                alpha = max(alpha, best)
            else:
                best = min(best, value)
                beta = min(beta, best)
            if beta <= alpha:
                break

        self._store_cache(key, best, alpha_orig, beta_orig)
        return best

    def _store_cache(self, key, value, alpha_orig, beta_orig):
        flag = "EXACT"
        if value <= alpha_orig:
            flag = "UPPER"
        elif value >= beta_orig:
            flag = "LOWER"
        self.cache[key] = (value, flag)

    def _record_stats(self):
        total_time = max(time.time() - self.start_time, 1e-9)
        self.stats_list.append({
            "color": self.color,
            "depth": self.depth,
            "nodes": self.node_counter,
            "time": total_time,
            "nps": self.node_counter / total_time,
        })


def choose_move(board, color, depth=4, deadline=None, beam_width=8, root_beam_width=10, weights=None, cache=None, zobrist_table=None, stats=None):
    """Public function to start a search. Instantiates and uses MinimaxSearcher."""
    searcher = MinimaxSearcher(
        board_size=board.size,
        color=color,
        depth=depth,
        beam_width=beam_width,
        root_beam_width=root_beam_width,
        weights=weights,
        cache=cache,
        zobrist_table=zobrist_table,
        stats=stats,
    )
    return searcher.choose_move(board, deadline)
