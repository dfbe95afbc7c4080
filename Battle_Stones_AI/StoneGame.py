"""Game loop and turn management for Go and Gomoku matches."""

from .ai.strategy import PASS, RESIGN
from .Board import BLACK, WHITE, Board, GameType, color_name
from .engine import gomoku_rules, referee
from .engine.history import HistoryEntry, moves_of, previous_hash
from .engine.scoring import calculate_score, default_komi
from .utils import timer
from .utils.logger import describe_move


class StoneGame:
    def __init__(
        self,
        board_size,
        move_timeout,
        black_player,
        white_player,
        game_type=GameType.GO,
        komi=None,
        logger=print,
        renderer=None,
        closer=None,
        move_limit=None,
    ):
        self.game_type = GameType(game_type)
        self.board = Board(size=board_size)
        self.move_timeout = move_timeout
        self.players = {BLACK: black_player, WHITE: white_player}
        self.komi = default_komi(board_size) if komi is None else komi
        self.logger = logger
        self.renderer = renderer
        self.closer = closer
        # Go games between two bots can shuffle forever; score the board at this point.
        self.move_limit = move_limit if move_limit is not None else 3 * board_size * board_size
        self.history = []
        self.captures = {BLACK: 0, WHITE: 0}
        self.consecutive_passes = 0
        self.score = None
        self.reason = None

    def moves(self):
        return moves_of(self.history)

    def play(self):
        """Run a single game. Returns -1 (black win), 1 (white win), or 0 (draw)."""
        color = BLACK
        game_result = None
        last_move = None
        try:
            while game_result is None:
                if self.renderer:
                    self.renderer(self.board, last_move, color, game_result)

                player = self.players[color]
                deadline = timer.deadline_after(self.move_timeout)
                entry = HistoryEntry(
                    self.board,
                    color,
                    self.captures[BLACK],
                    self.captures[WHITE],
                    None,
                    self.consecutive_passes,
                )

                try:
                    move = player.next_move(self.board, deadline=deadline, history=tuple(self.history))
                    if move == RESIGN:
                        self.logger(f"{color_name(color)} resigns")
                        self.reason = "resign"
                        game_result = -color
                        break
                    if move == PASS or move is None:
                        if self.game_type is GameType.GOMOKU:
                            raise ValueError("Gomoku has no pass")
                        if timer.expired(deadline):
                            raise TimeoutError("Move exceeded allotted time")
                        last_move = None
                        self.consecutive_passes += 1
                    else:
                        result = referee.check_move(
                            move, self.board, color, self.game_type, deadline, previous_hash(self.history)
                        )
                        move = tuple(move)
                        self.board = result.board
                        self.captures[color] += result.captured
                        self.consecutive_passes = 0
                        last_move = move
                except (TimeoutError, ValueError) as exc:
                    self.logger(f"Disqualification: {color_name(color)} - {exc}")
                    self.reason = "disqualification"
                    game_result = -color  # opponent wins
                    break

                self.history.append(HistoryEntry(
                    entry.board,
                    color,
                    entry.black_captures,
                    entry.white_captures,
                    last_move,
                    entry.consecutive_passes,
                ))
                self.logger(f"Move {len(self.history)}: {describe_move(color, last_move)}")

                game_result = self._check_end(color, last_move)
                if game_result is None:
                    color = -color  # swap turns

            if self.renderer:
                self.renderer(self.board, last_move, color, game_result)
            return game_result
        finally:
            if self.closer:
                self.closer()

    def _check_end(self, color, last_move):
        if self.game_type is GameType.GOMOKU:
            if last_move is not None and gomoku_rules.check_gomoku_win(self.board, last_move):
                self.logger(f"Winner: {color_name(color)}")
                self.reason = "five"
                return color
            if self.board.stone_count() >= self.board.size * self.board.size:
                self.logger("Result: Draw (board full)")
                self.reason = "board full"
                return 0
            return None

        if self.consecutive_passes >= 2:
            self.reason = "passes"
            return self._finish_by_score()
        if len(self.history) >= self.move_limit:
            self.logger(f"Move limit {self.move_limit} reached; scoring the board")
            self.reason = "move limit"
            return self._finish_by_score()
        return None

    def _finish_by_score(self):
        self.score = calculate_score(self.board, self.komi)
        self.logger(f"Score: Black {self.score.black:g}, White {self.score.white:g} (komi {self.komi:g})")
        winner = self.score.winner()
        self.logger(f"Winner: {color_name(winner)}")
        return winner
