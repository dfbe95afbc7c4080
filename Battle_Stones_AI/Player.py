"""Player interface for human or AI controllers."""

from .ai.config import Difficulty
from .ai.strategy import PASS, RESIGN, get_ai_move
from .Board import GameType
from .engine.history import previous_hash


class Player:
    def __init__(self, color):
        self.color = color

    def next_move(self, board, deadline=None, history=()):
        """Return (x, y), PASS, or RESIGN within the time limit."""
        raise NotImplementedError


class HumanPlayer(Player):
    def __init__(self, color):
        super().__init__(color)

    def next_move(self, board, deadline=None, history=()):
        """Text-input player with deadline guard (raises TimeoutError on timeout)."""
        import os
        import sys
        import time

        prompt = "Enter move as 'x y' (0-indexed), 'pass' or 'resign': "
        if deadline is None:
            raw = input(prompt).strip()
        else:
            remaining = deadline - time.time()
            if remaining <= 0:
                raise TimeoutError("Move exceeded allotted time")
            sys.stdout.write(prompt)
            sys.stdout.flush()

            if os.name == "nt":
                # select() on stdin is not supported on Windows.
                import msvcrt

                buffer = ""
                while time.time() < deadline:
                    if msvcrt.kbhit():
                        ch = msvcrt.getwche()
                        if ch in ("\r", "\n"):
                            sys.stdout.write("\n")
                            break
                        buffer += ch
                    time.sleep(0.01)
                else:
                    raise TimeoutError("Move exceeded allotted time")
                raw = buffer.strip()
            else:
                import select

                rlist, _, _ = select.select([sys.stdin], [], [], remaining)
                if not rlist:
                    raise TimeoutError("Move exceeded allotted time")
                raw = sys.stdin.readline().strip()

        return parse_move(raw)


def parse_move(raw):
    """Turn typed input into (x, y), PASS, or RESIGN."""
    word = raw.strip().lower()
    if word == "pass":
        return PASS
    if word == "resign":
        return RESIGN
    try:
        x_str, y_str = word.split()
        return int(x_str), int(y_str)
    except ValueError as exc:
        raise ValueError("Invalid input format; expected two integers, 'pass' or 'resign'") from exc


class AIPlayer(Player):
    """Computer player driven by the tiered move picker."""

    def __init__(self, color, game_type=GameType.GO, difficulty=Difficulty.MEDIUM, rank=None, komi=None, suggester=None, seed=None, tier_overrides=None, weights=None, joseki_table=None):
        import random

        super().__init__(color)
        self.game_type = GameType(game_type)
        self.difficulty = Difficulty.parse(difficulty)
        self.rank = rank
        self.komi = komi
        self.suggester = suggester
        self.tier_overrides = tier_overrides
        self.weights = weights
        self.joseki_table = joseki_table
        self.rng = random.Random(seed)

    def next_move(self, board, deadline=None, history=()):
        return get_ai_move(
            board,
            self.color,
            self.game_type,
            self.difficulty,
            previous_hash(history),
            move_number=len(history),
            deadline=deadline,
            rng=self.rng,
            suggester=self.suggester,
            history=history,
            komi=self.komi,
            rank=self.rank,
            tier_overrides=self.tier_overrides,
            weights=self.weights,
            joseki_table=self.joseki_table,
        )
