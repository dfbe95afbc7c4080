"""SGF move records: parse the main line, generate text, and replay through the rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sgfmill import sgf

from ..Board import BLACK, WHITE, Board, GameType, MAX_SIZE, MIN_SIZE
from ..engine import go_rules
from ..engine.history import HistoryEntry, previous_hash
from ..engine.scoring import DEFAULT_KOMI

SGF_COLORS = {"b": BLACK, "w": WHITE}


class InvalidRecordError(ValueError):
    """The text is not a usable game record."""


@dataclass
class GameRecord:
    size: int
    komi: float = DEFAULT_KOMI
    setup: list = field(default_factory=list)  # (color, x, y)
    moves: list = field(default_factory=list)  # (color, (x, y) or None)


def _to_xy(point, size):
    # sgfmill counts rows up from the bottom edge
    row, col = point
    return col, size - 1 - row


def _to_sgf_point(point, size):
    x, y = point
    return size - 1 - y, x


def parse_sgf(text) -> GameRecord:
    """Read size, komi, root setup stones and the main-line moves of an SGF record."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    try:
        game = sgf.Sgf_game.from_bytes(data)
        size = game.get_size()
        root = game.get_root()
        komi = game.get_komi() if root.has_property("KM") else DEFAULT_KOMI
        black, white, _ = root.get_setup_stones()
        moves = [node.get_move() for node in game.get_main_sequence()]
    except ValueError as exc:
        raise InvalidRecordError(f"Error parsing SGF record: {exc}") from exc

    if not MIN_SIZE <= size <= MAX_SIZE:
        raise InvalidRecordError(f"unsupported board size {size}")

    record = GameRecord(size=size, komi=komi)
    for color, points in ((BLACK, black), (WHITE, white)):
        stones = sorted((_to_xy(p, size) for p in points), key=lambda p: (p[1], p[0]))
        record.setup.extend((color, x, y) for x, y in stones)
    for colour, point in moves:
        if colour is None:
            continue
        record.moves.append((SGF_COLORS[colour], None if point is None else _to_xy(point, size)))
    return record


def generate_sgf(moves, size, komi=DEFAULT_KOMI, setup=()):
    """Render (color, point-or-None) moves and (color, x, y) setup stones as SGF text."""
    game = sgf.Sgf_game(size=size)
    root = game.get_root()
    root.set("KM", komi)
    black = {_to_sgf_point((x, y), size) for color, x, y in setup if color == BLACK}
    white = {_to_sgf_point((x, y), size) for color, x, y in setup if color == WHITE}
    if black or white:
        root.set_setup_stones(black, white)
    for color, point in moves:
        node = game.extend_main_sequence()
        node.set_move("b" if color == BLACK else "w", None if point is None else _to_sgf_point(point, size))
    return game.serialise().decode("utf-8")


def replay(record: GameRecord, game_type=GameType.GO):
    """
    Rebuild the final board and history by applying every move through the rules.
    Raises InvalidRecordError on the first illegal move; nothing outside is touched.
    """
    board = Board(record.size)
    for color, x, y in record.setup:
        if not board.is_empty(x, y):
            raise InvalidRecordError(f"setup stones overlap at {(x, y)}")
        board.place(x, y, color)

    history = []
    captures = {BLACK: 0, WHITE: 0}
    passes = 0
    for number, (color, point) in enumerate(record.moves, start=1):
        entry = HistoryEntry(board, color, captures[BLACK], captures[WHITE], point, passes)
        if point is None:
            passes += 1
            history.append(entry)
            continue
        result = go_rules.attempt_move(board, point[0], point[1], color, game_type, previous_hash(history))
        if not isinstance(result, go_rules.MoveResult):
            raise InvalidRecordError(f"move {number} at {point} is illegal: {result.reason.value}")
        history.append(entry)
        board = result.board
        captures[color] += result.captured
        passes = 0
    return board, history


def load_record(path) -> Optional[GameRecord]:
    with open(path, "rb") as f:
        return parse_sgf(f.read())
