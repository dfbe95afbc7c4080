"""Entry point for Battle Stones AI matches. Load config, wire players, start StoneGame."""

import logging
from pathlib import Path

import yaml

from Battle_Stones_AI.Board import BLACK, WHITE, GameType
from Battle_Stones_AI.ai import heuristic, joseki
from Battle_Stones_AI.engine.scoring import calculate_score, default_komi, estimate_win_rate
from Battle_Stones_AI.Player import AIPlayer, HumanPlayer
from Battle_Stones_AI.StoneGame import StoneGame
from Battle_Stones_AI.utils import sgf
from Battle_Stones_AI.utils.cli import parse_args
from Battle_Stones_AI.utils.logger import log_event

PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 19,
    "game_type": "go",
    "difficulty": "medium",
    "move_timeout_seconds": 10,
    "komi": None,
    "rank": None,
    "ai_tiers": {},
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Stones_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        log_event(f"Settings file {path} not found; using defaults")
        loaded = {}
    settings = dict(DEFAULT_SETTINGS)
    settings.update({key: value for key, value in loaded.items() if value is not None})
    return settings


def replay_record(path, game_type):
    record = sgf.load_record(resolve_project_path(path))
    board, history = sgf.replay(record, game_type)
    print(board)
    print(f"Moves replayed: {len(history)}")
    if game_type is GameType.GO:
        score = calculate_score(board, record.komi)
        print(f"Score: Black {score.black:g}, White {score.white:g} (komi {record.komi:g})")
        print(f"Black win rate: {estimate_win_rate(board, record.komi):.1f}%")


def build_player(kind, color, game_type, difficulty, rank, komi, tier_overrides, weights=None, joseki_table=None):
    if kind == "human":
        return HumanPlayer(color=color)
    return AIPlayer(
        color=color,
        game_type=game_type,
        difficulty=difficulty,
        rank=rank,
        komi=komi,
        tier_overrides=tier_overrides,
        weights=weights,
        joseki_table=joseki_table,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    settings = load_settings(args.settings)

    game_type = GameType(args.game or settings["game_type"])
    if args.sgf:
        replay_record(args.sgf, game_type)
        return

    board_size = args.board_size or settings["board_size"]
    move_timeout = args.timeout or settings["move_timeout_seconds"]
    difficulty = args.difficulty or settings["difficulty"]
    rank = args.rank or settings["rank"]
    komi = args.komi if args.komi is not None else settings["komi"]
    if komi is None:
        komi = default_komi(board_size)
    tier_overrides = settings["ai_tiers"]
    weights = heuristic.load_weights()
    joseki_table = joseki.load_table()

    black_kind, white_kind = {
        "ai-vs-ai": ("ai", "ai"),
        "human-vs-ai": ("human", "ai"),
        "ai-vs-human": ("ai", "human"),
        "human-vs-human": ("human", "human"),
    }[args.mode]
    black = build_player(black_kind, BLACK, game_type, difficulty, rank, komi, tier_overrides, weights, joseki_table)
    white = build_player(white_kind, WHITE, game_type, difficulty, rank, komi, tier_overrides, weights, joseki_table)

    def renderer(board, last_move, current_color, game_result):
        if "human" in (black_kind, white_kind) or game_result is not None:
            print(board)

    game = StoneGame(
        board_size=board_size,
        move_timeout=move_timeout,
        black_player=black,
        white_player=white,
        game_type=game_type,
        komi=komi,
        logger=log_event,
        renderer=renderer,
    )
    result = game.play()
    outcome = {-1: "Black wins", 1: "White wins", 0: "Draw"}
    print(outcome.get(result, "Unknown result"))

    if args.save_sgf:
        with open(args.save_sgf, "w", encoding="utf-8") as f:
            f.write(sgf.generate_sgf(game.moves(), board_size, komi))
        log_event(f"Record saved to {args.save_sgf}")


if __name__ == "__main__":
    main()
