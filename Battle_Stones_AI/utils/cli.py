"""CLI options for selecting the ruleset, players, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Stones AI (Go and Gomoku)")
    parser.add_argument("--game", choices=["go", "gomoku"], help="Ruleset (default from settings)")
    parser.add_argument("--board-size", type=int, help="Board size (4-19)")
    parser.add_argument("--timeout", type=float, help="Seconds per move (default from settings)")
    parser.add_argument("--komi", type=float, help="Komi added to White's Go score")
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        help="AI tier (default from settings)",
    )
    parser.add_argument("--rank", help="Go rank such as 15k or 3d; overrides --difficulty")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human", "human-vs-human"],
        default="ai-vs-ai",
        help="Play mode (who plays black/white)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--sgf", help="Replay an SGF record and print the final position instead of playing")
    parser.add_argument("--save-sgf", help="Write the finished game to this SGF path")
    parser.add_argument("--verbose", action="store_true", help="Log AI internals at DEBUG level")
    return parser.parse_args(argv)
