"""Run-length evaluation for Gomoku moves (five, open/closed fours, threes, twos)."""

from pathlib import Path
import yaml

from ..Board import LINE_DIRECTIONS

# Default per-direction weights; can be overridden by loading config/patterns.yaml.
# Each tier must stay strictly above the next.
DEFAULT_WEIGHTS = {
    "five": 1_000_000,
    "open_four": 50_000,
    "closed_four": 10_000,
    "open_three": 5_000,
    "closed_three": 1_000,
    "open_two": 500,
    "closed_two": 50,
    "other": 1,
}
RUN_ORDER = tuple(DEFAULT_WEIGHTS)

# Strict-mode threat tiers: win > block win > open four > block open four > ...
SCORE_WIN = 10_000_000
SCORE_BLOCK_WIN = 9_000_000
SCORE_OPEN_FOUR = 8_000_000
SCORE_BLOCK_OPEN_FOUR = 7_000_000
SCORE_FORCING = 400_000
SCORE_BLOCK_FORCING = 200_000

SCAN_LENGTH = 4


def load_weights(path="config/patterns.yaml"):
    """Load run-tier weights from YAML; fallback to defaults on error/missing."""
    path = Path(path)
    if not path.is_absolute() and not path.exists():
        # Allow running from repo root (e.g., `python -m Battle_Stones_AI.main`).
        candidate = Path(__file__).resolve().parents[1] / path
        if candidate.exists():
            path = candidate

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return dict(DEFAULT_WEIGHTS)

    loaded = dict(DEFAULT_WEIGHTS)
    for name, score in (data.get("weights") or {}).items():
        if name not in DEFAULT_WEIGHTS:
            raise ValueError(f"unknown run class {name!r} in {path}")
        loaded[name] = int(score)
    values = [loaded[name] for name in RUN_ORDER]
    if any(a <= b for a, b in zip(values, values[1:])):
        raise ValueError(f"run weights in {path} must strictly decrease from five to other")
    return loaded


def classify_run(total, blocked_start, blocked_end):
    """Name the run class for `total` stones with the given end states."""
    if total >= 5:
        return "five"
    open_ends = (not blocked_start) + (not blocked_end)
    if open_ends == 0:
        return "other"
    if total == 4:
        return "open_four" if open_ends == 2 else "closed_four"
    if total == 3:
        return "open_three" if open_ends == 2 else "closed_three"
    if total == 2:
        return "open_two" if open_ends == 2 else "closed_two"
    return "other"


def scan_direction(board, x, y, dx, dy, color):
    """
    Count `color` stones contiguous with (x, y) along +/-(dx, dy), up to four each way.
    Returns (total including (x, y), blocked_start, blocked_end); an edge or an
    opposing stone blocks, an empty cell leaves the end open.
    """
    size = board.size
    cells = board.cells
    count = 0
    blocked_end = blocked_start = False
    for i in range(1, SCAN_LENGTH + 1):
        nx, ny = x + dx * i, y + dy * i
        if nx < 0 or nx >= size or ny < 0 or ny >= size:
            blocked_end = True
            break
        value = cells[ny * size + nx]
        if value == color:
            count += 1
        elif value != 0:
            blocked_end = True
            break
        else:
            break
    for i in range(1, SCAN_LENGTH + 1):
        nx, ny = x - dx * i, y - dy * i
        if nx < 0 or nx >= size or ny < 0 or ny >= size:
            blocked_start = True
            break
        value = cells[ny * size + nx]
        if value == color:
            count += 1
        elif value != 0:
            blocked_start = True
            break
        else:
            break
    return count + 1, blocked_start, blocked_end


def evaluate_direction(board, x, y, dx, dy, color, weights=None):
    weights = weights or DEFAULT_WEIGHTS
    return weights[classify_run(*scan_direction(board, x, y, dx, dy, color))]


def line_score(board, x, y, color, weights=None):
    """Sum of run scores for `color` placed at (x, y) across the four axes."""
    return sum(evaluate_direction(board, x, y, dx, dy, color, weights) for dx, dy in LINE_DIRECTIONS)


def gomoku_score(board, x, y, color, strict=False, weights=None):
    """
    Score playing `color` at (x, y): own offense plus blocking value against the opponent.
    In strict mode the sum is replaced by the threat-priority ladder.
    """
    weights = weights or DEFAULT_WEIGHTS
    attack = line_score(board, x, y, color, weights)
    defense = line_score(board, x, y, -color, weights)

    if strict:
        if attack >= weights["five"]:
            return SCORE_WIN
        if defense >= weights["five"]:
            return SCORE_BLOCK_WIN
        if attack >= weights["open_four"]:
            return SCORE_OPEN_FOUR
        if defense >= weights["open_four"]:
            return SCORE_BLOCK_OPEN_FOUR
        if attack >= weights["open_three"]:
            return SCORE_FORCING + attack
        if defense >= weights["open_three"]:
            return SCORE_BLOCK_FORCING + defense
    return attack + defense
