"""Difficulty tiers, their search/evaluation parameters, and the kyu/dan rank scale."""

from __future__ import annotations

import dataclasses
import enum
import re
from dataclasses import dataclass


class Difficulty(enum.Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"unknown difficulty {value!r}; expected one of easy, medium, hard") from None


@dataclass(frozen=True)
class TierConfig:
    # Go
    jitter: float
    self_atari_penalty: float
    use_shape: bool
    use_position: bool
    use_joseki: bool
    lookahead: bool
    lookahead_weight: float
    may_resign: bool
    resign_fill_ratio: float = 0.5
    resign_margin: float = 30.0
    resign_min_moves: int | None = None  # None -> 2 * board size
    joseki_min_size: int = 13
    # Gomoku
    gomoku_noise: float = 0.0
    strict: bool = True
    search_depth: int = 0
    beam_width: int = 8
    root_beam_width: int = 10
    # Neural collaborator
    use_model: bool = False


DEFAULT_TIERS = {
    Difficulty.EASY: TierConfig(
        jitter=40.0,
        self_atari_penalty=0.0,
        use_shape=False,
        use_position=False,
        use_joseki=False,
        lookahead=False,
        lookahead_weight=0.0,
        may_resign=False,
        gomoku_noise=500.0,
        strict=False,
    ),
    Difficulty.MEDIUM: TierConfig(
        jitter=8.0,
        self_atari_penalty=200.0,
        use_shape=True,
        use_position=False,
        use_joseki=False,
        lookahead=False,
        lookahead_weight=0.0,
        may_resign=True,
    ),
    Difficulty.HARD: TierConfig(
        jitter=1.0,
        self_atari_penalty=1000.0,
        use_shape=True,
        use_position=True,
        use_joseki=True,
        lookahead=True,
        lookahead_weight=0.5,
        may_resign=True,
        search_depth=4,
        beam_width=8,
        root_beam_width=10,
    ),
}


def tier_config(difficulty, overrides=None) -> TierConfig:
    """Config for a tier, optionally patched with a mapping (e.g. settings.yaml `ai_tiers`)."""
    difficulty = Difficulty.parse(difficulty)
    config = DEFAULT_TIERS[difficulty]
    if not overrides:
        return config
    patch = overrides.get(difficulty.value) or {}
    known = {f.name for f in dataclasses.fields(TierConfig)}
    unknown = set(patch) - known
    if unknown:
        raise ValueError(f"unknown tier option(s) for {difficulty.value}: {sorted(unknown)}")
    return dataclasses.replace(config, **patch)


# --- Kyu/dan rank scale -------------------------------------------------------

RANKS = tuple([f"{k}k" for k in range(18, 0, -1)] + [f"{d}d" for d in range(1, 10)])

DESKTOP_SIMULATION_CAP = 800


@dataclass(frozen=True)
class RankConfig:
    rank: str
    difficulty: Difficulty
    use_model: bool
    simulations: int
    temperature: float


def rank_config(rank: str, simulation_cap: int = DESKTOP_SIMULATION_CAP) -> RankConfig:
    """
    Map a rank like '12k' or '3d' to model settings and the nearest local tier.
    Weak kyu ranks get a single inference with a hot temperature; dan ranks search
    a little and always take the best move.
    """
    text = str(rank).strip().lower()
    match = re.fullmatch(r"(\d+)([kd])", text)
    if not match or text not in RANKS:
        raise ValueError(f"unknown rank {rank!r}; expected 18k..1k or 1d..9d")
    value, kind = int(match.group(1)), match.group(2)

    if kind == "k":
        difficulty = Difficulty.EASY if value >= 11 else Difficulty.MEDIUM
        if value >= 6:
            return RankConfig(text, difficulty, True, 1, round(0.8 + (value - 6) * 0.1, 2))
        simulations = min(simulation_cap, round(1 + (5 - value) * 0.5))
        return RankConfig(text, difficulty, True, simulations, 0.5)

    simulations = min(simulation_cap, 5 + (value - 1))
    return RankConfig(text, Difficulty.HARD, True, simulations, 0.0)
