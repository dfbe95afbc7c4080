"""Battle_Stones_AI package exports."""

from .Board import BLACK, EMPTY, WHITE, Board, GameType, Stone, create_board
from .engine.go_rules import Illegal, IllegalReason, MoveResult, attempt_move, is_legal
from .engine.groups import Group, all_groups, group_of
from .engine.scoring import Score, calculate_score, default_komi
from .ai.transposition import get_board_hash
from .ai.config import Difficulty
from .ai.strategy import PASS, RESIGN, get_ai_move
from .ai.engine import AIEngine, MoveRequest
from .StoneGame import StoneGame
from .Player import Player, HumanPlayer, AIPlayer

# Subpackages for rule engine, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "BLACK",
    "EMPTY",
    "WHITE",
    "Board",
    "GameType",
    "Stone",
    "create_board",
    "Illegal",
    "IllegalReason",
    "MoveResult",
    "attempt_move",
    "is_legal",
    "Group",
    "all_groups",
    "group_of",
    "Score",
    "calculate_score",
    "default_komi",
    "get_board_hash",
    "Difficulty",
    "PASS",
    "RESIGN",
    "get_ai_move",
    "AIEngine",
    "MoveRequest",
    "StoneGame",
    "Player",
    "HumanPlayer",
    "AIPlayer",
    "ai",
    "engine",
    "utils",
]
