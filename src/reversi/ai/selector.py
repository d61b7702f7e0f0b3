from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from reversi.ai.search import best_move
from reversi.config import DEFAULT_SETTINGS, SearchSettings
from reversi.othello.board import Board, Move


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def get_search_depth(
    difficulty: Difficulty, settings: Optional[SearchSettings] = None
) -> Optional[int]:
    """Returns None for the random tier."""
    if settings is None:
        settings = DEFAULT_SETTINGS

    if difficulty == Difficulty.EASY:
        return None
    if difficulty == Difficulty.MEDIUM:
        return settings.medium_depth
    return settings.hard_depth


def select_move(
    board: Board,
    player: int,
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
    settings: Optional[SearchSettings] = None,
) -> Optional[Move]:
    """
    Picks a move for the computer player, or returns None if `player` has to pass.
    Only the easy tier uses `rng`; the other tiers are deterministic.
    """
    moves = board.get_moves_as_list(player)
    if not moves:
        return None

    depth = get_search_depth(difficulty, settings)

    if depth is None:
        if rng is None:
            rng = random.Random()
        return rng.choice(moves)

    return best_move(board, player, depth, settings)
