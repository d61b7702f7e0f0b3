from __future__ import annotations

from typing import Optional

from reversi.config import DEFAULT_SETTINGS, SearchSettings
from reversi.othello.board import Board, opponent

POSITION_WEIGHTS = [
    [100, -20, 10, 5, 5, 10, -20, 100],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [10, -2, 1, 1, 1, 1, -2, 10],
    [5, -2, 1, 0, 0, 1, -2, 5],
    [5, -2, 1, 0, 0, 1, -2, 5],
    [10, -2, 1, 1, 1, 1, -2, 10],
    [-20, -50, -2, -2, -2, -2, -50, -20],
    [100, -20, 10, 5, 5, 10, -20, 100],
]

# Indexed by `8 * row + col`
SQUARE_WEIGHTS = [weight for row in POSITION_WEIGHTS for weight in row]


def positional_score(board: Board, color: int) -> int:
    score = 0

    for index in board.discs(color).indexes():
        score += SQUARE_WEIGHTS[index]

    for index in board.discs(opponent(color)).indexes():
        score -= SQUARE_WEIGHTS[index]

    return score


def mobility(board: Board, color: int) -> int:
    return board.get_moves(color).count_bits()


def evaluate(
    board: Board, color: int, settings: Optional[SearchSettings] = None
) -> int:
    """
    Heuristic score of `board` from the point of view of `color`:
    positional weights plus weighted mobility difference.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    mobility_difference = mobility(board, color) - mobility(board, opponent(color))
    mobility_score = settings.mobility_weight * mobility_difference
    return positional_score(board, color) + mobility_score
