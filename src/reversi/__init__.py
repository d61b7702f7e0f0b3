from reversi.ai.selector import Difficulty, select_move
from reversi.othello.board import (
    BLACK,
    EMPTY,
    WHITE,
    Board,
    IllegalMoveRequested,
    InvalidMove,
    Move,
    OutOfBoundsCoordinate,
    opponent,
)
from reversi.othello.game import Game
from reversi.othello.rules import (
    GameOutcome,
    apply_move,
    count,
    create_initial_board,
    flips,
    legal_moves,
    outcome,
)

__all__ = [
    "BLACK",
    "EMPTY",
    "WHITE",
    "Board",
    "Difficulty",
    "Game",
    "GameOutcome",
    "IllegalMoveRequested",
    "InvalidMove",
    "Move",
    "OutOfBoundsCoordinate",
    "apply_move",
    "count",
    "create_initial_board",
    "flips",
    "legal_moves",
    "opponent",
    "outcome",
    "select_move",
]
