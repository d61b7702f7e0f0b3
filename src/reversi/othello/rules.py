from __future__ import annotations

from enum import Enum
from typing import Optional

from reversi.othello.board import BLACK, WHITE, Board, Move, opponent


class GameOutcome(Enum):
    IN_PROGRESS = "in_progress"
    BLACK_WINS = "black_wins"
    WHITE_WINS = "white_wins"
    DRAW = "draw"


class ToMove:
    def __init__(self, player: int) -> None:
        assert player in [BLACK, WHITE]
        self.player = player

    def __repr__(self) -> str:
        return f"ToMove({self.player})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ToMove) and self.player == other.player


class Passed:
    """Informational: `player` had no legal move and the turn went to the opponent."""

    def __init__(self, player: int) -> None:
        assert player in [BLACK, WHITE]
        self.player = player

    def __repr__(self) -> str:
        return f"Passed({self.player})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Passed) and self.player == other.player


class Terminal:
    def __init__(self, outcome: GameOutcome) -> None:
        assert outcome != GameOutcome.IN_PROGRESS
        self.outcome = outcome

    def __repr__(self) -> str:
        return f"Terminal({self.outcome.name})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Terminal) and self.outcome == other.outcome


TurnState = ToMove | Passed | Terminal


def create_initial_board() -> Board:
    return Board.start()


def flips(board: Board, player: int, row: int, col: int) -> list[Move]:
    return board.flips(player, row, col)


def legal_moves(board: Board, player: int) -> list[Move]:
    return board.get_moves_as_list(player)


def apply_move(board: Board, move: Move, player: int) -> tuple[Board, list[Move]]:
    """
    Plays `move` for `player` and returns the resulting board and the captured discs.
    Raises IllegalMoveRequested if `move` is not in `legal_moves(board, player)`.
    """
    return board.do_move(player, move)


def count(board: Board) -> tuple[int, int]:
    return board.count(BLACK), board.count(WHITE)


def outcome_by_count(board: Board) -> GameOutcome:
    black, white = count(board)

    if black > white:
        return GameOutcome.BLACK_WINS
    if white > black:
        return GameOutcome.WHITE_WINS
    return GameOutcome.DRAW


def outcome(board: Board) -> Optional[GameOutcome]:
    """Returns None while at least one side can move."""
    if not board.is_game_end():
        return None

    return outcome_by_count(board)


def resolve_turn(board: Board, player: int) -> list[TurnState]:
    """
    Resolves whose turn it is when `player` is nominally next to move on `board`.
    The last item is the resulting state. A pass never changes the board.
    """
    if board.has_moves(player):
        return [ToMove(player)]

    if board.has_moves(opponent(player)):
        return [Passed(player), ToMove(opponent(player))]

    return [Terminal(outcome_by_count(board))]


def final_score(board: Board, player: int) -> int:
    """
    Disc differential from `player`'s point of view, empty squares counting
    for the winner.
    """
    me = board.count(player)
    opp = board.count(opponent(player))

    if me > opp:
        return 64 - (2 * opp)
    elif opp > me:
        return -64 + (2 * me)
    else:
        return 0
