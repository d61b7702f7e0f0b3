from __future__ import annotations

from typing import Optional

from reversi.othello.board import (
    BLACK,
    PASS_MOVE,
    WHITE,
    Board,
    InvalidMove,
    Move,
    opponent,
)
from reversi.othello.rules import (
    GameOutcome,
    Terminal,
    ToMove,
    TurnState,
    apply_move,
    legal_moves,
    resolve_turn,
)


class Game:
    """
    Game session owned by a driver: the current board, whose turn it is and
    the flips of the last move. Passes are resolved automatically after each move.
    """

    def __init__(self, board: Optional[Board] = None, turn: int = BLACK) -> None:
        self.board = board if board is not None else Board.start()
        self.last_flips: list[Move] = []
        self.state: TurnState = resolve_turn(self.board, turn)[-1]

    @classmethod
    def from_moves(cls, fields: list[str]) -> Game:
        game = Game()

        for field in fields:
            if Board.field_to_index(field) == PASS_MOVE:
                # Passes are applied automatically
                continue

            game.play(Board.field_to_coord(field))

        return game

    @classmethod
    def from_string(cls, string: str) -> Game:
        return cls.from_moves(string.split())

    def get_turn(self) -> Optional[int]:
        if isinstance(self.state, ToMove):
            return self.state.player
        return None

    def get_moves(self) -> list[Move]:
        turn = self.get_turn()
        if turn is None:
            return []
        return legal_moves(self.board, turn)

    def play(self, move: Move) -> list[TurnState]:
        """
        Plays `move` for the player to move. Returns the states passed through,
        the last one being the new state of the game.
        """
        turn = self.get_turn()

        if turn is None:
            raise InvalidMove("The game is over")

        board, flipped = apply_move(self.board, move, turn)
        states = resolve_turn(board, opponent(turn))

        self.board = board
        self.last_flips = flipped
        self.state = states[-1]
        return states

    def is_game_end(self) -> bool:
        return isinstance(self.state, Terminal)

    def get_outcome(self) -> GameOutcome:
        if isinstance(self.state, Terminal):
            return self.state.outcome
        return GameOutcome.IN_PROGRESS

    def get_winner(self) -> Optional[int]:
        outcome = self.get_outcome()
        if outcome == GameOutcome.BLACK_WINS:
            return BLACK
        if outcome == GameOutcome.WHITE_WINS:
            return WHITE
        return None
