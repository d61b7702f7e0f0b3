from typing import Optional

from reversi.othello.board import Board, opponent
from reversi.othello.rules import legal_moves


class MovesCommand:
    def __init__(self, board: Optional[str], player: int) -> None:
        self.board = Board.start() if board is None else Board.from_string(board)
        self.player = player

    def __call__(self) -> None:
        moves = legal_moves(self.board, self.player)

        if moves:
            print(Board.coords_to_fields(moves))
        elif self.board.has_moves(opponent(self.player)):
            print("pass")
        else:
            print("game over")
