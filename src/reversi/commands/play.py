from __future__ import annotations

import random
import typer
from typing import Optional

from reversi.ai.selector import Difficulty, select_move
from reversi.config import SearchSettings
from reversi.othello.board import BLACK, WHITE, Board, Move
from reversi.othello.game import Game
from reversi.othello.rules import GameOutcome, Passed, TurnState, count

COLOR_NAMES = {BLACK: "black", WHITE: "white"}


def print_passes(states: list[TurnState]) -> None:
    for state in states:
        if isinstance(state, Passed):
            print(f"{COLOR_NAMES[state.player]} has no moves and passes")


def print_result(game: Game, human: Optional[int] = None) -> None:
    black, white = count(game.board)
    outcome = game.get_outcome()

    prefix = ""
    postfix = ""

    if outcome == GameOutcome.DRAW:
        result = f"draw: {black} - {white}"
        prefix = "\x1b[33m"
        postfix = "\x1b[0m"
    else:
        winner = game.get_winner()
        assert winner is not None
        result = f"{COLOR_NAMES[winner]} wins: {black} - {white}"

        if human is not None and winner != human:
            prefix = "\x1b[31m"
            postfix = "\x1b[0m"

    print(prefix + result + postfix)


class PlayCommand:
    def __init__(
        self, human: int, difficulty: Difficulty, seed: Optional[int] = None
    ) -> None:
        self.human = human
        self.difficulty = difficulty
        self.rng = random.Random(seed)
        self.settings = SearchSettings.from_env()

    def ask_move(self, game: Game) -> Move:
        moves = game.get_moves()

        while True:
            field = typer.prompt("Your move")

            try:
                move = Board.field_to_coord(field.strip())
            except ValueError as e:
                print(f"Invalid input: {e}")
                continue

            if move not in moves:
                print(f"{field} is not a legal move, try one of: ", end="")
                print(Board.coords_to_fields(moves))
                continue

            return move

    def computer_move(self, game: Game, turn: int) -> Move:
        move = select_move(game.board, turn, self.difficulty, self.rng, self.settings)

        # Game never asks a player without moves to move.
        assert move is not None

        print(f"computer plays {Board.coord_to_field(move)}")
        return move

    def __call__(self) -> None:
        game = Game()

        while not game.is_game_end():
            turn = game.get_turn()
            assert turn is not None

            if turn == self.human:
                game.board.show(turn)
                move = self.ask_move(game)
            else:
                move = self.computer_move(game, turn)

            print_passes(game.play(move))

        game.board.show()
        print_result(game, self.human)
