import random
from typing import Optional

from reversi.ai.selector import Difficulty, select_move
from reversi.commands.play import COLOR_NAMES, print_passes, print_result
from reversi.config import SearchSettings
from reversi.othello.board import BLACK, WHITE, Board
from reversi.othello.game import Game


class MatchCommand:
    """Plays one game between two computer players."""

    def __init__(
        self,
        black: Difficulty,
        white: Difficulty,
        seed: Optional[int] = None,
        show: bool = False,
    ) -> None:
        self.difficulties = {BLACK: black, WHITE: white}
        self.rng = random.Random(seed)
        self.show = show
        self.settings = SearchSettings.from_env()

    def play(self) -> Game:
        game = Game()

        while not game.is_game_end():
            turn = game.get_turn()
            assert turn is not None

            difficulty = self.difficulties[turn]
            move = select_move(game.board, turn, difficulty, self.rng, self.settings)
            assert move is not None

            if self.show:
                field = Board.coord_to_field(move)
                print(f"{COLOR_NAMES[turn]} ({difficulty.value}) plays {field}")

            states = game.play(move)

            if self.show:
                print_passes(states)

        return game

    def __call__(self) -> None:
        game = self.play()
        game.board.show()
        print_result(game)
