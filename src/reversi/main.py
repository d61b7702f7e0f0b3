import typer
from enum import Enum
from typing import Annotated, Optional

from reversi.ai.selector import Difficulty
from reversi.commands.match import MatchCommand
from reversi.commands.moves import MovesCommand
from reversi.commands.play import PlayCommand
from reversi.othello.board import BLACK, WHITE

app = typer.Typer(pretty_exceptions_enable=False)


class Color(str, Enum):
    BLACK = "black"
    WHITE = "white"

    def as_int(self) -> int:
        return BLACK if self == Color.BLACK else WHITE


@app.command()
def play(
    color: Annotated[Color, typer.Option("-c", "--color")] = Color.BLACK,
    difficulty: Annotated[
        Difficulty, typer.Option("-d", "--difficulty")
    ] = Difficulty.MEDIUM,
    seed: Annotated[Optional[int], typer.Option("-s", "--seed")] = None,
) -> None:
    """Play against the computer in the terminal."""
    PlayCommand(color.as_int(), difficulty, seed)()


@app.command()
def match(
    black: Annotated[Difficulty, typer.Option("-b", "--black")] = Difficulty.MEDIUM,
    white: Annotated[Difficulty, typer.Option("-w", "--white")] = Difficulty.EASY,
    seed: Annotated[Optional[int], typer.Option("-s", "--seed")] = None,
    show: Annotated[bool, typer.Option("--show")] = False,
) -> None:
    """Let two computer players play one game."""
    MatchCommand(black, white, seed, show)()


@app.command()
def moves(
    board: Annotated[Optional[str], typer.Option("--board")] = None,
    color: Annotated[Color, typer.Option("-c", "--color")] = Color.BLACK,
) -> None:
    """List legal moves on a board given as 64 characters of X, O and -."""
    MovesCommand(board, color.as_int())()


if __name__ == "__main__":
    app()
