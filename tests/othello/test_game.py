import pytest

from reversi.othello.board import (
    BLACK,
    WHITE,
    Board,
    IllegalMoveRequested,
    InvalidMove,
)
from reversi.othello.game import Game
from reversi.othello.rules import GameOutcome, Passed, Terminal, ToMove

EMPTY_ROW = "--------"

# Black plays a1 after which white has no moves, but black still has c8.
BOARD_WHITE_WILL_PASS = Board.from_string("-OX-----" + EMPTY_ROW * 6 + "XO------")

# Black has no moves.
BOARD_BLACK_MUST_PASS = Board.from_string("OX------" + EMPTY_ROW * 7)


def test_new_game() -> None:
    game = Game()
    assert game.board == Board.start()
    assert game.state == ToMove(BLACK)
    assert game.get_turn() == BLACK
    assert game.get_moves() == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert game.get_outcome() == GameOutcome.IN_PROGRESS
    assert not game.is_game_end()


def test_play() -> None:
    game = Game()
    states = game.play((2, 3))

    assert states == [ToMove(WHITE)]
    assert game.last_flips == [(3, 3)]
    assert game.get_turn() == WHITE
    assert game.board.get_square(2, 3) == BLACK


def test_play_illegal() -> None:
    game = Game()

    with pytest.raises(IllegalMoveRequested):
        game.play((0, 0))

    assert game.board == Board.start()
    assert game.get_turn() == BLACK


def test_play_with_pass() -> None:
    game = Game(BOARD_WHITE_WILL_PASS, BLACK)
    states = game.play((0, 0))

    assert states == [Passed(WHITE), ToMove(BLACK)]
    assert game.get_turn() == BLACK
    assert game.get_moves() == [(7, 2)]

    states = game.play((7, 2))
    assert states == [Terminal(GameOutcome.BLACK_WINS)]
    assert game.is_game_end()
    assert game.get_winner() == BLACK
    assert game.get_moves() == []


def test_start_with_pass() -> None:
    game = Game(BOARD_BLACK_MUST_PASS, BLACK)

    assert game.state == ToMove(WHITE)
    assert game.board == BOARD_BLACK_MUST_PASS


@pytest.mark.parametrize(
    ["board", "outcome", "winner"],
    [
        pytest.param(
            Board.from_string("X" * 37 + "O" * 27),
            GameOutcome.BLACK_WINS,
            BLACK,
            id="black-wins",
        ),
        pytest.param(
            Board.from_string("O" * 37 + "X" * 27),
            GameOutcome.WHITE_WINS,
            WHITE,
            id="white-wins",
        ),
        pytest.param(
            Board.from_string("X" * 32 + "O" * 32),
            GameOutcome.DRAW,
            None,
            id="draw",
        ),
    ],
)
def test_game_over(board: Board, outcome: GameOutcome, winner: int | None) -> None:
    game = Game(board)

    assert game.is_game_end()
    assert game.get_turn() is None
    assert game.get_outcome() == outcome
    assert game.get_winner() == winner

    with pytest.raises(InvalidMove):
        game.play((0, 0))


def test_from_moves() -> None:
    game = Game.from_moves(["f5", "d6"])

    assert game.get_turn() == BLACK
    assert game.board.count(BLACK) == 3
    assert game.board.count(WHITE) == 3
    assert game.board.get_square(5, 3) == WHITE


def test_from_string_ignores_passes() -> None:
    assert Game.from_string("f5 -- d6").board == Game.from_moves(["f5", "d6"]).board


def test_from_moves_illegal() -> None:
    with pytest.raises(IllegalMoveRequested):
        Game.from_moves(["a1"])
