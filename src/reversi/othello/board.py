from __future__ import annotations

from typing import Iterable, Optional

from reversi.othello.bitset import BITSET_MASK, BitSet

BLACK = -1
WHITE = 1
EMPTY = 0

PASS_MOVE = -1

# Fixed enumeration order, also the order in which flipped discs are reported.
DIRECTIONS = [
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
]

# (row, col)
Move = tuple[int, int]


class InvalidMove(Exception):
    pass


class IllegalMoveRequested(InvalidMove):
    pass


class OutOfBoundsCoordinate(ValueError):
    pass


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def check_coord(row: int, col: int) -> None:
    if row not in range(8) or col not in range(8):
        raise OutOfBoundsCoordinate(f"Coordinate ({row}, {col}) is not on the board")


def coord_to_index(move: Move) -> int:
    row, col = move
    check_coord(row, col)
    return 8 * row + col


def index_to_coord(index: int) -> Move:
    if index not in range(64):
        raise OutOfBoundsCoordinate(f"Index {index} is not on the board")
    return (index // 8, index % 8)


def get_moves_mask(me: int, opp: int) -> int:
    """
    Computes the bitset of all legal moves for the player owning `me`
    by shifting runs of `opp` discs in all eight directions.
    """
    mask = opp & 0x7E7E7E7E7E7E7E7E

    flipL = mask & (me << 1)
    flipL |= mask & (flipL << 1)
    maskL = mask & (mask << 1)
    flipL |= maskL & (flipL << (2 * 1))
    flipL |= maskL & (flipL << (2 * 1))
    flipR = mask & (me >> 1)
    flipR |= mask & (flipR >> 1)
    maskR = mask & (mask >> 1)
    flipR |= maskR & (flipR >> (2 * 1))
    flipR |= maskR & (flipR >> (2 * 1))
    movesSet = (flipL << 1) | (flipR >> 1)

    flipL = mask & (me << 7)
    flipL |= mask & (flipL << 7)
    maskL = mask & (mask << 7)
    flipL |= maskL & (flipL << (2 * 7))
    flipL |= maskL & (flipL << (2 * 7))
    flipR = mask & (me >> 7)
    flipR |= mask & (flipR >> 7)
    maskR = mask & (mask >> 7)
    flipR |= maskR & (flipR >> (2 * 7))
    flipR |= maskR & (flipR >> (2 * 7))
    movesSet |= (flipL << 7) | (flipR >> 7)

    flipL = mask & (me << 9)
    flipL |= mask & (flipL << 9)
    maskL = mask & (mask << 9)
    flipL |= maskL & (flipL << (2 * 9))
    flipL |= maskL & (flipL << (2 * 9))
    flipR = mask & (me >> 9)
    flipR |= mask & (flipR >> 9)
    maskR = mask & (mask >> 9)
    flipR |= maskR & (flipR >> (2 * 9))
    flipR |= maskR & (flipR >> (2 * 9))
    movesSet |= (flipL << 9) | (flipR >> 9)

    flipL = opp & (me << 8)
    flipL |= opp & (flipL << 8)
    maskL = opp & (opp << 8)
    flipL |= maskL & (flipL << (2 * 8))
    flipL |= maskL & (flipL << (2 * 8))
    flipR = opp & (me >> 8)
    flipR |= opp & (flipR >> 8)
    maskR = opp & (opp >> 8)
    flipR |= maskR & (flipR >> (2 * 8))
    flipR |= maskR & (flipR >> (2 * 8))
    movesSet |= (flipL << 8) | (flipR >> 8)

    return movesSet & ~(me | opp) & BITSET_MASK


class Board:
    """
    Board stores the discs of both colors, but not the color of the player to move.
    Boards are values: every method returns a new Board and never modifies `self`.
    """

    def __init__(self, black: int, white: int) -> None:
        assert black == black & BITSET_MASK
        assert white == white & BITSET_MASK

        if black & white:
            raise ValueError("black and white must not overlap")

        self.__black = black
        self.__white = white

    @classmethod
    def start(cls) -> Board:
        # (3,3) and (4,4) are white, (3,4) and (4,3) are black
        black = 1 << 28 | 1 << 35
        white = 1 << 27 | 1 << 36
        return Board(black, white)

    @classmethod
    def empty(cls) -> Board:
        return Board(0x0, 0x0)

    @classmethod
    def from_squares(cls, squares: list[int]) -> Board:
        if len(squares) != 64:
            raise ValueError(f"Expected 64 squares, got {len(squares)}")

        white = 0
        black = 0
        for index, square in enumerate(squares):
            mask = 1 << index
            if square == WHITE:
                white |= mask
            elif square == BLACK:
                black |= mask
            elif square != EMPTY:
                raise ValueError(f'Invalid square value "{square}"')

        return Board(black, white)

    @classmethod
    def from_string(cls, string: str) -> Board:
        """
        Parses 64 characters in row-major order: `X` is black, `O` is white,
        `-` or `.` is empty. Whitespace is ignored.
        """
        chars = "".join(string.split())

        squares: list[int] = []
        for char in chars:
            if char in "xX":
                squares.append(BLACK)
            elif char in "oO":
                squares.append(WHITE)
            elif char in "-.":
                squares.append(EMPTY)
            else:
                raise ValueError(f'Invalid board character "{char}"')

        return cls.from_squares(squares)

    def to_string(self) -> str:
        chars = {BLACK: "X", WHITE: "O", EMPTY: "-"}
        return "".join(chars[self.get_square_by_index(i)] for i in range(64))

    def __repr__(self) -> str:
        return f"Board({hex(self.__black)}, {hex(self.__white)})"

    def get_square_by_index(self, index: int) -> int:
        if index not in range(64):
            raise OutOfBoundsCoordinate(f"Index {index} is not on the board")

        mask = 1 << index
        if self.__black & mask:
            return BLACK
        if self.__white & mask:
            return WHITE
        return EMPTY

    def get_square(self, row: int, col: int) -> int:
        check_coord(row, col)
        return self.get_square_by_index(8 * row + col)

    def black(self) -> BitSet:
        return BitSet(self.__black)

    def white(self) -> BitSet:
        return BitSet(self.__white)

    def discs(self, color: int) -> BitSet:
        assert color in [BLACK, WHITE]

        if color == BLACK:
            return self.black()
        return self.white()

    def count(self, color: int) -> int:
        return self.discs(color).count_bits()

    def count_discs(self) -> int:
        return bin(self.__black | self.__white).count("1")

    def count_empties(self) -> int:
        return 64 - self.count_discs()

    def get_moves(self, color: int) -> BitSet:
        me = self.discs(color).as_int()
        opp = self.discs(opponent(color)).as_int()
        return BitSet(get_moves_mask(me, opp))

    def get_moves_as_list(self, color: int) -> list[Move]:
        return [index_to_coord(index) for index in self.get_moves(color).indexes()]

    def has_moves(self, color: int) -> bool:
        return self.get_moves(color).has_any()

    def is_game_end(self) -> bool:
        return not (self.has_moves(BLACK) or self.has_moves(WHITE))

    def flips(self, color: int, row: int, col: int) -> list[Move]:
        """
        Returns the discs that `color` captures by playing at (row, col),
        direction by direction and moving outward from the played square.
        An empty list means the move is not legal.
        """
        check_coord(row, col)
        assert color in [BLACK, WHITE]

        if self.get_square(row, col) != EMPTY:
            return []

        opp = opponent(color)
        flipped: list[Move] = []

        for dy, dx in DIRECTIONS:
            run: list[Move] = []
            y, x = row + dy, col + dx

            while 0 <= y < 8 and 0 <= x < 8 and self.get_square(y, x) == opp:
                run.append((y, x))
                y += dy
                x += dx

            if run and 0 <= y < 8 and 0 <= x < 8 and self.get_square(y, x) == color:
                flipped += run

        return flipped

    def do_move(self, color: int, move: Move) -> tuple[Board, list[Move]]:
        row, col = move
        flipped = self.flips(color, row, col)

        if not flipped:
            field = self.coord_to_field(move)
            raise IllegalMoveRequested(f"{field} is not a legal move")

        changed = 1 << coord_to_index(move)
        for flip in flipped:
            changed |= 1 << coord_to_index(flip)

        if color == BLACK:
            child = Board(self.__black | changed, self.__white & ~changed)
        else:
            child = Board(self.__black & ~changed, self.__white | changed)

        return child, flipped

    def show(self, color: Optional[int] = None) -> None:
        """Prints the board, marking legal moves of `color` with dots if given."""
        moves = BitSet(0) if color is None else self.get_moves(color)

        print("+-a-b-c-d-e-f-g-h-+")
        for row in range(8):
            print("{} ".format(row + 1), end="")

            for col in range(8):
                square = self.get_square(row, col)

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif moves.is_set_2d(row=row, col=col):
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def index_to_field(cls, index: int) -> str:
        if index not in range(64):
            raise ValueError
        return "abcdefgh"[index % 8] + "12345678"[index // 8]

    @classmethod
    def field_to_index(cls, field: str) -> int:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if field in ["--", "ps", "pa"]:
            return PASS_MOVE

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return y * 8 + x

    @classmethod
    def coord_to_field(cls, move: Move) -> str:
        return cls.index_to_field(coord_to_index(move))

    @classmethod
    def coords_to_fields(cls, moves: Iterable[Move]) -> str:
        return " ".join(cls.coord_to_field(move) for move in moves)

    @classmethod
    def field_to_coord(cls, field: str) -> Move:
        index = cls.field_to_index(field)

        if index == PASS_MOVE:
            raise ValueError(f'Field "{field}" is a pass, not a square')

        return index_to_coord(index)

    def as_tuple(self) -> tuple[int, int]:
        return (self.__black, self.__white)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()
