from __future__ import annotations

from typing import Iterator

BITSET_MASK = 0xFFFFFFFFFFFFFFFF


class BitSet:
    """
    Set of board squares packed in a 64 bit integer.
    Bit `8 * row + col` represents the square at (row, col).
    """

    def __init__(self, value: int) -> None:
        if value & BITSET_MASK != value:
            raise ValueError

        self.__value = value

    def is_set(self, index: int) -> bool:
        if index not in range(64):
            raise ValueError

        mask = 1 << index
        return self.__value & mask != 0

    def is_set_2d(self, *, row: int, col: int) -> bool:
        if row not in range(8) or col not in range(8):
            raise ValueError

        return self.is_set(8 * row + col)

    def has_any(self) -> bool:
        return self.__value != 0

    def count_bits(self) -> int:
        return bin(self.__value).count("1")

    def indexes(self) -> Iterator[int]:
        """Yields indexes of set bits in ascending (row-major) order."""
        value = self.__value
        while value:
            lowest = value & -value
            yield lowest.bit_length() - 1
            value ^= lowest

    def as_hex(self) -> str:  # pragma: nocover
        return hex(self.__value)

    def as_int(self) -> int:
        return int(self.__value)

    def __repr__(self) -> str:  # pragma: nocover
        return f"BitSet({self.as_hex()})"

    def __hash__(self) -> int:  # pragma: nocover
        return hash(self.__value)

    def __eq__(self, rhs: object) -> bool:
        if not isinstance(rhs, BitSet):
            raise TypeError

        return self.__value == rhs.__value

    def __bool__(self) -> bool:
        raise NotImplementedError("Use the more explicit `BitSet.has_any()` instead.")
