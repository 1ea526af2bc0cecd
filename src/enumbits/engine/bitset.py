"""Integer-backed bit vectors."""
from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import InvalidArgumentError, require


def count_bits(value: int) -> int:
    return value.bit_count()


def lowest_bit(value: int) -> int:
    """Return the position of the lowest set bit, or -1 when ``value`` is 0."""
    return (value & -value).bit_length() - 1


def iter_indexes(value: int) -> Iterator[int]:
    while value:
        low = value & -value
        yield low.bit_length() - 1
        value ^= low


def _check_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(f"bit index must be an int, got {index!r}")
    if index < 0:
        raise InvalidArgumentError(f"bit index cannot be negative: {index}")
    return index


class BitSet:
    """A growable vector of bits indexed by non-negative integers.

    Every bit starts cleared. ``length()`` is the index of the highest set bit
    plus one, so an empty set has length 0. ``or_`` and ``|=`` mutate the
    receiver; ``|`` builds a new set.
    """

    __slots__ = ("_bits",)

    def __init__(self, indexes: Iterable[int] = ()) -> None:
        self._bits = 0
        for index in indexes:
            self.set(index)

    @classmethod
    def from_int(cls, value: int) -> BitSet:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"expected an int, got {value!r}")
        if value < 0:
            raise InvalidArgumentError("a BitSet cannot be built from a negative int")
        bit_set = cls()
        bit_set._bits = value
        return bit_set

    def to_int(self) -> int:
        return self._bits

    def copy(self) -> BitSet:
        return BitSet.from_int(self._bits)

    def set(self, index: int) -> None:
        self._bits |= 1 << _check_index(index)

    def clear(self, index: int) -> None:
        self._bits &= ~(1 << _check_index(index))

    def get(self, index: int) -> bool:
        return bool(self._bits >> _check_index(index) & 1)

    def next_set_bit(self, start: int) -> int:
        """Return the first set index at or after ``start``, or -1 if none."""
        remaining = self._bits >> _check_index(start)
        if not remaining:
            return -1
        return start + lowest_bit(remaining)

    def length(self) -> int:
        return self._bits.bit_length()

    def cardinality(self) -> int:
        return count_bits(self._bits)

    def is_empty(self) -> bool:
        return self._bits == 0

    def or_(self, other: BitSet) -> BitSet:
        """OR ``other`` into this set in place and return this set."""
        require(other, "other")
        if not isinstance(other, BitSet):
            raise InvalidArgumentError(f"expected a BitSet, got {other!r}")
        self._bits |= other._bits
        return self

    def __ior__(self, other: BitSet) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.or_(other)

    def __or__(self, other: BitSet) -> BitSet:
        if not isinstance(other, BitSet):
            return NotImplemented
        return BitSet.from_int(self._bits | other._bits)

    def __iter__(self) -> Iterator[int]:
        return iter_indexes(self._bits)

    def __contains__(self, index: object) -> bool:
        if isinstance(index, bool) or not isinstance(index, int) or index < 0:
            return False
        return self.get(index)

    def __len__(self) -> int:
        return self.cardinality()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitSet):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)})"
