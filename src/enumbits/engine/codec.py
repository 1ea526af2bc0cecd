"""Conversions between enum subsets and bit vectors.

A subset of an enumerated type maps onto bits by ordinal: the member declared
first is bit 0, the next one bit 1, and so on. Two encodings are supported:

* bit flags, a single ``int`` modelling a signed 64-bit integer whose sign bit
  is never used, so at most :data:`MAX_BIT_FLAG_ORDINAL` + 1 members fit;
* :class:`~enumbits.engine.bitset.BitSet`, which grows as needed.
"""
from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from typing import TypeVar

from . import reflect
from .bitset import BitSet, lowest_bit
from .enumset import EnumSet
from .errors import InvalidArgumentError, require

E = TypeVar("E", bound=enum.Enum)

BIT_FLAG_WIDTH = 64
MAX_BIT_FLAG_ORDINAL = BIT_FLAG_WIDTH - 2
MAX_BIT_FLAG = (1 << (BIT_FLAG_WIDTH - 1)) - 1


def of_bit_flag(bit_flag: int, element_type: type[E]) -> EnumSet[E]:
    """Decode ``bit_flag`` into the set of members whose bits are set.

    Only the lowest set bit is checked against the ordinal range: a flag whose
    lowest set bit lies beyond the last ordinal is rejected, while higher bits
    past the last ordinal are ignored.

    Raises:
        InvalidArgumentError: If the flag is negative, wider than
            :data:`BIT_FLAG_WIDTH` bits, or its lowest set bit has no member.
    """
    members = reflect.constants(element_type)
    require(bit_flag, "bit_flag")
    if isinstance(bit_flag, bool) or not isinstance(bit_flag, int):
        raise InvalidArgumentError(f"bit_flag must be an int, got {type(bit_flag).__name__}")
    if bit_flag < 0:
        raise InvalidArgumentError("bit_flag cannot be negative")
    if bit_flag > MAX_BIT_FLAG:
        raise InvalidArgumentError(f"bit_flag does not fit in {BIT_FLAG_WIDTH} bits")
    cardinality = len(members)
    if bit_flag and lowest_bit(bit_flag) >= cardinality:
        raise InvalidArgumentError(
            "the bit flag contains set bits with indices greater than the maximum ordinal"
        )
    result = EnumSet.none_of(element_type)
    for index in range(cardinality):
        if bit_flag >> index & 1:
            result.add(members[index])
    return result


def of_bit_set(bit_set: BitSet, element_type: type[E]) -> EnumSet[E]:
    """Decode ``bit_set`` into the set of members whose bits are set."""
    require(bit_set, "bit_set")
    members = reflect.constants(element_type)
    if not isinstance(bit_set, BitSet):
        raise InvalidArgumentError(f"expected a BitSet, got {type(bit_set).__name__}")
    if bit_set.length() > len(members):
        raise InvalidArgumentError(
            "the BitSet contains set bits with indices greater than the maximum ordinal"
        )
    result = EnumSet.none_of(element_type)
    index = bit_set.next_set_bit(0)
    while index >= 0:
        result.add(members[index])
        index = bit_set.next_set_bit(index + 1)
    return result


def to_bit_flag(members: Iterable[enum.Enum]) -> int:
    """Encode ``members`` as a bit flag; an empty collection gives 0."""
    require(members, "enum_set")
    bit_flag = 0
    for member in members:
        position = reflect.ordinal(member)
        if position > MAX_BIT_FLAG_ORDINAL:
            raise InvalidArgumentError(
                f"{member!r} has ordinal {position}, which does not fit in a bit flag"
            )
        bit_flag |= 1 << position
    return bit_flag


def to_bit_set(members: Iterable[enum.Enum]) -> BitSet:
    """Encode ``members`` as a new :class:`BitSet`."""
    require(members, "enum_set")
    bit_set = BitSet()
    for member in members:
        bit_set.set(reflect.ordinal(member))
    return bit_set


def filter_values(element_type: type[E], predicate: Callable[[E], bool]) -> EnumSet[E]:
    """Return the members of ``element_type`` for which ``predicate`` holds."""
    members = reflect.constants(element_type)
    require(predicate, "predicate")
    if not callable(predicate):
        raise InvalidArgumentError(f"{predicate!r} is not callable")
    return EnumSet(element_type, (member for member in members if predicate(member)))


def is_full(members: Iterable[enum.Enum]) -> bool:
    """Return whether ``members`` holds every member of its type.

    The type of an :class:`EnumSet` is its own; for other collections it is
    taken from the members, so an empty untyped collection is never full.
    """
    require(members, "enum_set")
    if not isinstance(members, EnumSet):
        members = list(members)
        if not members:
            return False
        members = EnumSet.copy_of(members)
    return not EnumSet.complement_of(members)
