"""Reductions that accumulate enum members into subsets and bit vectors."""
from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Generic, TypeVar

from . import reflect
from .bitset import BitSet
from .enumset import EnumSet

E = TypeVar("E", bound=enum.Enum)
S = TypeVar("S")


@dataclass(frozen=True)
class Accumulator(Generic[E, S]):
    """A reduction split into an initial state, a step and a merge.

    supplier: Builds a fresh, empty state
    accumulate: Folds one element into a state and returns the state
    combine: Merges two partial states; may consume its left operand

    ``combine`` is associative and commutative for every accumulator in this
    module, so the result of :meth:`collect_partitioned` does not depend on how
    the input was split.
    """
    supplier: Callable[[], S]
    accumulate: Callable[[S, E], S]
    combine: Callable[[S, S], S]

    def collect(self, elements: Iterable[E]) -> S:
        return reduce(self.accumulate, elements, self.supplier())

    def collect_partitioned(self, partitions: Iterable[Iterable[E]]) -> S:
        """Reduce each partition on its own, then merge the partial states."""
        return reduce(self.combine, (self.collect(part) for part in partitions), self.supplier())


def _or_ordinal(bit_flag: int, element: enum.Enum) -> int:
    return bit_flag | 1 << reflect.ordinal(element)


def _or_ints(left: int, right: int) -> int:
    return left | right


def _set_ordinal(bit_set: BitSet, element: enum.Enum) -> BitSet:
    bit_set.set(reflect.ordinal(element))
    return bit_set


def _or_bit_sets(left: BitSet, right: BitSet) -> BitSet:
    # Reuses the left operand's storage; callers must not keep using it.
    return left.or_(right)


def _add_member(enum_set: EnumSet[E], element: E) -> EnumSet[E]:
    enum_set.add(element)
    return enum_set


def _union(left: EnumSet[E], right: EnumSet[E]) -> EnumSet[E]:
    left.update(right)
    return left


def to_bit_flag() -> Accumulator[enum.Enum, int]:
    """Accumulate members into an ``int`` bit flag.

    The 64-bit width is not enforced: members with ordinal 63 or more produce
    flags that :func:`enumbits.engine.codec.of_bit_flag` rejects. Use
    :func:`to_bit_set` for wider types.
    """
    return Accumulator(supplier=int, accumulate=_or_ordinal, combine=_or_ints)


def to_bit_set() -> Accumulator[enum.Enum, BitSet]:
    """Accumulate members into a :class:`BitSet`.

    The merge step ORs the right state into the left one and returns the left
    state, which is therefore consumed.
    """
    return Accumulator(supplier=BitSet, accumulate=_set_ordinal, combine=_or_bit_sets)


def to_enum_set(element_type: type[E]) -> Accumulator[E, EnumSet[E]]:
    reflect.check_type(element_type)
    return Accumulator(
        supplier=lambda: EnumSet.none_of(element_type),
        accumulate=_add_member,
        combine=_union,
    )
