"""Set of members drawn from a single enumerated type."""
from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator, MutableSet
from typing import Any, Generic, TypeVar

from . import reflect
from .bitset import count_bits, iter_indexes
from .errors import InvalidArgumentError, require

E = TypeVar("E", bound=enum.Enum)


class EnumSet(MutableSet, Generic[E]):
    """A mutable set restricted to the members of one enumerated type.

    Members are stored as a mask indexed by ordinal, so iteration always
    follows declaration order. The element type is kept even when the set is
    empty. Equality holds against any ``Set`` with the same members.

    Operators with an ``EnumSet`` on the left keep its element type and reject
    foreign items. Reflected operators (``other | s``, ``other - s``,
    ``other ^ s``) fall back to a plain ``set`` when the result holds items of
    another type.
    """

    __slots__ = ("_element_type", "_bits")

    def __init__(self, element_type: type[E], members: Iterable[E] = ()) -> None:
        self._element_type = reflect.check_type(element_type)
        self._bits = 0
        for member in members:
            self.add(member)

    @classmethod
    def none_of(cls, element_type: type[E]) -> EnumSet[E]:
        return cls(element_type)

    @classmethod
    def all_of(cls, element_type: type[E]) -> EnumSet[E]:
        enum_set = cls(element_type)
        enum_set._bits = (1 << reflect.count(element_type)) - 1
        return enum_set

    @classmethod
    def of(cls, first: E, *rest: E) -> EnumSet[E]:
        require(first, "first")
        if not isinstance(first, enum.Enum):
            raise InvalidArgumentError(f"{first!r} is not an enum member")
        return cls(type(first), (first, *rest))

    @classmethod
    def copy_of(cls, members: Iterable[E], element_type: type[E] | None = None) -> EnumSet[E]:
        """Copy ``members`` into a new set.

        The element type comes from ``members`` when it is an ``EnumSet``,
        then from ``element_type``, then from the first member.
        """
        require(members, "members")
        if isinstance(members, EnumSet):
            return members.copy()
        members = list(members)
        if element_type is None:
            if not members:
                raise InvalidArgumentError("cannot infer the element type of an empty collection")
            element_type = type(members[0])
        return cls(element_type, members)

    @classmethod
    def complement_of(cls, other: EnumSet[E]) -> EnumSet[E]:
        require(other, "other")
        if not isinstance(other, EnumSet):
            raise InvalidArgumentError(f"expected an EnumSet, got {type(other).__name__}")
        full = (1 << reflect.count(other._element_type)) - 1
        return cls._from_bits(other._element_type, full & ~other._bits)

    @classmethod
    def range(cls, start: E, end: E) -> EnumSet[E]:
        """Return every member from ``start`` to ``end`` inclusive."""
        low = reflect.ordinal(start)
        high = reflect.ordinal(end)
        if type(start) is not type(end):
            raise InvalidArgumentError("range endpoints belong to different types")
        if low > high:
            raise InvalidArgumentError(f"{start!r} comes after {end!r}")
        return cls._from_bits(type(start), ((1 << (high + 1)) - 1) & ~((1 << low) - 1))

    @classmethod
    def _from_bits(cls, element_type: type[E], bits: int) -> EnumSet[E]:
        enum_set = cls(element_type)
        enum_set._bits = bits
        return enum_set

    def _from_iterable(self, members: Iterable[E]) -> EnumSet[E]:
        # Set mixin operators (|, &, -, ^) build their results through here.
        return EnumSet(self._element_type, members)

    def _from_mixed(self, values: Iterable[Any]) -> EnumSet[E] | set[Any]:
        values = list(values)
        if all(
            isinstance(value, self._element_type) and reflect.has_ordinal(value)
            for value in values
        ):
            return EnumSet(self._element_type, values)
        return set(values)

    def __ror__(self, other: Iterable[Any]) -> EnumSet[E] | set[Any]:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self._from_mixed([*other, *self])

    def __rsub__(self, other: Iterable[Any]) -> EnumSet[E] | set[Any]:
        if not isinstance(other, Iterable):
            return NotImplemented
        return self._from_mixed(value for value in other if value not in self)

    def __rxor__(self, other: Iterable[Any]) -> EnumSet[E] | set[Any]:
        if not isinstance(other, Iterable):
            return NotImplemented
        other = list(other)
        return self._from_mixed(
            [value for value in other if value not in self]
            + [member for member in self if member not in other]
        )

    @property
    def element_type(self) -> type[E]:
        return self._element_type

    def copy(self) -> EnumSet[E]:
        return self._from_bits(self._element_type, self._bits)

    def _ordinal_of(self, member: Any) -> int:
        require(member, "element")
        if not isinstance(member, self._element_type):
            raise InvalidArgumentError(
                f"{member!r} is not a member of {self._element_type.__qualname__}"
            )
        return reflect.ordinal(member)

    def add(self, member: E) -> None:
        self._bits |= 1 << self._ordinal_of(member)

    def discard(self, member: E) -> None:
        if isinstance(member, self._element_type) and reflect.has_ordinal(member):
            self._bits &= ~(1 << reflect.ordinal(member))

    def update(self, *others: Iterable[E]) -> None:
        for other in others:
            if isinstance(other, EnumSet) and other._element_type is self._element_type:
                self._bits |= other._bits
            else:
                for member in other:
                    self.add(member)

    def __contains__(self, member: object) -> bool:
        if not isinstance(member, self._element_type) or not reflect.has_ordinal(member):
            return False
        return bool(self._bits >> reflect.ordinal(member) & 1)

    def __iter__(self) -> Iterator[E]:
        members = reflect.constants(self._element_type)
        return (members[index] for index in iter_indexes(self._bits))

    def __len__(self) -> int:
        return count_bits(self._bits)

    def __repr__(self) -> str:
        names = ", ".join(member.name for member in self)
        return f"{self.__class__.__name__}({self._element_type.__qualname__}, {{{names}}})"

    __hash__ = None  # type: ignore[assignment]
