"""Ordered view over the members of an enumerated type."""
from __future__ import annotations

import enum
from functools import lru_cache
from typing import TypeVar

from .errors import InvalidArgumentError, require

E = TypeVar("E", bound=enum.Enum)


def check_type(element_type: type[E] | None) -> type[E]:
    require(element_type, "element_type")
    if not (isinstance(element_type, type) and issubclass(element_type, enum.Enum)):
        raise InvalidArgumentError(f"{element_type!r} is not an enumerated type")
    return element_type


@lru_cache(maxsize=256)
def _constants(element_type: type[E]) -> tuple[E, ...]:
    # Iteration skips aliases, so positions are contiguous from 0.
    return tuple(element_type)


@lru_cache(maxsize=256)
def _ordinals(element_type: type[E]) -> dict[E, int]:
    return {member: index for index, member in enumerate(_constants(element_type))}


def constants(element_type: type[E] | None) -> tuple[E, ...]:
    """Return the members of ``element_type`` in declaration order."""
    return _constants(check_type(element_type))


def count(element_type: type[E] | None) -> int:
    return len(constants(element_type))


def ordinal(member: enum.Enum | None) -> int:
    """Return the zero-based declaration index of ``member``."""
    require(member, "element")
    if not isinstance(member, enum.Enum):
        raise InvalidArgumentError(f"{member!r} is not an enum member")
    position = _ordinals(type(member)).get(member)
    if position is None:
        # Flag composites and zero members are not iterated, so they have no bit.
        raise InvalidArgumentError(f"{member!r} has no ordinal")
    return position


def has_ordinal(member: object) -> bool:
    return isinstance(member, enum.Enum) and member in _ordinals(type(member))
