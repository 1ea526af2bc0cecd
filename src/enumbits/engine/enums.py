"""Lookups and conveniences over enumerated types."""
from __future__ import annotations

import enum
import random as _random
import threading
from collections.abc import Iterator
from typing import Any, TypeVar

from . import reflect
from .errors import InvalidArgumentError, require

E = TypeVar("E", bound=enum.Enum)

_local = threading.local()


def _default_random() -> _random.Random:
    # One generator per thread so concurrent callers never share state.
    source = getattr(_local, "random", None)
    if source is None:
        source = _local.random = _random.Random()
    return source


def cardinality(element_type: type[E]) -> int:
    """Return the number of members of ``element_type``."""
    return reflect.count(element_type)


def random_element(element_type: type[E], random: Any = None) -> E:
    """Return a uniformly chosen member of ``element_type``.

    Args:
        element_type: Enumerated type to draw from
        random: Object with a ``randrange(bound)`` method, such as
            :class:`random.Random`. Defaults to a per-thread generator.

    Raises:
        InvalidArgumentError: If the type is absent or empty, or ``random``
            cannot draw a bounded integer.
    """
    members = reflect.constants(element_type)
    source = _default_random() if random is None else random
    if not callable(getattr(source, "randrange", None)):
        raise InvalidArgumentError(f"{source!r} has no randrange method")
    if not members:
        raise InvalidArgumentError(f"{element_type.__qualname__} has no members")
    return members[source.randrange(len(members))]


def stream(element_type: type[E]) -> Iterator[E]:
    """Return a fresh iterator over all members in declaration order."""
    return iter(reflect.constants(element_type))


def value_of(element_type: type[E], key: str | enum.Enum) -> E | None:
    """Look up a member of ``element_type`` by name or by a member of any type.

    Names must match exactly; surrounding whitespace is not stripped. A member
    of ``element_type`` is returned as is, a member of another type is looked
    up by its name. ``None`` means no match.
    """
    reflect.check_type(element_type)
    require(key, "key")
    if isinstance(key, enum.Enum):
        return convert(element_type, key)
    if not isinstance(key, str):
        raise InvalidArgumentError(f"cannot look up a member by {type(key).__name__}")
    # __members__ also lists aliases; they resolve to their canonical member.
    return element_type.__members__.get(key)


def convert(element_type: type[E], element: enum.Enum) -> E | None:
    """Return the member of ``element_type`` named like ``element``."""
    reflect.check_type(element_type)
    require(element, "element")
    if not isinstance(element, enum.Enum):
        raise InvalidArgumentError(f"{element!r} is not an enum member")
    if isinstance(element, element_type):
        return element
    return value_of(element_type, element.name)
