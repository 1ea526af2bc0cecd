"""Error type raised by every enumbits operation."""
from __future__ import annotations

from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when an argument is absent, of the wrong kind, or out of range."""


def require(value: Any, name: str) -> Any:
    if value is None:
        raise InvalidArgumentError(f"{name} is None")
    return value
