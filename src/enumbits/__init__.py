"""enumbits: enum subsets as bit flags and bit sets."""

from collections.abc import Sequence

from .engine import collectors
from .engine.bitset import BitSet
from .engine.codec import (
    BIT_FLAG_WIDTH,
    filter_values,
    is_full,
    of_bit_flag,
    of_bit_set,
    to_bit_flag,
    to_bit_set,
)
from .engine.enums import cardinality, convert, random_element, stream, value_of
from .engine.enumset import EnumSet
from .engine.errors import InvalidArgumentError


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`enumbits.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = [
    "BIT_FLAG_WIDTH",
    "BitSet",
    "EnumSet",
    "InvalidArgumentError",
    "cardinality",
    "collectors",
    "convert",
    "filter_values",
    "is_full",
    "main",
    "of_bit_flag",
    "of_bit_set",
    "random_element",
    "stream",
    "to_bit_flag",
    "to_bit_set",
    "value_of",
]
