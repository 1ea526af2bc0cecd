"""Command line interface for inspecting enum bit flags."""
from __future__ import annotations

import argparse
import enum
import importlib
import random
from collections.abc import Sequence

from . import io
from .engine import reflect
from .engine.codec import of_bit_flag, to_bit_flag
from .engine.enums import random_element, value_of
from .engine.errors import InvalidArgumentError


def _load_enum(path: str) -> type[enum.Enum]:
    """Import an enumerated type given as ``package.module:EnumName``."""
    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise argparse.ArgumentTypeError(f"expected MODULE:NAME, got {path!r}")
    try:
        target = importlib.import_module(module_name)
    except ImportError as exc:
        raise argparse.ArgumentTypeError(f"cannot import {module_name}: {exc}") from exc
    for part in attribute.split("."):
        target = getattr(target, part, None)
        if target is None:
            raise argparse.ArgumentTypeError(f"{path} not found")
    if not (isinstance(target, type) and issubclass(target, enum.Enum)):
        raise argparse.ArgumentTypeError(f"{path} is not an Enum")
    return target


def _parse_flag(value: str) -> int:
    """Parse a flag written in decimal, hex (0x) or binary (0b)."""
    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid bit flag: {value}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="enumbits", description="Enum bit flag CLI")
    parser.add_argument("-V", "--version", action="version", version="enumbits 0.1")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_common_options(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--enum", dest="element_type", type=_load_enum, required=True)
        cmd.add_argument("--format", choices=["text", "json"], default="text")
        cmd.add_argument("--out", default="-")

    listing = sub.add_parser("list", help="list members with ordinals and bits")
    add_common_options(listing)

    decode = sub.add_parser("decode", help="decode a bit flag into member names")
    add_common_options(decode)
    decode.add_argument("flag", type=_parse_flag)

    encode = sub.add_parser("encode", help="encode member names into a bit flag")
    add_common_options(encode)
    encode.add_argument("names", nargs="*")

    pick = sub.add_parser("random", help="print a random member")
    add_common_options(pick)
    pick.add_argument("--seed", type=int)
    return parser


def _command_list(args: argparse.Namespace) -> None:
    rows = [
        {"name": member.name, "ordinal": index, "bit": 1 << index}
        for index, member in enumerate(reflect.constants(args.element_type))
    ]
    if args.format == "json":
        io.write_json(rows, args.out)
    else:
        lines = [f"{row['ordinal']}\t{row['name']}\t{row['bit']}" for row in rows]
        io.write_text("\n".join(lines), args.out)


def _command_decode(args: argparse.Namespace) -> None:
    names = [member.name for member in of_bit_flag(args.flag, args.element_type)]
    io.emit(names, args.format, args.out)


def _command_encode(args: argparse.Namespace) -> None:
    members = []
    for name in args.names:
        member = value_of(args.element_type, name)
        if member is None:
            raise InvalidArgumentError(f"{args.element_type.__qualname__} has no member {name!r}")
        members.append(member)
    bit_flag = to_bit_flag(members)
    if args.format == "json":
        io.write_json({"flag": bit_flag, "hex": hex(bit_flag), "names": list(args.names)}, args.out)
    else:
        io.write_text(str(bit_flag), args.out)


def _command_random(args: argparse.Namespace) -> None:
    source = random.Random(args.seed) if args.seed is not None else None
    member = random_element(args.element_type, source)
    io.emit({"name": member.name} if args.format == "json" else member.name, args.format, args.out)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    commands = {
        "list": _command_list,
        "decode": _command_decode,
        "encode": _command_encode,
        "random": _command_random,
    }
    handler = commands.get(args.command)
    if handler is None:
        parser.error(f"unknown command {args.command}")
        return 1
    try:
        handler(args)
    except InvalidArgumentError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
