"""Output helpers for the enumbits CLI."""
import json
import sys
from typing import TextIO


def _dump(text: str, handle: TextIO) -> None:
    handle.write(text)
    if not text.endswith("\n"):
        handle.write("\n")
    handle.flush()


def write_text(text: str, path: str = "-") -> None:
    if path == "-":
        _dump(text, sys.stdout)
        return
    with open(path, "w", encoding="utf-8") as handle:
        _dump(text, handle)


def write_json(obj: object, path: str = "-") -> None:
    write_text(json.dumps(obj, indent=2, sort_keys=True), path)


def emit(data: object, fmt: str, path: str = "-") -> None:
    """Write ``data`` as JSON, or as plain text one item per line."""
    if fmt == "json":
        write_json(data, path)
    elif isinstance(data, str):
        write_text(data, path)
    elif isinstance(data, dict):
        write_text("\n".join(f"{key}\t{value}" for key, value in data.items()), path)
    else:
        write_text("\n".join(str(item) for item in data), path)
