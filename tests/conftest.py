"""Test configuration ensuring local packages are importable."""

from __future__ import annotations

import pathlib
import sys

HERE = pathlib.Path(__file__).resolve().parent
ROOT = HERE.parent
SRC = ROOT / "src"

for path in (SRC, HERE):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)
