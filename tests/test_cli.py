"""End-to-end CLI tests executed directly via :func:`enumbits.cli.main`."""

import json
from pathlib import Path

import pytest

from enumbits import cli

MODULE = """
import enum


class Color(enum.Enum):
    RED = 1
    GREEN = 2
    BLUE = 3
"""


@pytest.fixture
def color_enum(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / "cli_colors.py").write_text(MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_colors:Color"


def test_cli_list(color_enum: str, capfd: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["list", "--enum", color_enum, "--format", "json"]) == 0
    rows = json.loads(capfd.readouterr().out)
    assert rows == [
        {"bit": 1, "name": "RED", "ordinal": 0},
        {"bit": 2, "name": "GREEN", "ordinal": 1},
        {"bit": 4, "name": "BLUE", "ordinal": 2},
    ]


def test_cli_decode_text(color_enum: str, capfd: pytest.CaptureFixture[str]) -> None:
    cli.main(["decode", "--enum", color_enum, "0b101"])
    assert capfd.readouterr().out.split() == ["RED", "BLUE"]


def test_cli_decode_json(color_enum: str, capfd: pytest.CaptureFixture[str]) -> None:
    cli.main(["decode", "--enum", color_enum, "--format", "json", "6"])
    assert json.loads(capfd.readouterr().out) == ["GREEN", "BLUE"]


def test_cli_encode(color_enum: str, capfd: pytest.CaptureFixture[str]) -> None:
    cli.main(["encode", "--enum", color_enum, "RED", "BLUE"])
    assert capfd.readouterr().out.strip() == "5"
    cli.main(["encode", "--enum", color_enum, "--format", "json", "GREEN"])
    payload = json.loads(capfd.readouterr().out)
    assert payload == {"flag": 2, "hex": "0x2", "names": ["GREEN"]}


def test_cli_encode_writes_file(color_enum: str, tmp_path: Path) -> None:
    out = tmp_path / "flag.txt"
    cli.main(["encode", "--enum", color_enum, "--out", str(out), "GREEN", "BLUE"])
    assert out.read_text() == "6\n"


def test_cli_random_is_seeded(color_enum: str, capfd: pytest.CaptureFixture[str]) -> None:
    cli.main(["random", "--enum", color_enum, "--seed", "7"])
    first = capfd.readouterr().out.strip()
    cli.main(["random", "--enum", color_enum, "--seed", "7"])
    assert capfd.readouterr().out.strip() == first
    assert first in {"RED", "GREEN", "BLUE"}


@pytest.mark.parametrize(
    "argv",
    [
        ["decode", "--enum", "{enum}", "8"],
        ["decode", "--enum", "{enum}", "-1"],
        ["decode", "--enum", "{enum}", "nope"],
        ["encode", "--enum", "{enum}", "PURPLE"],
        ["list", "--enum", "cli_colors"],
        ["list", "--enum", "cli_colors:Missing"],
        ["list", "--enum", "no_such_module_here:Color"],
    ],
)
def test_cli_errors_exit_with_usage(
    color_enum: str, argv: list[str], capfd: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([arg.format(enum=color_enum) for arg in argv])
    assert excinfo.value.code == 2
    assert "enumbits" in capfd.readouterr().err
