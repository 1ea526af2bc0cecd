"""Tests for enumerated type utilities."""

import random
import threading

import pytest

from enumbits.engine import enums
from enumbits.engine.errors import InvalidArgumentError
from sample_enums import Empty, Greek, Letter, Shade


def test_cardinality() -> None:
    assert enums.cardinality(Letter) == 3
    assert enums.cardinality(Empty) == 0
    assert enums.cardinality(Shade) == 2
    with pytest.raises(InvalidArgumentError):
        enums.cardinality(None)  # type: ignore[arg-type]


def test_random_element_stays_in_range_and_covers_members() -> None:
    source = random.Random(1234)
    seen = {enums.random_element(Letter, source) for _ in range(300)}
    assert seen == set(Letter)


def test_random_element_default_source() -> None:
    for _ in range(50):
        assert enums.random_element(Greek) in Greek


def test_random_element_default_source_is_per_thread() -> None:
    sources = []

    def grab() -> None:
        sources.append(enums._default_random())

    worker = threading.Thread(target=grab)
    worker.start()
    worker.join()
    assert sources[0] is not enums._default_random()
    assert enums._default_random() is enums._default_random()


def test_random_element_rejects_invalid_arguments() -> None:
    with pytest.raises(InvalidArgumentError):
        enums.random_element(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        enums.random_element(Empty)
    with pytest.raises(InvalidArgumentError):
        enums.random_element(Letter, object())


def test_stream_is_restartable() -> None:
    first = enums.stream(Letter)
    assert list(first) == [Letter.A, Letter.B, Letter.C]
    assert list(first) == []
    assert list(enums.stream(Letter)) == [Letter.A, Letter.B, Letter.C]
    assert list(enums.stream(Empty)) == []


def test_value_of_by_name() -> None:
    assert enums.value_of(Letter, "B") is Letter.B
    assert enums.value_of(Letter, "Z") is None
    assert enums.value_of(Letter, "b") is None
    assert enums.value_of(Letter, " B") is None
    assert enums.value_of(Shade, "BLACK") is Shade.DARK


def test_value_of_across_types() -> None:
    assert enums.value_of(Letter, Letter.C) is Letter.C
    assert enums.value_of(Greek, Letter.B) is Greek.B
    assert enums.value_of(Greek, Letter.A) is None
    assert enums.convert(Letter, Greek.B) is Letter.B
    assert enums.convert(Greek, Greek.GAMMA) is Greek.GAMMA


def test_value_of_rejects_absent_arguments() -> None:
    with pytest.raises(InvalidArgumentError):
        enums.value_of(None, "A")  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        enums.value_of(Letter, None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        enums.value_of(Letter, 1)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        enums.convert(Letter, None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentError):
        enums.convert(Letter, "A")  # type: ignore[arg-type]
