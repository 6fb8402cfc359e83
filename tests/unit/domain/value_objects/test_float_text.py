from __future__ import annotations

import math

import pytest

from extended_float.domain.value_objects import parse_raw_float


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1.5e3", 1500.0),
        ("+1.5", 1.5),
        ("-1.5", -1.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("-0", -0.0),
        ("1E-3", 0.001),
        ("42", 42.0),
    ],
)
def test_parse_raw_float_accepts_plain_literals(text: str, expected: float) -> None:
    assert parse_raw_float(text) == expected


def test_parse_raw_float_passes_special_words_through() -> None:
    """
    Verify NaN and infinity words parse to raw special values.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Rejection of special values happens one layer up.
    Raises:
        AssertionError: If special words are rejected lexically.
    Side Effects:
        None.
    """
    assert math.isnan(parse_raw_float("NaN"))
    assert parse_raw_float("inf") == math.inf
    assert parse_raw_float("-Infinity") == -math.inf
    assert parse_raw_float("1e400") == math.inf


@pytest.mark.parametrize(
    "text",
    ["", " ", "  42.5  ", "42.5\n", "1/1", "1.2.3", "1e", "e5", "1_000", "0x10", "abc", "--1", "."],
)
def test_parse_raw_float_rejects_malformed_text(text: str) -> None:
    assert parse_raw_float(text) is None


def test_parse_raw_float_requires_str() -> None:
    with pytest.raises(TypeError):
        parse_raw_float(1.5)  # type: ignore[arg-type]
