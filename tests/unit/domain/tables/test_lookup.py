from __future__ import annotations

import math

import numpy as np
import pytest

from extended_float.domain.tables import (
    build_extra_digits_table,
    build_precision_table,
    extra_digits_for_exponent,
    precision_for_extra_digits,
    verify_extra_digits_table,
)


def test_extra_digits_for_exponent_matches_log10_ceiling_over_f64_range() -> None:
    """
    Verify fixed-point extra digits agree with `ceil(e * log10(2))` everywhere.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Non-positive products clamp to zero.
    Raises:
        AssertionError: If any exponent lands on the wrong ceiling.
    Side Effects:
        None.
    """
    for exponent in range(-1100, 1100):
        expected = max(0, math.ceil(exponent * math.log10(2)))
        assert extra_digits_for_exponent(exponent) == expected


def test_extra_digits_known_boundaries() -> None:
    """
    Verify hand-checked exponents around powers of ten.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        2^10 = 1024 needs 4 decimal digits, 2^3 = 8 needs 1.
    Raises:
        AssertionError: If boundary values regress.
    Side Effects:
        None.
    """
    assert extra_digits_for_exponent(-5) == 0
    assert extra_digits_for_exponent(0) == 0
    assert extra_digits_for_exponent(1) == 1
    assert extra_digits_for_exponent(3) == 1
    assert extra_digits_for_exponent(4) == 2
    assert extra_digits_for_exponent(10) == 4
    assert extra_digits_for_exponent(49) == 15
    assert extra_digits_for_exponent(1023) == 308


def test_precision_for_extra_digits_clamps_at_zero() -> None:
    assert precision_for_extra_digits(0, 15) == 15
    assert precision_for_extra_digits(4, 15) == 11
    assert precision_for_extra_digits(15, 15) == 0
    assert precision_for_extra_digits(308, 15) == 0


def test_tables_are_read_only_and_aligned() -> None:
    """
    Verify generated tables have expected length, alignment and immutability.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Index `0` stores `min_exponent`.
    Raises:
        AssertionError: If shape, content or write protection regress.
    Side Effects:
        None.
    """
    extra = build_extra_digits_table(-1022, 1023)
    precision = build_precision_table(extra, 15)

    assert extra.shape == (2046,)
    assert precision.shape == (2046,)
    assert extra.dtype == np.int64
    assert extra[1022 + 4] == 2
    assert precision[1022 + 4] == 13
    assert precision[0] == 15
    assert precision[-1] == 0

    with pytest.raises(ValueError):
        extra[0] = 1
    with pytest.raises(ValueError):
        precision[0] = 1


def test_build_tables_reject_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        build_extra_digits_table(10, -10)
    with pytest.raises(ValueError):
        build_precision_table(build_extra_digits_table(-1, 1), 0)


def test_verify_extra_digits_table_detects_corruption() -> None:
    """
    Verify the `log10` self-check rejects a table with a wrong entry.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        A writable copy can be tampered with for the check.
    Raises:
        AssertionError: If corruption goes unnoticed.
    Side Effects:
        None.
    """
    table = build_extra_digits_table(-126, 127)
    verify_extra_digits_table(table, -126)

    corrupted = table.copy()
    corrupted[126 + 10] = 3
    with pytest.raises(RuntimeError, match="exponent 10"):
        verify_extra_digits_table(corrupted, -126)
