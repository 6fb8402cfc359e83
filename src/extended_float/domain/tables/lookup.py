"""
Exponent-driven precision lookup tables.

For every normal binary exponent of a float width the tables store how many
decimal digits the binary-to-decimal conversion consumes (`extra digits`) and
how many fractional digits remain trustworthy after that (`precision`).

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.domain.policies.ieee_float_policy,
  extended_float.adapters.outbound.compute_numba.kernels
"""

from __future__ import annotations

import math

import numpy as np

# log10(2) as an exact fixed-point fraction; 20 digits keep every exponent of
# every supported width on the correct side of its ceiling boundary.
LOG10_2_NUMERATOR = 30_102_999_566_398_119_521
LOG10_2_SCALE = 10**20


def extra_digits_for_exponent(exponent: int) -> int:
    """
    Compute decimal digits consumed by one binary exponent.

    Args:
        exponent: Unbiased binary exponent.
    Returns:
        int: `ceil(exponent * log10(2))` for positive products, otherwise `0`.
    Assumptions:
        Integer arithmetic only, so results are identical across platforms.
    Raises:
        None.
    Side Effects:
        None.
    """
    product = exponent * LOG10_2_NUMERATOR
    if product <= 0:
        return 0
    return -(-product // LOG10_2_SCALE)


def precision_for_extra_digits(extra_digits: int, decimal_precision_digits: int) -> int:
    """
    Compute trustworthy fractional digits left after conversion overhead.

    Args:
        extra_digits: Digits consumed by the binary exponent.
        decimal_precision_digits: Digit budget of the float width.
    Returns:
        int: `max(0, decimal_precision_digits - extra_digits)`.
    Assumptions:
        Both arguments are non-negative.
    Raises:
        None.
    Side Effects:
        None.
    """
    return max(0, decimal_precision_digits - extra_digits)


def build_extra_digits_table(min_exponent: int, max_exponent: int) -> np.ndarray:
    """
    Build read-only extra-digits table indexed by `exponent - min_exponent`.

    Args:
        min_exponent: Smallest normal binary exponent of the width.
        max_exponent: Largest normal binary exponent of the width.
    Returns:
        np.ndarray: Read-only int64 array of length `max - min + 1`.
    Assumptions:
        `min_exponent <= max_exponent`.
    Raises:
        ValueError: If exponent bounds are inverted.
    Side Effects:
        None.
    """
    if min_exponent > max_exponent:
        raise ValueError(
            f"min_exponent must be <= max_exponent, got {min_exponent} > {max_exponent}"
        )
    table = np.fromiter(
        (extra_digits_for_exponent(exponent) for exponent in range(min_exponent, max_exponent + 1)),
        dtype=np.int64,
        count=max_exponent - min_exponent + 1,
    )
    table.flags.writeable = False
    return table


def build_precision_table(extra_digits: np.ndarray, decimal_precision_digits: int) -> np.ndarray:
    """
    Build read-only precision table aligned with an extra-digits table.

    Args:
        extra_digits: Table produced by `build_extra_digits_table`.
        decimal_precision_digits: Digit budget of the float width.
    Returns:
        np.ndarray: Read-only int64 array with the same shape as `extra_digits`.
    Assumptions:
        Digit budget is positive.
    Raises:
        ValueError: If digit budget is not positive.
    Side Effects:
        None.
    """
    if decimal_precision_digits <= 0:
        raise ValueError(
            f"decimal_precision_digits must be > 0, got {decimal_precision_digits}"
        )
    table = np.maximum(0, decimal_precision_digits - extra_digits).astype(np.int64)
    table.flags.writeable = False
    return table


def verify_extra_digits_table(table: np.ndarray, min_exponent: int) -> None:
    """
    Cross-check fixed-point table entries against the platform `log10`.

    Args:
        table: Extra-digits table to verify.
        min_exponent: Exponent stored at index `0`.
    Returns:
        None.
    Assumptions:
        `exponent * log10(2)` is never an integer for non-zero exponents, so the
        float ceiling is reliable for every supported exponent.
    Raises:
        RuntimeError: If any entry disagrees with the float computation.
    Side Effects:
        None.
    """
    log10_2 = math.log10(2)
    for index, actual in enumerate(table.tolist()):
        exponent = min_exponent + index
        expected = max(0, math.ceil(exponent * log10_2))
        if actual != expected:
            raise RuntimeError(
                f"extra digits table mismatch at exponent {exponent}: "
                f"fixed-point={actual}, log10={expected}"
            )
