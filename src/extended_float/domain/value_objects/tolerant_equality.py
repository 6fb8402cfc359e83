"""
Magnitude-scaled tolerant equality and the ordering derived from it.

Equality is reflexive and symmetric but not transitive: chains of values each
within tolerance of the next may drift apart. Ordering treats tolerant-equal
values as equal and falls back to raw numeric comparison otherwise.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.domain.value_objects.extended_float,
  extended_float.domain.policies.ieee_float_policy
"""

from __future__ import annotations

import math
from typing import Any


def tolerant_eq(left: float, right: float, epsilon: float) -> bool:
    """
    Compare two raw floats with absolute-then-relative tolerance.

    Args:
        left: First raw value.
        right: Second raw value.
        epsilon: Width epsilon.
    Returns:
        bool: True when values are identical, within `epsilon` absolutely, or
        within `epsilon * min(|left|, |right|)` relatively.
    Assumptions:
        NaN never compares equal, even to itself; it only reaches this function
        through unchecked construction.
    Raises:
        None.
    Side Effects:
        None.
    """
    if left == right:
        return True
    if math.isnan(left) or math.isnan(right):
        return False

    abs_diff = abs(left - right)
    if abs_diff <= epsilon:
        return True
    return abs_diff < epsilon * min(abs(left), abs(right))


def tolerant_compare(left: float, right: float, epsilon: float) -> int:
    """
    Three-way comparison consistent with `tolerant_eq`.

    Args:
        left: First raw value.
        right: Second raw value.
        epsilon: Width epsilon.
    Returns:
        int: `0` when tolerant-equal, `1` when `left > right`, `-1` otherwise.
    Assumptions:
        Inputs are finite for safely constructed values.
    Raises:
        None.
    Side Effects:
        None.
    """
    if tolerant_eq(left, right, epsilon):
        return 0
    if left > right:
        return 1
    return -1


def equal_option(left: Any | None, right: Any | None) -> bool:
    """
    Equality over optional values: two `None` are equal, `None` never equals a value.

    Args:
        left: Optional validated value.
        right: Optional validated value.
    Returns:
        bool: Tolerant equality when both are present.
    Assumptions:
        Present values are of the same width class.
    Raises:
        None.
    Side Effects:
        None.
    """
    if left is None or right is None:
        return left is None and right is None
    return bool(left == right)
