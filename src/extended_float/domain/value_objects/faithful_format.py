"""
Shortest faithful decimal rendering of validated floats.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.domain.policies.ieee_float_policy,
  extended_float.application.services.bulk_format
"""

from __future__ import annotations

from extended_float.domain.policies import FloatPolicy


def format_float(value: float, policy: FloatPolicy) -> str:
    """
    Render value with exactly the digits its magnitude makes trustworthy.

    Args:
        value: Raw value of the policy's width.
        policy: Width policy providing epsilon, threshold and precision.
    Returns:
        str: `"0"` near zero, platform default above threshold, otherwise the
        fixed-point rendering with trailing zeros removed.
    Assumptions:
        Value was validated on construction.
    Raises:
        None.
    Side Effects:
        None.
    """
    return format_float_with_precision(value, policy.precision(value), policy)


def format_float_with_precision(value: float, precision: int, policy: FloatPolicy) -> str:
    """
    Same as `format_float` with an already computed fractional precision.

    Args:
        value: Raw value of the policy's width.
        precision: Fractional digits for the value's exponent.
        policy: Width policy.
    Returns:
        str: Faithful decimal rendering.
    Assumptions:
        `precision` equals `policy.precision(value)`.
    Raises:
        None.
    Side Effects:
        None.
    """
    magnitude = abs(value)
    if magnitude <= policy.epsilon:
        return "0"

    # Errors above the threshold live in the integer part and must not be rounded away.
    if magnitude > policy.decimal_precision_threshold:
        return policy.default_repr(value)

    rendered = f"{value:.{precision}f}"
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered
