"""
Bulk faithful formatting using the numba precision-lookup kernel.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.domain.value_objects.faithful_format,
  extended_float.adapters.outbound.compute_numba.kernels
"""

from __future__ import annotations

from typing import Sequence

from extended_float.adapters.outbound.compute_numba import lookup_precision
from extended_float.domain.value_objects import BaseExtendedFloat, format_float_with_precision


def format_values(values: Sequence[BaseExtendedFloat]) -> list[str]:
    """
    Render many values of one width; output equals `str(value)` per element.

    Args:
        values: Validated values sharing one concrete width class.
    Returns:
        list[str]: Faithful renderings in input order.
    Assumptions:
        Precision for the whole batch is looked up in one kernel call.
    Raises:
        TypeError: If values mix width classes.
    Side Effects:
        None.
    """
    if not values:
        return []

    value_type = type(values[0])
    for value in values:
        if type(value) is not value_type:
            raise TypeError(
                f"format_values expects one width, got {value_type.__name__} "
                f"and {type(value).__name__}"
            )

    policy = value_type.policy
    raws = policy.coerce_array([value.downgrade() for value in values])
    precisions = lookup_precision(
        policy.exponent_array(raws),
        policy.precision_table,
        policy.min_exponent,
        policy.decimal_precision_digits,
    )
    return [
        format_float_with_precision(raw, precision, policy)
        for raw, precision in zip(raws.tolist(), precisions.tolist())
    ]
