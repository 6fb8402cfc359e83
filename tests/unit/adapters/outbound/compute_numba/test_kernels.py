from __future__ import annotations

import math

import numpy as np

from extended_float.adapters.outbound.compute_numba import (
    invalid_mask,
    is_invalid,
    lookup_precision,
)
from extended_float.domain.policies import FLOAT32_POLICY, FLOAT64_POLICY


def test_is_invalid_flags_nan_and_infinity() -> None:
    assert is_invalid(math.nan)
    assert is_invalid(math.inf)
    assert is_invalid(-math.inf)
    assert not is_invalid(0.0)
    assert not is_invalid(1e308)


def test_invalid_mask_matches_scalar_check_for_both_widths() -> None:
    """
    Verify mask kernel marks exactly non-finite entries in float64 and float32 arrays.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Kernel is compiled separately per dtype.
    Raises:
        AssertionError: If mask differs from `np.isfinite`.
    Side Effects:
        None.
    """
    wide = np.array([0.0, math.nan, 1.5, math.inf, -math.inf, -2.0], dtype=np.float64)
    narrow = np.array([0.0, math.nan, 3e38, math.inf], dtype=np.float32)

    assert invalid_mask(wide).tolist() == (~np.isfinite(wide)).tolist()
    assert invalid_mask(narrow).tolist() == [False, True, False, True]
    assert invalid_mask(np.empty(0, dtype=np.float64)).shape == (0,)


def test_lookup_precision_matches_policy_precision() -> None:
    """
    Verify kernel lookup agrees with scalar policy precision, including fallbacks.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Zero and subnormals fall outside the table and use the full digit budget.
    Raises:
        AssertionError: If vectorized and scalar paths disagree.
    Side Effects:
        None.
    """
    for policy, values in (
        (FLOAT64_POLICY, [0.0, 5e-324, 0.5, 1.0, 1234.56, 1e15, 1e300, -7.25]),
        (FLOAT32_POLICY, [0.0, 0.5, 1.0, 1234.5, 9.5e5, -7.25]),
    ):
        raws = policy.coerce_array(values)
        precisions = lookup_precision(
            policy.exponent_array(raws),
            policy.precision_table,
            policy.min_exponent,
            policy.decimal_precision_digits,
        )
        assert precisions.dtype == np.int64
        assert precisions.tolist() == [policy.precision(raw) for raw in raws.tolist()]
