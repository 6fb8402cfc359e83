"""
64-bit (binary64) float width constants.

Docs: docs/architecture/extended-float-v1.md
Related: .ieee_float_policy, ..value_objects.extended_float
"""

from __future__ import annotations

from typing import Final

import numpy as np

from .ieee_float_policy import IeeeFloatPolicy

# Smallest difference treated as meaningful; also the zero-detection radius.
EPSILON: Final[float] = 1.0e-12
# Magnitudes above this are rendered as-is, without precision handling.
DECIMAL_PRECISION_THRESHOLD: Final[float] = 1e15
# binary64 carries 15-17 significant digits; 15 keeps output consistent.
DECIMAL_PRECISION_DIGITS: Final[int] = 15


def _render_float64(value: float) -> str:
    return repr(float(value))


FLOAT64_POLICY: Final[IeeeFloatPolicy] = IeeeFloatPolicy(
    name="f64",
    float_dtype=np.float64,
    bits_dtype=np.uint64,
    exponent_bits=11,
    mantissa_bits=52,
    epsilon=EPSILON,
    decimal_precision_threshold=DECIMAL_PRECISION_THRESHOLD,
    decimal_precision_digits=DECIMAL_PRECISION_DIGITS,
    render_default=_render_float64,
)
