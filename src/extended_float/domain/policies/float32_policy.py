"""
32-bit (binary32) float width constants.

Docs: docs/architecture/extended-float-v1.md
Related: .ieee_float_policy, ..value_objects.extended_float
"""

from __future__ import annotations

from typing import Final

import numpy as np

from .ieee_float_policy import IeeeFloatPolicy

# Stored float32-rounded so zero detection agrees with float32 inputs.
EPSILON: Final[float] = float(np.float32(1.0e-5))
DECIMAL_PRECISION_THRESHOLD: Final[float] = 1e6
# binary32 carries 6-9 significant digits.
DECIMAL_PRECISION_DIGITS: Final[int] = 6


def _render_float32(value: float) -> str:
    return str(np.float32(value))


FLOAT32_POLICY: Final[IeeeFloatPolicy] = IeeeFloatPolicy(
    name="f32",
    float_dtype=np.float32,
    bits_dtype=np.uint32,
    exponent_bits=8,
    mantissa_bits=23,
    epsilon=EPSILON,
    decimal_precision_threshold=DECIMAL_PRECISION_THRESHOLD,
    decimal_precision_digits=DECIMAL_PRECISION_DIGITS,
    render_default=_render_float32,
)
