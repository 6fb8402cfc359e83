"""
Numba kernels for bulk validation and precision lookup of float arrays.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.application.services.bulk_ingest,
  extended_float.application.services.bulk_format,
  extended_float.adapters.outbound.compute_numba.warmup
"""

from __future__ import annotations

import math

import numba as nb
import numpy as np


@nb.njit(cache=True)
def is_invalid(value: float) -> bool:
    """
    Return whether the provided scalar is NaN or infinite.

    Args:
        value: Floating-point scalar.
    Returns:
        bool: True when value cannot become a validated float.
    Assumptions:
        Works for float32 and float64 scalars.
    Raises:
        None.
    Side Effects:
        None.
    """
    return math.isnan(value) or math.isinf(value)


@nb.njit(cache=True)
def invalid_mask(values: np.ndarray) -> np.ndarray:
    """
    Mark NaN/infinite entries of a one-dimensional float array.

    Args:
        values: One-dimensional `float32` or `float64` array.
    Returns:
        np.ndarray: Boolean array, True for entries that fail validation.
    Assumptions:
        Input array is one-dimensional.
    Raises:
        None.
    Side Effects:
        Allocates the output mask.
    """
    out = np.zeros(values.shape[0], dtype=np.bool_)
    for index in range(values.shape[0]):
        out[index] = is_invalid(values[index])
    return out


@nb.njit(cache=True)
def lookup_precision(
    exponents: np.ndarray,
    precision_table: np.ndarray,
    min_exponent: int,
    fallback_precision: int,
) -> np.ndarray:
    """
    Map unbiased binary exponents to fractional precision via the width table.

    Args:
        exponents: One-dimensional int64 unbiased exponents.
        precision_table: Width precision table indexed by `exponent - min_exponent`.
        min_exponent: Exponent stored at table index `0`.
        fallback_precision: Precision for exponents outside the table (zero,
            subnormals, inf/NaN encodings).
    Returns:
        np.ndarray: int64 precision per exponent.
    Assumptions:
        Table is read-only and shared; the kernel never writes to it.
    Raises:
        None.
    Side Effects:
        Allocates the output array.
    """
    size = precision_table.shape[0]
    out = np.empty(exponents.shape[0], dtype=np.int64)
    for index in range(exponents.shape[0]):
        table_index = exponents[index] - min_exponent
        if table_index < 0 or table_index >= size:
            out[index] = fallback_precision
        else:
            out[index] = precision_table[table_index]
    return out
