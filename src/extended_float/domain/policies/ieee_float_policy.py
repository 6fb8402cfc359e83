"""
IEEE 754 binary layout policy shared by all supported float widths.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.domain.tables.lookup,
  extended_float.domain.policies.float64_policy,
  extended_float.domain.policies.float32_policy
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from fractions import Fraction
from typing import Callable

import numpy as np

from extended_float.domain.tables import (
    build_extra_digits_table,
    build_precision_table,
    precision_for_extra_digits,
    verify_extra_digits_table,
)


@dataclass(frozen=True, slots=True)
class IeeeFloatPolicy:
    """
    IeeeFloatPolicy — constants, bit layout and lookup tables of one float width.

    Docs: docs/architecture/extended-float-v1.md
    Related: .float_policy, ..tables.lookup, ..value_objects.extended_float
    """

    name: str
    float_dtype: type[np.floating]
    bits_dtype: type[np.unsignedinteger]
    exponent_bits: int
    mantissa_bits: int
    epsilon: float
    decimal_precision_threshold: float
    decimal_precision_digits: int
    render_default: Callable[[float], str]
    bias: int = field(init=False)
    min_exponent: int = field(init=False)
    max_exponent: int = field(init=False)
    extra_digits_table: np.ndarray = field(init=False, repr=False)
    precision_table: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """
        Validate layout and derive exponent range plus immutable lookup tables.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Sign bit + exponent field + mantissa field fill the integer view exactly.
        Raises:
            ValueError: If layout or digit budget is inconsistent.
            RuntimeError: If generated table fails the `log10` self-check.
        Side Effects:
            Populates derived frozen fields via `object.__setattr__`.
        """
        total_bits = np.dtype(self.bits_dtype).itemsize * 8
        if 1 + self.exponent_bits + self.mantissa_bits != total_bits:
            raise ValueError(
                f"{self.name}: 1 + {self.exponent_bits} + {self.mantissa_bits} "
                f"must equal {total_bits} bits"
            )
        if np.dtype(self.float_dtype).itemsize != np.dtype(self.bits_dtype).itemsize:
            raise ValueError(f"{self.name}: float and bits dtypes must have equal width")
        if self.epsilon <= 0.0:
            raise ValueError(f"{self.name}: epsilon must be > 0, got {self.epsilon}")

        bias = (1 << (self.exponent_bits - 1)) - 1
        # Biased 0 (zero/subnormal) and the all-ones field (inf/NaN) stay out of range.
        min_exponent = 1 - bias
        max_exponent = bias

        extra_digits_table = build_extra_digits_table(min_exponent, max_exponent)
        verify_extra_digits_table(extra_digits_table, min_exponent)
        precision_table = build_precision_table(
            extra_digits_table, self.decimal_precision_digits
        )

        object.__setattr__(self, "bias", bias)
        object.__setattr__(self, "min_exponent", min_exponent)
        object.__setattr__(self, "max_exponent", max_exponent)
        object.__setattr__(self, "extra_digits_table", extra_digits_table)
        object.__setattr__(self, "precision_table", precision_table)

    @property
    def exponent_mask(self) -> int:
        return (1 << self.exponent_bits) - 1

    def exponent(self, value: float) -> int:
        """
        Extract unbiased binary exponent from the value's bit pattern.

        Args:
            value: Number representable in (or rounded to) this width.
        Returns:
            int: `exponent_field - bias`; zero/subnormals give `min_exponent - 1`,
            inf/NaN give `max_exponent + 1`.
        Assumptions:
            Bits are read through a same-width unsigned integer view.
        Raises:
            None.
        Side Effects:
            None.
        """
        with np.errstate(over="ignore"):
            bits = int(self.float_dtype(value).view(self.bits_dtype))
        return ((bits >> self.mantissa_bits) & self.exponent_mask) - self.bias

    def exponent_array(self, values: np.ndarray) -> np.ndarray:
        """
        Vectorized `exponent` for bulk paths.

        Args:
            values: Array-like of numbers.
        Returns:
            np.ndarray: int64 unbiased exponents with the input shape.
        Assumptions:
            Input is coerced to this width before bits are read.
        Raises:
            None.
        Side Effects:
            None.
        """
        bits = self.coerce_array(values).view(self.bits_dtype)
        shift = self.bits_dtype(self.mantissa_bits)
        mask = self.bits_dtype(self.exponent_mask)
        return ((bits >> shift) & mask).astype(np.int64) - self.bias

    def extra_digits(self, value: float) -> int:
        exponent = self.exponent(value)
        if self.min_exponent <= exponent <= self.max_exponent:
            return int(self.extra_digits_table[exponent - self.min_exponent])
        return 0

    def precision(self, value: float) -> int:
        """
        Return trustworthy fractional digits for the value's magnitude.

        Args:
            value: Number representable in this width.
        Returns:
            int: Table entry for normal exponents; dynamic formula otherwise.
        Assumptions:
            Dynamic fallback uses the same formula as table generation.
        Raises:
            None.
        Side Effects:
            None.
        """
        exponent = self.exponent(value)
        if self.min_exponent <= exponent <= self.max_exponent:
            return int(self.precision_table[exponent - self.min_exponent])
        return precision_for_extra_digits(
            self.extra_digits(value), self.decimal_precision_digits
        )

    def coerce(self, value: float) -> float:
        """
        Round a Python number to this width and return it as `float`.

        Args:
            value: Any real number accepted by the numpy float dtype.
        Returns:
            float: Width-exact value; overflow becomes signed infinity.
        Assumptions:
            Overflow is reported by the caller's validation, not by numpy warnings.
        Raises:
            OverflowError: If an `int` is too large even for float64.
        Side Effects:
            None.
        """
        with np.errstate(over="ignore"):
            return float(self.float_dtype(value))

    def coerce_literal(self, text: str, raw: float) -> float:
        """
        Round a decimal literal to this width with a single rounding step.

        Args:
            text: Literal accepted by the float-text grammar.
            raw: `float(text)`, the literal correctly rounded to binary64.
        Returns:
            float: Width-exact value nearest to the literal, ties to even.
        Assumptions:
            Narrowing `raw` is off by at most one unit in the last place, so the
            nearest value is `raw` narrowed or one of its two neighbours.
        Raises:
            None.
        Side Effects:
            None.
        """
        narrowed = self.coerce(raw)
        if np.dtype(self.float_dtype).itemsize >= 8 or raw == 0.0 or not math.isfinite(raw):
            return narrowed

        exact = Fraction(Decimal(text))
        if math.isinf(narrowed):
            overflow_limit = Fraction(2) ** (self.max_exponent + 1) - Fraction(2) ** (
                self.max_exponent - self.mantissa_bits - 1
            )
            if abs(exact) >= overflow_limit:
                return narrowed
            narrowed = math.copysign(float(np.finfo(self.float_dtype).max), raw)

        best = narrowed
        best_error = abs(Fraction(narrowed) - exact)
        for target in (-np.inf, np.inf):
            with np.errstate(over="ignore"):
                candidate = float(
                    np.nextafter(self.float_dtype(narrowed), self.float_dtype(target))
                )
            if not math.isfinite(candidate):
                continue
            error = abs(Fraction(candidate) - exact)
            if error < best_error or (error == best_error and self._is_even(candidate)):
                best, best_error = candidate, error
        return best

    def _is_even(self, value: float) -> bool:
        return int(self.float_dtype(value).view(self.bits_dtype)) & 1 == 0

    def coerce_array(self, values: object) -> np.ndarray:
        with np.errstate(over="ignore"):
            return np.asarray(values, dtype=self.float_dtype)

    def default_repr(self, value: float) -> str:
        return self.render_default(value)