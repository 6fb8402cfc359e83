from __future__ import annotations

from typing import Protocol

import numpy as np


class FloatPolicy(Protocol):
    """
    FloatPolicy — capability contract of one IEEE binary float width.

    Docs: docs/architecture/extended-float-v1.md
    Related: .ieee_float_policy, ..value_objects.extended_float,
      ..value_objects.faithful_format
    """

    name: str
    epsilon: float
    decimal_precision_threshold: float
    decimal_precision_digits: int
    min_exponent: int
    max_exponent: int
    precision_table: np.ndarray

    def exponent(self, value: float) -> int:
        ...

    def exponent_array(self, values: np.ndarray) -> np.ndarray:
        ...

    def extra_digits(self, value: float) -> int:
        ...

    def precision(self, value: float) -> int:
        ...

    def coerce(self, value: float) -> float:
        ...

    def coerce_literal(self, text: str, raw: float) -> float:
        ...

    def coerce_array(self, values: object) -> np.ndarray:
        ...

    def default_repr(self, value: float) -> str:
        ...
