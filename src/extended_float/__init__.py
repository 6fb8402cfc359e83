"""
extended-float: finite-only floats with tolerant equality and faithful formatting.

This package re-exports the public surface so callers can import from one place:

    from extended_float import ExtendedFloat, InvalidFloatError, InvalidKind
"""

from .domain.errors import FromStringError, InvalidFloatError, InvalidKind
from .domain.policies import FLOAT32_POLICY, FLOAT64_POLICY, FloatPolicy
from .domain.value_objects import (
    BaseExtendedFloat,
    ExtendedFloat,
    ExtendedFloat32,
    equal_option,
)

__all__ = [
    "FLOAT32_POLICY",
    "FLOAT64_POLICY",
    "BaseExtendedFloat",
    "ExtendedFloat",
    "ExtendedFloat32",
    "FloatPolicy",
    "FromStringError",
    "InvalidFloatError",
    "InvalidKind",
    "equal_option",
]
