"""
Validated float value objects.

    from extended_float.domain.value_objects import ExtendedFloat, ExtendedFloat32
"""

from .extended_float import BaseExtendedFloat, ExtendedFloat, ExtendedFloat32, classify_invalid
from .faithful_format import format_float, format_float_with_precision
from .float_text import parse_raw_float
from .tolerant_equality import equal_option, tolerant_compare, tolerant_eq

__all__ = [
    "BaseExtendedFloat",
    "ExtendedFloat",
    "ExtendedFloat32",
    "classify_invalid",
    "equal_option",
    "format_float",
    "format_float_with_precision",
    "parse_raw_float",
    "tolerant_compare",
    "tolerant_eq",
]
