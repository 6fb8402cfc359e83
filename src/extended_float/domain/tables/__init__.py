from .lookup import (
    build_extra_digits_table,
    build_precision_table,
    extra_digits_for_exponent,
    precision_for_extra_digits,
    verify_extra_digits_table,
)

__all__ = [
    "build_extra_digits_table",
    "build_precision_table",
    "extra_digits_for_exponent",
    "precision_for_extra_digits",
    "verify_extra_digits_table",
]
