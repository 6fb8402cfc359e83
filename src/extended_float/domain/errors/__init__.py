from .from_string_error import FromStringError
from .invalid_float_error import InvalidFloatError, InvalidKind

__all__ = [
    "FromStringError",
    "InvalidFloatError",
    "InvalidKind",
]
