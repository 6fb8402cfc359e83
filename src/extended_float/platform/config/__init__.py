from .extended_float_runtime import (
    ALLOWED_WIDTHS,
    ExtendedFloatRuntimeConfig,
    load_extended_float_runtime_config,
)

__all__ = [
    "ALLOWED_WIDTHS",
    "ExtendedFloatRuntimeConfig",
    "load_extended_float_runtime_config",
]
