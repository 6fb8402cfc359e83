from .kernels import invalid_mask, is_invalid, lookup_precision
from .warmup import (
    ExtendedFloatWarmupRunner,
    apply_numba_runtime_config,
    prepare_numba_cache_dir,
)

__all__ = [
    "ExtendedFloatWarmupRunner",
    "apply_numba_runtime_config",
    "invalid_mask",
    "is_invalid",
    "lookup_precision",
    "prepare_numba_cache_dir",
]
