"""
Numba cache configuration and warmup runner for extended-float kernels.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.adapters.outbound.compute_numba.kernels,
  extended_float.platform.config.extended_float_runtime
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path

import numba
import numpy as np

from extended_float.adapters.outbound.compute_numba.kernels import (
    invalid_mask,
    lookup_precision,
)
from extended_float.domain.policies import FLOAT32_POLICY, FLOAT64_POLICY
from extended_float.platform.config import ExtendedFloatRuntimeConfig

log = logging.getLogger(__name__)


def apply_numba_runtime_config(*, config: ExtendedFloatRuntimeConfig) -> Path:
    """
    Route cached kernel binaries to the configured directory.

    Args:
        config: Validated runtime config.
    Returns:
        Path: Absolute cache directory now used by numba.
    Assumptions:
        Called before the first kernel compiles in this process.
    Raises:
        ValueError: If the directory cannot hold cache files.
    Side Effects:
        Sets `NUMBA_CACHE_DIR` for child processes and `numba.config.CACHE_DIR`
        for this one.
    """
    cache_dir = prepare_numba_cache_dir(config.numba_cache_dir)
    os.environ["NUMBA_CACHE_DIR"] = str(cache_dir)
    numba.config.CACHE_DIR = str(cache_dir)
    return cache_dir


def prepare_numba_cache_dir(path: Path) -> Path:
    """
    Create cache directory if needed and check it accepts new files.

    Args:
        path: Configured cache directory, relative to the working directory or absolute.
    Returns:
        Path: Absolute directory path.
    Assumptions:
        Write plus search permission is enough for numba to create index files.
    Raises:
        ValueError: If path is an existing file or the directory is read-only.
    Side Effects:
        Creates missing parent directories.
    """
    cache_dir = Path(path).absolute()
    if cache_dir.exists() and not cache_dir.is_dir():
        raise ValueError(f"numba cache path is not a directory: {cache_dir}")
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as error:
        raise ValueError(f"cannot create numba cache dir: {cache_dir}") from error
    if not os.access(cache_dir, os.W_OK | os.X_OK):
        raise ValueError(f"numba cache dir is not writable: {cache_dir}")
    return cache_dir


class ExtendedFloatWarmupRunner:
    """
    Idempotent warmup runner compiling bulk kernels for both float widths.

    Docs: docs/architecture/extended-float-v1.md
    Related: .kernels, extended_float.application.services.bulk_ingest
    """

    def __init__(self, *, config: ExtendedFloatRuntimeConfig) -> None:
        self._config = config
        self._is_warm = False

    @property
    def is_warm(self) -> bool:
        return self._is_warm

    def warmup(self) -> None:
        """
        Apply cache config and eagerly compile kernels before concurrent use.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Warmup inputs are deterministic and tiny.
        Raises:
            ValueError: If cache directory cannot be used.
        Side Effects:
            JIT-compiles numba kernels and emits one structured log message.
        """
        if self._is_warm:
            return

        started = time.perf_counter()
        cache_dir = apply_numba_runtime_config(config=self._config)
        for policy in (FLOAT64_POLICY, FLOAT32_POLICY):
            sample = np.array([0.0, 1.5, -2.25], dtype=policy.float_dtype)
            _ = invalid_mask(sample)
            _ = lookup_precision(
                policy.exponent_array(sample),
                policy.precision_table,
                policy.min_exponent,
                policy.decimal_precision_digits,
            )
        elapsed_seconds = time.perf_counter() - started
        log.info(
            "extended_float warmup complete",
            extra={
                "warmup_done": True,
                "warmup_seconds": round(elapsed_seconds, 6),
                "numba_cache_dir": str(cache_dir),
                "kernels": ["invalid_mask", "lookup_precision"],
            },
        )
        self._is_warm = True
