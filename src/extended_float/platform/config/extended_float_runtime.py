"""
Runtime config loader for extended-float bulk services and CLI.

Docs: docs/architecture/extended-float-v1.md
Related: extended_float.adapters.outbound.compute_numba.warmup,
  apps.cli.commands.format_prices
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

_ENV_NAME_KEY = "EXTENDED_FLOAT_ENV"
_CONFIG_PATH_KEY = "EXTENDED_FLOAT_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")
_SECTION_KEY = "extended_float"

_WIDTH_ENV_KEYS = ("EXTENDED_FLOAT_WIDTH",)
_SKIP_INVALID_ENV_KEYS = ("EXTENDED_FLOAT_SKIP_INVALID",)
_CACHE_DIR_ENV_KEYS = ("EXTENDED_FLOAT_NUMBA_CACHE_DIR", "NUMBA_CACHE_DIR")

ALLOWED_WIDTHS = ("f64", "f32")
_TRUE_LITERALS = ("1", "true", "yes", "on")
_FALSE_LITERALS = ("0", "false", "no", "off")

_DEFAULT_WIDTH = "f64"
_DEFAULT_SKIP_INVALID = False
_DEFAULT_NUMBA_CACHE_DIR = Path(".cache/numba")


@dataclass(frozen=True, slots=True)
class ExtendedFloatRuntimeConfig:
    """
    Immutable runtime config for bulk ingestion, formatting and the CLI.

    Docs: docs/architecture/extended-float-v1.md
    Related: extended_float.application.services.bulk_ingest,
      extended_float.adapters.outbound.compute_numba.warmup
    """

    width: str = _DEFAULT_WIDTH
    skip_invalid: bool = _DEFAULT_SKIP_INVALID
    numba_cache_dir: Path = _DEFAULT_NUMBA_CACHE_DIR

    def __post_init__(self) -> None:
        """
        Validate runtime config invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Width name is case-insensitive on input and stored in lowercase.
        Raises:
            ValueError: If width is unknown or cache dir is blank.
        Side Effects:
            Normalizes width and cache directory path.
        """
        normalized_width = self.width.strip().lower()
        if normalized_width not in ALLOWED_WIDTHS:
            raise ValueError(
                f"width must be one of {ALLOWED_WIDTHS}, got {self.width!r}"
            )
        if not str(self.numba_cache_dir).strip():
            raise ValueError("numba_cache_dir must be a non-empty path")
        object.__setattr__(self, "width", normalized_width)
        object.__setattr__(self, "numba_cache_dir", Path(self.numba_cache_dir))


def load_extended_float_runtime_config(
    *,
    environ: Mapping[str, str],
) -> ExtendedFloatRuntimeConfig:
    """
    Load runtime config from YAML and env overrides.

    Args:
        environ: Environment mapping used to resolve env and override values.
    Returns:
        ExtendedFloatRuntimeConfig: Validated runtime settings.
    Assumptions:
        Optional `extended_float` section lives at YAML top-level.
    Raises:
        FileNotFoundError: If YAML path does not exist.
        ValueError: If YAML or environment values are invalid.
    Side Effects:
        Reads one YAML file from disk.
    """
    config_path = _resolve_config_path(environ=environ)
    payload = _load_section_payload(path=config_path)

    width = _resolve_str_setting(
        environ=environ,
        env_keys=_WIDTH_ENV_KEYS,
        payload=payload,
        payload_key="width",
        default=_DEFAULT_WIDTH,
    )
    skip_invalid = _resolve_bool_setting(
        environ=environ,
        env_keys=_SKIP_INVALID_ENV_KEYS,
        payload=payload,
        payload_key="skip_invalid",
        default=_DEFAULT_SKIP_INVALID,
    )
    numba_cache_dir = Path(
        _resolve_str_setting(
            environ=environ,
            env_keys=_CACHE_DIR_ENV_KEYS,
            payload=payload,
            payload_key="numba_cache_dir",
            default=str(_DEFAULT_NUMBA_CACHE_DIR),
        )
    )

    return ExtendedFloatRuntimeConfig(
        width=width,
        skip_invalid=skip_invalid,
        numba_cache_dir=numba_cache_dir,
    )


def _resolve_config_path(*, environ: Mapping[str, str]) -> Path:
    """
    Resolve YAML path using explicit override or `EXTENDED_FLOAT_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        Path: Config YAML path.
    Assumptions:
        `EXTENDED_FLOAT_CONFIG` has priority over env-derived path.
    Raises:
        ValueError: If env name is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_CONFIG_PATH_KEY, "").strip()
    if override:
        return Path(override)

    raw_env = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}"
        )
    return Path("configs") / raw_env / "extended_float.yaml"


def _load_section_payload(*, path: Path) -> Mapping[str, Any]:
    """
    Load optional `extended_float` mapping from YAML.

    Args:
        path: Config path.
    Returns:
        Mapping[str, Any]: Section mapping, or empty mapping when absent.
    Assumptions:
        Unknown keys are ignored by this loader.
    Raises:
        FileNotFoundError: If YAML path does not exist.
        ValueError: If YAML structure is invalid.
    Side Effects:
        Reads one UTF-8 file from disk.
    """
    if not path.exists():
        raise FileNotFoundError(f"extended-float config not found: {path}")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("extended-float config must be a mapping at top-level")

    section = raw.get(_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"{_SECTION_KEY} section must be a mapping")
    return section


def _resolve_str_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: str,
) -> str:
    """
    Resolve non-empty string setting from env -> payload -> default precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority.
        payload: Parsed YAML section.
        payload_key: YAML key name.
        default: Fallback default value.
    Returns:
        str: Resolved stripped value.
    Assumptions:
        Blank env values are treated as unset.
    Raises:
        ValueError: If YAML value is not a non-empty string.
    Side Effects:
        None.
    """
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return raw

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default
    if not isinstance(payload_value, str):
        raise ValueError(
            f"expected string for {_SECTION_KEY}.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    normalized = payload_value.strip()
    if not normalized:
        raise ValueError(f"{_SECTION_KEY}.{payload_key} must be non-empty")
    return normalized


def _resolve_bool_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: bool,
) -> bool:
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return _parse_bool(raw, key=env_key)

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default
    if not isinstance(payload_value, bool):
        raise ValueError(
            f"expected bool for {_SECTION_KEY}.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    return payload_value


def _parse_bool(raw: str, *, key: str) -> bool:
    """
    Parse boolean flag from environment string.

    Args:
        raw: Raw env string.
        key: Env key name for diagnostics.
    Returns:
        bool: Parsed flag.
    Assumptions:
        Input value is stripped before parsing; comparison is case-insensitive.
    Raises:
        ValueError: If value is not a recognized boolean literal.
    Side Effects:
        None.
    """
    normalized = raw.lower()
    if normalized in _TRUE_LITERALS:
        return True
    if normalized in _FALSE_LITERALS:
        return False
    raise ValueError(f"{key} must be a boolean literal, got {raw!r}")
