"""
Environment variable loading for Lyra Pulse.

- Loads .env from the project root when available.
- Typed readers for the LYRA_* overrides; malformed values raise
  InvalidConfiguration instead of falling back silently.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from lyra_pulse.core.exceptions import InvalidConfiguration

# Project root: config is lyra_pulse/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def load_pulse_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides set variables."""
    load_dotenv(_ENV_PATH, override=False)


def _raw(name: str) -> str:
    return (os.getenv(name) or "").strip()


def get_float_env(name: str, default: float) -> float:
    raw = _raw(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be a number, got {raw!r}", variable=name, value=raw) from None


def get_optional_float_env(name: str) -> float | None:
    """Return the float value of name, or None when unset."""
    if not _raw(name):
        return None
    return get_float_env(name, 0.0)


def get_int_env(name: str, default: int) -> int:
    raw = _raw(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}", variable=name, value=raw) from None


def get_bool_env(name: str, default: bool) -> bool:
    raw = _raw(name).lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise InvalidConfiguration(f"{name} must be a boolean flag, got {raw!r}", variable=name, value=raw)


def get_str_env(name: str, default: str) -> str:
    return _raw(name) or default
