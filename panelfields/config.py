"""
Environment overrides for panelfields defaults.

Variables are read as PANEL_FIELDS_<NAME>, e.g. PANEL_FIELDS_CHECK_CYCLES=false.
"""
import os
from typing import List, Optional

ENV_PREFIX = 'PANEL_FIELDS_'


def _raw(name: str) -> Optional[str]:
    return os.environ.get(f"{ENV_PREFIX}{name}")


def get_env_list(name: str, default: List[str]) -> List[str]:
    """Comma-separated list; blank items are dropped."""
    value = _raw(name)
    if value is None:
        return list(default)
    return [item.strip() for item in value.split(',') if item.strip()]


def get_env_bool(name: str, default: bool) -> bool:
    value = _raw(name)
    if value is None:
        return default
    return value.strip().lower() in ('true', '1', 'yes', 'on')


def get_env_int(name: str, default: int) -> int:
    """Integer value; falls back to `default` when unset or not a number."""
    value = _raw(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default
