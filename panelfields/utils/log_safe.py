"""
Log-safe rendering of large payloads (form data, field updates, graphs).
Converts to string, trims if too long; on failure returns a placeholder.
"""

import json
from typing import Any, Optional

PLACEHOLDER = "<unserializable>"


def _trim(s: str, max_string_len: int, words_around: int) -> str:
    if len(s) <= max_string_len:
        return s
    words = s.split()
    first = " ".join(words[:words_around]) if words else ""
    last = " ".join(words[-words_around:]) if words else ""
    result = f"{first}...<len={len(s)}>...{last}"
    # Minified JSON has no spaces, word trim returns the full string; fall back to char trim
    if len(result) > max_string_len:
        suffix = f"...<len={len(s)}>..."
        half = max(0, (max_string_len - len(suffix)) // 2)
        result = f"{s[:half]}{suffix}{s[-half:]}"
    return result


def _default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def log_safe_output(
    data: Any,
    max_string_len: Optional[int] = None,
    words_around: int = 20,
) -> str:
    """
    Produce a log-safe string: trim long strings, or try to stringify then trim.
    Objects exposing to_dict() (FieldUpdate) are rendered through it.
    On conversion failure returns a fixed placeholder. Does not mutate the original.
    """
    if max_string_len is None:
        from ..settings import panel_fields_settings
        max_string_len = panel_fields_settings.LOG_MAX_STRING_LEN

    if isinstance(data, str):
        return _trim(data, max_string_len, words_around)

    try:
        if isinstance(data, (dict, list)) or hasattr(data, "to_dict"):
            s = json.dumps(data, default=_default, sort_keys=False)
        else:
            s = str(data)
        return _trim(s, max_string_len, words_around)
    except (TypeError, ValueError):
        return PLACEHOLDER
