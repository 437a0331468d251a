"""Runtime settings for nbstats.

Values here are module-level defaults. Any of them can be overridden by an
environment variable of the same name, which keeps the CLI deterministic in
tests (set the variable) without a config file.
"""

import os
from typing import Optional

# Logging level name used by the CLI when -v is not given
NBSTATS_LOG_LEVEL = "WARNING"

# Reader chunk size in bytes
NBSTATS_CHUNK_SIZE = 64 * 1024

# Starting capacity of the scratch and value buffers (they double when full)
NBSTATS_INITIAL_CAPACITY = 4

# Width of a full bar in the text chart: 0-50% scale uses 1.25% per cell,
# 0-100% scale uses 2.5% per cell
BAR_WIDTH_50 = 40

# Upper bounds (exclusive) on the NB deviation for each conformance level
CONFORMANCE_THRESHOLDS = {
    "very_strong": 0.1,
    "strong": 0.2,
    "moderate": 0.35,
    "weak": 0.5,
}

__all__ = [
    "NBSTATS_LOG_LEVEL",
    "NBSTATS_CHUNK_SIZE",
    "NBSTATS_INITIAL_CAPACITY",
    "BAR_WIDTH_50",
    "CONFORMANCE_THRESHOLDS",
    "get_setting",
    "get_int_setting",
]


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Resolve a setting with the following precedence:

    - If an environment variable with the given name exists and is non-empty,
      return its value.
    - Otherwise return the module-level constant (if any).
    - Otherwise return ``default``.
    """
    if name in os.environ:
        v = os.environ.get(name)
        if v:
            return v
    val = globals().get(name)
    if val is not None:
        return str(val)
    return default


def get_int_setting(name: str, default: int, minimum: Optional[int] = None) -> int:
    """Integer flavour of :func:`get_setting`; falls back to default on bad values.

    When ``minimum`` is given the result is clamped to at least that value.
    """
    raw = get_setting(name)
    try:
        value = default if raw is None else int(raw)
    except ValueError:
        value = default
    if minimum is not None:
        value = max(minimum, value)
    return value
