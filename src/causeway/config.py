"""
Runtime configuration for causeway.

Settings are read from environment variables:
- CAUSEWAY_LIB_TRACE: Enable trace capture for reports ("0" disables)
- CAUSEWAY_TRACE: Fallback for CAUSEWAY_LIB_TRACE
- CAUSEWAY_MAX_CHAIN_DEPTH: Maximum number of cause links rendered (default: 256)

The environment is read once and cached; call ``get_settings.cache_clear()``
to pick up changes.
"""

import os
import sys
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_MAX_CHAIN_DEPTH = 256


@dataclass(frozen=True)
class Settings:
    """Resolved causeway configuration"""
    capture_trace: bool = False
    max_chain_depth: int = DEFAULT_MAX_CHAIN_DEPTH

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Returns:
            Settings instance
        """
        return cls(
            capture_trace=_trace_enabled(),
            max_chain_depth=_max_chain_depth(),
        )


def _trace_enabled() -> bool:
    # The library-specific variable wins over the general one
    value = os.getenv("CAUSEWAY_LIB_TRACE")
    if value is None:
        value = os.getenv("CAUSEWAY_TRACE")
    if value is None:
        return False
    return value.strip() != "0"


def _max_chain_depth() -> int:
    raw = os.getenv("CAUSEWAY_MAX_CHAIN_DEPTH")
    if raw is None:
        return DEFAULT_MAX_CHAIN_DEPTH

    try:
        depth = int(raw)
    except ValueError:
        depth = 0

    if depth < 1:
        sys.stderr.write(
            f"Warning: Invalid CAUSEWAY_MAX_CHAIN_DEPTH '{raw}', "
            f"defaulting to {DEFAULT_MAX_CHAIN_DEPTH}\n"
        )
        return DEFAULT_MAX_CHAIN_DEPTH

    return depth


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get the process-wide settings, reading the environment on first use.

    Returns:
        Cached Settings instance
    """
    return Settings.from_env()
