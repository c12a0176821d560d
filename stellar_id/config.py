"""
Environment-driven settings.

Environment Variables:
    STELLAR_ID_CACHE_CAPACITY: Max cached hashes per generator - default: 1000
    STELLAR_ID_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    STELLAR_ID_LOG_FORMAT: Log format (json, text) - default: text
"""

import os
from dataclasses import dataclass
from typing import Optional

from .core.cache import DEFAULT_CACHE_CAPACITY


def _env_int(key: str) -> Optional[int]:
    val = os.getenv(key)
    if not val:
        return None
    try:
        parsed = int(val)
    except ValueError:
        return None
    return parsed if parsed > 0 else None


@dataclass(frozen=True)
class Settings:
    cache_capacity: int = DEFAULT_CACHE_CAPACITY
    log_level: str = "INFO"
    log_format: str = "text"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from STELLAR_ID_* variables; invalid values fall back to defaults."""
        return cls(
            cache_capacity=_env_int("STELLAR_ID_CACHE_CAPACITY") or DEFAULT_CACHE_CAPACITY,
            log_level=os.getenv("STELLAR_ID_LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("STELLAR_ID_LOG_FORMAT", "text").lower(),
        )
