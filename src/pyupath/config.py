"""
Runtime settings, read from the environment.

- PYUPATH_LOG_LEVEL: logging level name for the CLI (default WARNING)
- PYUPATH_LOG_JSON: emit one JSON object per log line when truthy
- PYUPATH_PREVIEW_BYTES: bytes the inspector reads from a file (default 65536)
- PYUPATH_LIST_LIMIT: directory children the inspector prints (default 50)
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: negative, using %d", name, raw, default)
        return default
    return value


@dataclass
class Settings:
    log_level: str = "WARNING"
    log_json: bool = False
    preview_bytes: int = 64 * 1024
    list_limit: int = 50

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            log_level=env.get("PYUPATH_LOG_LEVEL", defaults.log_level).upper(),
            log_json=env.get("PYUPATH_LOG_JSON", "").strip().lower() in _TRUTHY,
            preview_bytes=_env_int(env, "PYUPATH_PREVIEW_BYTES", defaults.preview_bytes),
            list_limit=_env_int(env, "PYUPATH_LIST_LIMIT", defaults.list_limit),
        )
