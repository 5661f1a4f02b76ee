"""
Server Configuration
=====================
Listen address, log level and seeding switch, read from the environment.

Environment:
    TASKAPI_HOST       — bind address (default 0.0.0.0)
    TASKAPI_PORT       — TCP port (default 8080)
    TASKAPI_LOG_LEVEL  — DEBUG / INFO / WARNING / ERROR (default INFO)
    TASKAPI_SEED       — load fixture tasks at startup (default true)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

ENV_PREFIX = "TASKAPI"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"


def _env(suffix: str, default: str = "") -> str:
    v = os.environ.get(f"{ENV_PREFIX}_{suffix}")
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(suffix: str, default: int) -> int:
    try:
        return int(_env(suffix, str(default)))
    except ValueError:
        return default


def _env_bool(suffix: str, default: bool) -> bool:
    raw = _env(suffix)
    if not raw:
        return default
    return raw.lower() in {"1", "true", "yes", "y", "on"}


@dataclass(frozen=True)
class ServerConfig:
    """Runtime settings for the task API server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    seed: bool = True           # Load FIXTURE_TASKS into a fresh store

    @classmethod
    def from_env(cls) -> ServerConfig:
        port = _env_int("PORT", DEFAULT_PORT)
        if not 0 < port < 65536:
            port = DEFAULT_PORT
        return cls(
            host=_env("HOST", DEFAULT_HOST),
            port=port,
            log_level=_env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            seed=_env_bool("SEED", True),
        )

    def override(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        log_level: Optional[str] = None,
        seed: Optional[bool] = None,
    ) -> ServerConfig:
        """Copy with the given (non-None) fields replaced, e.g. from CLI flags."""
        changes = {}
        if host:
            changes["host"] = host
        if port is not None:
            changes["port"] = port
        if log_level:
            changes["log_level"] = log_level.upper()
        if seed is not None:
            changes["seed"] = seed
        return replace(self, **changes)
