"""Runtime settings for the validator, read from the environment.

A ``.env`` file in the working directory is consulted for ``HEIMDALLR_*``
keys only; it is never copied into ``os.environ``.
"""
from __future__ import annotations

import functools
import logging
import os
from typing import Mapping, Optional

import dotenv
from pydantic import BaseModel, field_validator

LOG_LEVEL_ENV = "HEIMDALLR_LOG_LEVEL"
LOG_DIR_ENV = "HEIMDALLR_LOG_DIR"
LOG_PROPAGATE_ENV = "HEIMDALLR_LOG_PROPAGATE"
TRACE_PACKETS_ENV = "HEIMDALLR_TRACE_PACKETS"

_TRUTHY = {"1", "true", "yes", "on"}


class ValidatorSettings(BaseModel):
    log_level: str = "INFO"
    # None -> stream logging only
    log_dir: Optional[str] = None
    # hand records to the host's logging config instead of our own handlers
    propagate_logs: bool = False
    # log full packet and schema contents at DEBUG
    trace_packets: bool = False

    @field_validator("log_level")
    def _known_level(cls, v: str):
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def _flag(env: Mapping[str, Optional[str]], key: str) -> bool:
    return (env.get(key) or "false").strip().lower() in _TRUTHY


def load_settings(env_file: str | None = ".env") -> ValidatorSettings:
    """Build settings from environment variables.

    Values already present in the environment win over the ``.env`` file.
    """
    env: dict = {}
    if env_file:
        env.update((k, v) for k, v in dotenv.dotenv_values(env_file).items() if k.startswith("HEIMDALLR_"))
    env.update((k, v) for k, v in os.environ.items() if k.startswith("HEIMDALLR_"))
    return ValidatorSettings(
        log_level=env.get(LOG_LEVEL_ENV) or "INFO",
        log_dir=env.get(LOG_DIR_ENV) or None,
        propagate_logs=_flag(env, LOG_PROPAGATE_ENV),
        trace_packets=_flag(env, TRACE_PACKETS_ENV),
    )


@functools.lru_cache(maxsize=1)
def get_settings() -> ValidatorSettings:
    """Process-wide settings, loaded on first use."""
    return load_settings()
