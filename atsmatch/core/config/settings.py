from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    sentry_dsn: str | None
    enhancement_timeout_s: float
    openai_timeout_s: float
    openai_max_retries: int
    scoring_config_path: str | None


settings = Settings(
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    enhancement_timeout_s=_get_env_float("ENHANCEMENT_TIMEOUT_S", 20.0),
    openai_timeout_s=_get_env_float("OPENAI_TIMEOUT_S", 30.0),
    openai_max_retries=_get_env_int("OPENAI_MAX_RETRIES", 2),
    scoring_config_path=_get_env("SCORING_CONFIG_PATH"),
)

if settings.enhancement_timeout_s <= 0:
    raise RuntimeError("ENHANCEMENT_TIMEOUT_S must be greater than 0.")
