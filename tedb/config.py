"""Client configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _get_flag(name: str, default: str) -> bool:
    return _get_env(name, default).lower() in {"1", "true", "yes"}


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    base_url: str = _get_env("TEDB_BASE_URL", "https://ec.europa.eu/taxation_customs/tedb")
    timeout_seconds: float = float(_get_env("TEDB_TIMEOUT_SECONDS", "60"))
    cache_backend: str = _get_env("TEDB_CACHE_BACKEND", "file")
    cache_dir: str = _get_env("TEDB_CACHE_DIR", "tedb_cache")
    create_cache_dir: bool = _get_flag("TEDB_CREATE_CACHE_DIR", "true")
    cache_max_age_days: int = int(_get_env("TEDB_CACHE_MAX_AGE_DAYS", "7"))
    redis_host: str = _get_env("REDIS_HOST", "localhost")
    redis_port: int = int(_get_env("REDIS_PORT", "6379"))
    log_level: str = _get_env("LOG_LEVEL", "INFO")
    api_host: str = _get_env("API_HOST", "127.0.0.1")
    api_port: int = int(_get_env("API_PORT", "8000"))


settings = Settings()
