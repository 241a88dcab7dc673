"""Caching helpers for CN code reference lists.

Entries are raw JSON bodies keyed by file name (``"0402.json"``). The file
backend keeps one file per heading and treats old or empty files as missing.
Concurrent writers are not coordinated; the last write wins.
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, NamedTuple, Optional, Protocol

import redis

from .config import Settings, settings

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


class CacheBackend(Protocol):
    def get(self, key: str) -> Optional[bytes]: ...

    def set(self, key: str, value: bytes) -> None: ...


@dataclass
class FileCache:
    directory: Path
    max_age_days: int
    create_dir: bool = True

    def _path(self, key: str) -> Path:
        return self.directory / key

    def get(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        if not path.is_file():
            return None
        age = time.time() - path.stat().st_mtime
        if age > self.max_age_days * SECONDS_PER_DAY:
            logger.info("Cache file %s is stale (%.1f days)", path, age / SECONDS_PER_DAY)
            return None
        data = path.read_bytes()
        if not data.strip():
            return None
        return data

    def set(self, key: str, value: bytes) -> None:
        if not self.directory.exists():
            if not self.create_dir:
                logger.debug("Cache directory %s missing; not caching %s", self.directory, key)
                return
            self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_bytes(value)


@dataclass
class RedisCache:
    client: redis.Redis
    ttl_seconds: int
    prefix: str = "tedb:"

    def get(self, key: str) -> Optional[bytes]:
        try:
            data = self.client.get(self.prefix + key)
        except redis.RedisError as exc:  # pragma: no cover - protective
            logger.warning("Redis get failed: %s", exc)
            return None
        return data or None

    def set(self, key: str, value: bytes) -> None:
        try:
            self.client.setex(self.prefix + key, self.ttl_seconds, value)
        except redis.RedisError as exc:  # pragma: no cover - protective
            logger.warning("Redis set failed: %s", exc)


class _Entry(NamedTuple):
    expires_at: float
    body: bytes


@dataclass
class InMemoryCache:
    """Process-local code lists for runs without a cache directory."""

    ttl_seconds: int
    clock: Callable[[], float] = time.monotonic
    _entries: Dict[str, _Entry] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def get(self, key: str) -> Optional[bytes]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self.clock() >= entry.expires_at:
                del self._entries[key]
                return None
            return entry.body

    def set(self, key: str, value: bytes) -> None:
        with self._lock:
            self._entries[key] = _Entry(self.clock() + self.ttl_seconds, value)


def build_cache(config: Settings = settings) -> CacheBackend:
    ttl = config.cache_max_age_days * SECONDS_PER_DAY
    if config.cache_backend == "redis":
        try:
            client = redis.Redis(host=config.redis_host, port=config.redis_port, decode_responses=False)
            client.ping()
            logger.info("Using Redis cache at %s:%s", config.redis_host, config.redis_port)
            return RedisCache(client, ttl)
        except redis.RedisError:
            logger.warning("Redis not available, falling back to the file cache")
    if config.cache_backend in {"file", "redis"} and config.cache_dir:
        return FileCache(Path(config.cache_dir), config.cache_max_age_days, config.create_cache_dir)
    return InMemoryCache(ttl)
