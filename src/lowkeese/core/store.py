# src/lowkeese/core/store.py
"""
Persistence for the two dictionary directions.

Each direction is one JSON object stored under a fixed key. Loading never
fails: missing, unreachable or malformed data comes back as {}. Saving is
best-effort.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

import redis


log = logging.getLogger(__name__)

EN2LOW_KEY = "en2low"
LOW2EN_KEY = "low2en"


class DictionaryStore(ABC):
    """Base class: JSON (de)serialization on top of a raw key-value backend."""

    # Backend exceptions treated as "store unavailable".
    errors: tuple[type[Exception], ...] = ()

    @abstractmethod
    def _read(self, key: str) -> str | bytes | None:
        pass

    @abstractmethod
    def _write(self, key: str, value: str) -> None:
        pass

    def load(self, key: str) -> dict[str, str]:
        try:
            raw = self._read(key)
        except self.errors as e:
            log.warning("store unavailable, loading %s as empty: %s", key, e)
            return {}

        if raw is None:
            return {}

        try:
            data = json.loads(raw)
        except (ValueError, UnicodeDecodeError):
            log.warning("malformed dictionary data under %s, ignoring", key)
            return {}

        if not isinstance(data, dict):
            log.warning("dictionary data under %s is not an object, ignoring", key)
            return {}

        return {k: v for k, v in data.items() if isinstance(v, str)}

    def save(self, key: str, mapping: dict[str, str]) -> None:
        try:
            self._write(key, json.dumps(mapping, ensure_ascii=False))
        except self.errors as e:
            log.warning("store unavailable, %s not saved: %s", key, e)


class RedisStore(DictionaryStore):
    """Stores dictionaries in Redis."""

    errors = (redis.RedisError,)

    def __init__(self, client: redis.Redis, prefix: str = "lowkeese"):
        self.client = client
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    def _read(self, key: str) -> bytes | None:
        return self.client.get(self._key(key))

    def _write(self, key: str, value: str) -> None:
        self.client.set(self._key(key), value)

    def clear(self) -> None:
        """Delete every key under the prefix. Useful for tests."""
        for key in self.client.scan_iter(f"{self.prefix}:*"):
            self.client.delete(key)


class JsonFileStore(DictionaryStore):
    """One <key>.json file per direction inside a directory."""

    errors = (OSError,)

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def _read(self, key: str) -> bytes | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def _write(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")


class MemoryStore(DictionaryStore):
    """Process-local store. Keeps raw JSON so it behaves like the others."""

    def __init__(self):
        self.data: dict[str, str] = {}

    def _read(self, key: str) -> str | None:
        return self.data.get(key)

    def _write(self, key: str, value: str) -> None:
        self.data[key] = value
