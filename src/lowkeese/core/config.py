# src/lowkeese/core/config.py
"""
Settings from environment variables.
"""

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    STORE: str = os.getenv("LOWKEESE_STORE", "redis")
    REDIS_HOST: str = os.getenv("LOWKEESE_REDIS_HOST", "localhost")
    REDIS_PORT: int = int(os.getenv("LOWKEESE_REDIS_PORT", "6379"))
    REDIS_DB: int = int(os.getenv("LOWKEESE_REDIS_DB", "0"))
    KEY_PREFIX: str = os.getenv("LOWKEESE_KEY_PREFIX", "lowkeese")
    DATA_DIR: str = os.getenv("LOWKEESE_DATA_DIR", ".lowkeese")
    FALLBACK: str = os.getenv("LOWKEESE_FALLBACK", "marker")
    HOST: str = os.getenv("LOWKEESE_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("LOWKEESE_PORT", "8000"))
    API_URL: str = os.getenv("LOWKEESE_API_URL", "http://localhost:8000/api")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache(maxsize=1)
def settings() -> Settings:
    return Settings()
