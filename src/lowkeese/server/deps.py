"""
Shared dependencies for routes.
"""

from functools import lru_cache

from lowkeese.core.config import settings
from lowkeese.core.store import DictionaryStore
from lowkeese.core.translator import Translator, build_store


@lru_cache(maxsize=1)
def get_store() -> DictionaryStore:
    return build_store(settings())


def get_translator() -> Translator:
    # Fresh dictionary per request so writes from other processes show up.
    return Translator(get_store(), fallback=settings().FALLBACK)
