# src/lowkeese/core/translator.py
"""
The four operations the outside world uses: translate either way, detect
and translate, teach.
"""

import redis

# Import fallbacks to register them
import lowkeese.core.fallback.marker
import lowkeese.core.fallback.syllable

from lowkeese.core.config import Settings
from lowkeese.core.detect import Detection, LABELS, LOW_TO_EN, NO_LABEL, detect_direction
from lowkeese.core.dictionary import DictionaryManager
from lowkeese.core.fallback import get_fallback
from lowkeese.core.forward import ForwardTranslator
from lowkeese.core.reverse import ReverseTranslator
from lowkeese.core.store import DictionaryStore, JsonFileStore, MemoryStore, RedisStore


class Translator:
    def __init__(self, store: DictionaryStore, fallback: str = "marker"):
        self.dictionary = DictionaryManager(store)
        self.fallback = get_fallback(fallback)(self.dictionary)
        self.forward = ForwardTranslator(self.dictionary, self.fallback)
        self.reverse = ReverseTranslator(self.dictionary)

    def translate_forward(self, text: str) -> str:
        return self.forward.translate(text)

    def translate_reverse(self, text: str) -> str:
        return self.reverse.translate(text)

    def detect_and_translate(self, text: str) -> Detection:
        direction = detect_direction(text)
        if direction is None:
            return Detection(text="", direction=None, label=NO_LABEL)
        if direction == LOW_TO_EN:
            result = self.translate_reverse(text)
        else:
            result = self.translate_forward(text)
        return Detection(text=result, direction=direction, label=LABELS[direction])

    def teach(self, english: str, lowkeese: str) -> bool:
        return self.dictionary.teach(english, lowkeese)


def build_store(cfg: Settings) -> DictionaryStore:
    if cfg.STORE == "redis":
        client = redis.Redis(host=cfg.REDIS_HOST, port=cfg.REDIS_PORT, db=cfg.REDIS_DB)
        return RedisStore(client, prefix=cfg.KEY_PREFIX)
    if cfg.STORE == "file":
        return JsonFileStore(cfg.DATA_DIR)
    if cfg.STORE == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown store: {cfg.STORE}. Available: redis, file, memory")


def build_translator(cfg: Settings) -> Translator:
    return Translator(build_store(cfg), fallback=cfg.FALLBACK)
