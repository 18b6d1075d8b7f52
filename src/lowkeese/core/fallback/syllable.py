# src/lowkeese/core/fallback/syllable.py
"""
Syllable fallback: invent a new Lowkeese word and remember it.

The word is built from the fixed syllable set with an ending that hints at
a guessed category. A generated token is retried until it doesn't collide
with a token that already means something else, then committed to the
dictionary so the same English word always gets the same token.
"""

import logging
import random

from lowkeese.core.dictionary import DictionaryManager
from lowkeese.core.fallback import Fallback, register_fallback
from lowkeese.core.vocabulary import (
    SYLLABLES, PLACE_WORDS, OBJECT_WORDS, PERSON_WORDS, VERB_WORDS,
)


log = logging.getLogger(__name__)

RETRIES_PER_LENGTH = 100

ENDINGS = {
    "place": "lo",
    "object": "kē",
    "verb": "key",
    "person": "low",
    "generic": "",
}


def guess_category(word: str) -> str:
    if word[:1].isupper():
        return "name"
    w = word.lower()
    if w in PLACE_WORDS:
        return "place"
    if w in OBJECT_WORDS:
        return "object"
    if w in PERSON_WORDS:
        return "person"
    if w in VERB_WORDS:
        return "verb"
    return "generic"


class SyllableFallback(Fallback):
    id = "syllable"

    def __init__(self, dictionary: DictionaryManager, rng: random.Random | None = None):
        super().__init__(dictionary)
        self.rng = rng or random.Random()

    def core(self, count: int) -> str:
        parts = [self.rng.choice(SYLLABLES) for _ in range(count)]
        if count <= 2:
            return "".join(parts)
        return "-".join(parts)

    def make_token(self, word: str, extra: int = 0) -> str:
        category = guess_category(word)
        if category == "name":
            return f"lōkē-{self.core(1 + extra)}-{self.core(1)}"
        return self.core(2 + extra) + ENDINGS[category]

    def generate(self, word: str) -> str:
        lower = word.lower()

        existing = self.dictionary.lookup_forward(lower)
        if existing is not None:
            return existing

        attempts = 0
        while True:
            # Widen the token once the short forms are crowded.
            token = self.make_token(word, extra=attempts // RETRIES_PER_LENGTH)
            attempts += 1
            owner = self.dictionary.lookup_reverse(token)
            if owner is None or owner == lower:
                break

        self.dictionary.add(lower, token)
        log.debug("generated %r for %r", token, lower)
        return token


register_fallback(SyllableFallback)
