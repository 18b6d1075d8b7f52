# src/lowkeese/core/dictionary.py
"""
Two-way dictionary: English → Lowkeese and Lowkeese → English.

Each direction is a base layer (built-in, never edited) shadowed by a user
layer (taught pairs). The user layer is loaded from the store once and
written back in full after every change.

Keys are lowercase in both directions. Forward values keep the taught
spelling verbatim; reverse values are lowercase English.
"""

import logging

from lowkeese.core.store import DictionaryStore, EN2LOW_KEY, LOW2EN_KEY
from lowkeese.core.tokenize import normalize
from lowkeese.core.vocabulary import BASE_WORDS, BASE_PHRASES, MARKER_GLOSSES


log = logging.getLogger(__name__)

FORWARD = "forward"
REVERSE = "reverse"
MAX_PHRASE_WORDS = 4


def build_base_forward() -> dict[str, str]:
    base = dict(BASE_WORDS)
    for english, lowkeese in BASE_PHRASES:
        base[english] = lowkeese
    return base


def build_base_reverse() -> dict[str, str]:
    base = {}
    # Last writer wins, so shared tokens reverse to a single word.
    for english, lowkeese in BASE_WORDS.items():
        base[lowkeese.lower()] = english
    # Phrases never take a token away from a word.
    for english, lowkeese in BASE_PHRASES:
        base.setdefault(lowkeese.lower(), english)
    for marker, gloss in MARKER_GLOSSES.items():
        base.setdefault(marker.lower(), gloss)
    return base


class DictionaryManager:
    def __init__(self, store: DictionaryStore):
        self.store = store
        self.base_forward = build_base_forward()
        self.base_reverse = build_base_reverse()
        self.user_forward = store.load(EN2LOW_KEY)
        self.user_reverse = store.load(LOW2EN_KEY)
        self._refresh()

    def _refresh(self) -> None:
        self.forward = {**self.base_forward, **self.user_forward}
        self.reverse = {**self.base_reverse, **self.user_reverse}

    def _sync(self) -> None:
        # Full merged maps, not diffs.
        self.store.save(EN2LOW_KEY, self.forward)
        self.store.save(LOW2EN_KEY, self.reverse)

    def lookup_forward(self, word: str) -> str | None:
        return self.forward.get(word.lower())

    def lookup_reverse(self, phrase: str) -> str | None:
        return self.reverse.get(phrase.lower())

    def add(self, english: str, lowkeese: str) -> None:
        """Insert a pair into both directions and persist. No normalization."""
        previous = self.reverse.get(lowkeese.lower())
        if previous is not None and previous != english:
            log.debug("%r now reverses to %r (was %r)", lowkeese, english, previous)

        self.user_forward[english] = lowkeese
        self.user_reverse[lowkeese.lower()] = english
        self._refresh()
        self._sync()

    def teach(self, english: str, lowkeese: str) -> bool:
        """
        Teach a pair. Returns False (and does nothing) when either side is
        empty after normalization. Last write wins.
        """
        english = normalize(english).lower()
        lowkeese = normalize(lowkeese)
        if not english or not lowkeese:
            log.debug("ignoring empty teach pair")
            return False

        self.add(english, lowkeese)
        log.info("taught %r ↔ %r", english, lowkeese)
        return True

    def phrases(self) -> list[tuple[str, str]]:
        """Multi-word forward entries, most words first, stable otherwise."""
        multi = [
            (english, lowkeese)
            for english, lowkeese in self.forward.items()
            if 1 < len(english.split(" ")) <= MAX_PHRASE_WORDS
        ]
        return sorted(multi, key=lambda pair: -len(pair[0].split(" ")))

    def phrase_tokens(self) -> set[str]:
        """Lowkeese tokens that the phrase pass can leave in the text."""
        tokens = set()
        for _, lowkeese in self.phrases():
            tokens.update(t.lower() for t in lowkeese.split(" "))
        return tokens

    def entries(self, direction: str) -> dict[str, str]:
        if direction == FORWARD:
            return dict(self.forward)
        if direction == REVERSE:
            return dict(self.reverse)
        raise ValueError(f"Unknown direction: {direction}. Available: {FORWARD}, {REVERSE}")
