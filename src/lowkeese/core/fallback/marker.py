# src/lowkeese/core/fallback/marker.py
"""
Marker fallback: one fixed token per surface category.

    running   → lowkey-doin
    quickly   → lowkey-lī
    kindness  → lowkey-vibe
    table     → lowkey-thing
    Alice     → lōkē(Alice)

Deterministic and never writes to the dictionary.
"""

from lowkeese.core.fallback import Fallback, register_fallback
from lowkeese.core.vocabulary import (
    ACTION_MARKER, MANNER_MARKER, CONCEPT_MARKER, NOUN_MARKER, NAME_MARKER,
)


def name_token(name: str) -> str:
    return f"{NAME_MARKER}({name})"


class MarkerFallback(Fallback):
    id = "marker"

    def generate(self, word: str) -> str:
        lower = word.lower()

        if lower.endswith("ing"):
            return ACTION_MARKER
        if lower.endswith("ly"):
            return MANNER_MARKER
        if lower.endswith(("ness", "tion", "ment")):
            return CONCEPT_MARKER
        if not word[:1].isupper():
            return NOUN_MARKER
        return name_token(word)


register_fallback(MarkerFallback)
