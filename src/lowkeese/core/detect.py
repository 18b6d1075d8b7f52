# src/lowkeese/core/detect.py
"""
Guess which direction a piece of text should go.

Lowkeese words are nearly all built on "low" (or "lōw"), so text where
"low" shows up, accents ignored, at least once for every two words is
treated as Lowkeese. This is a heuristic for the auto mode only.
"""

import unicodedata
from dataclasses import dataclass


MARKER = "low"

EN_TO_LOW = "en2low"
LOW_TO_EN = "low2en"

LABELS = {
    EN_TO_LOW: "Auto: English → Lowkeese",
    LOW_TO_EN: "Auto: Lowkeese → English",
}
NO_LABEL = "-"


@dataclass
class Detection:
    text: str
    direction: str | None
    label: str


def fold(text: str) -> str:
    """Lowercase and strip combining marks: "Lōwhey" → "lowhey"."""
    decomposed = unicodedata.normalize("NFKD", text.lower())
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def is_probably_lowkeese(text: str) -> bool:
    lower = fold(text)
    word_count = len(lower.split())
    occurrences = lower.count(MARKER)
    return occurrences > 0 and occurrences >= word_count / 2


def detect_direction(text: str) -> str | None:
    if not text.strip():
        return None
    return LOW_TO_EN if is_probably_lowkeese(text) else EN_TO_LOW
