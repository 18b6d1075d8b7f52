# src/lowkeese/core/tokenize.py
"""
Whitespace tokenization with trailing punctuation split off.

"Hello,   world!" → [Token("Hello", ","), Token("world", "!")]
"""

import re
from dataclasses import dataclass


PUNCTUATION = ".,!?…"

_WHITESPACE = re.compile(r"\s+")
_WORD_PUNCT = re.compile(r"^(.*?)([.,!?…]*)$", re.DOTALL)


@dataclass
class Token:
    word: str
    punct: str = ""

    @property
    def text(self) -> str:
        return self.word + self.punct


def normalize(text: str) -> str:
    """Trim the ends and collapse whitespace runs to a single space."""
    return _WHITESPACE.sub(" ", text).strip()


def split_word_punct(token: str) -> Token:
    """Split the maximal trailing punctuation run off a token."""
    match = _WORD_PUNCT.match(token)
    return Token(word=match.group(1), punct=match.group(2))


def tokenize(text: str) -> list[Token]:
    text = normalize(text)
    if not text:
        return []
    return [split_word_punct(t) for t in text.split(" ")]
