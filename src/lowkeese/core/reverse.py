# src/lowkeese/core/reverse.py
"""
Lowkeese → English.

Longest match first: at each position try 4, 3, then 2 token spans against
the reverse dictionary before falling back to a single token.
"""

import re
from dataclasses import dataclass

from lowkeese.core.dictionary import DictionaryManager
from lowkeese.core.tokenize import Token, tokenize
from lowkeese.core.vocabulary import (
    NAME_MARKER, GENERIC_PREFIX, GENERIC_PLACEHOLDER,
    FIRST_PERSON_WORDS, GREETING_TOKEN, FAREWELL_TOKEN,
)


SPANS = (4, 3, 2)

SPECIAL_LITERALS = {
    GREETING_TOKEN: "hello",
    FAREWELL_TOKEN: "bye",
}

_NAME = re.compile(rf"^{re.escape(NAME_MARKER)}\((.+)\)$", re.IGNORECASE)
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([.,!?…])")


@dataclass
class Emitted:
    text: str
    first_person: bool = False


def finish(words: list[str]) -> str:
    """Join, pull punctuation onto the previous word, capitalize."""
    sentence = _SPACE_BEFORE_PUNCT.sub(r"\1", " ".join(words))
    return sentence[:1].upper() + sentence[1:]


class ReverseTranslator:
    def __init__(self, dictionary: DictionaryManager):
        self.dictionary = dictionary

    def match_span(self, tokens: list[Token], i: int) -> tuple[int, str] | None:
        for span in SPANS:
            if i + span > len(tokens):
                continue
            window = tokens[i:i + span]

            found = self.dictionary.lookup_reverse(" ".join(t.text for t in window))
            if found is not None:
                return span, found

            last = window[-1]
            if last.punct and last.word:
                stripped = [t.text for t in window[:-1]] + [last.word]
                found = self.dictionary.lookup_reverse(" ".join(stripped))
                if found is not None:
                    return span, found + last.punct
        return None

    def translate_token(self, token: Token, out: list[Emitted]) -> None:
        word = token.word

        english = self.dictionary.lookup_reverse(word)
        if english is None:
            english = SPECIAL_LITERALS.get(word.lower())

        if english is None:
            match = _NAME.match(word)
            if match:
                name = match.group(1)
                if out and out[-1].first_person:
                    out[-1] = Emitted(f"my name is {name}{token.punct}")
                    return
                english = name

        if english is None:
            if word.lower().startswith(GENERIC_PREFIX):
                english = GENERIC_PLACEHOLDER
            else:
                english = word

        first_person = english in FIRST_PERSON_WORDS and not token.punct
        out.append(Emitted(english + token.punct, first_person=first_person))

    def translate(self, text: str) -> str:
        tokens = tokenize(text)
        if not tokens:
            return ""

        out: list[Emitted] = []
        i = 0
        while i < len(tokens):
            token = tokens[i]
            if not token.word:
                out.append(Emitted(token.punct))
                i += 1
                continue

            matched = self.match_span(tokens, i)
            if matched:
                span, english = matched
                out.append(Emitted(english))
                i += span
                continue

            self.translate_token(token, out)
            i += 1

        return finish([e.text for e in out])
