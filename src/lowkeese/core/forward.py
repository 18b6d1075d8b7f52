# src/lowkeese/core/forward.py
"""
English → Lowkeese.

1. Phrase pass: multi-word idioms are replaced in the running text, longest
   first, so later phrases see earlier substitutions.
2. Word pass: each token is looked up; unknown words go to the fallback.
"""

import re

from lowkeese.core.dictionary import DictionaryManager
from lowkeese.core.fallback import Fallback
from lowkeese.core.tokenize import normalize, tokenize


def phrase_pattern(phrase: str) -> re.Pattern:
    return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)", re.IGNORECASE)


class ForwardTranslator:
    def __init__(self, dictionary: DictionaryManager, fallback: Fallback):
        self.dictionary = dictionary
        self.fallback = fallback

    def substitute_phrases(self, text: str) -> str:
        for english, lowkeese in self.dictionary.phrases():
            text = phrase_pattern(english).sub(lambda m: lowkeese, text)
        return text

    def translate_word(self, word: str, passthrough: set[str]) -> str:
        found = self.dictionary.lookup_forward(word)
        if found is not None:
            return found
        if word.lower() in passthrough:
            return word
        return self.fallback.generate(word)

    def translate(self, text: str) -> str:
        text = normalize(text)
        if not text:
            return ""

        text = self.substitute_phrases(text)
        passthrough = self.dictionary.phrase_tokens()

        out = []
        for token in tokenize(text):
            if not token.word:
                out.append(token.punct)
                continue
            out.append(self.translate_word(token.word, passthrough) + token.punct)

        return " ".join(out)
