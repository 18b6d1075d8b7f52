# src/lowkeese/core/fallback/__init__.py
"""
Fallbacks for English words the dictionary doesn't know.

Each fallback:
  - Has a unique string ID
  - Is built with the dictionary it serves
  - Turns one surface word into a Lowkeese token
"""

from abc import ABC, abstractmethod

from lowkeese.core.dictionary import DictionaryManager


class Fallback(ABC):
    """Base class for all fallbacks."""

    id: str

    def __init__(self, dictionary: DictionaryManager):
        self.dictionary = dictionary

    @abstractmethod
    def generate(self, word: str) -> str:
        """
        Produce a Lowkeese token for an unknown word.

        Args:
            word: surface form, case preserved, punctuation already removed

        Returns:
            the token to emit
        """
        pass


# Fallback registry
FALLBACKS: dict[str, type[Fallback]] = {}


def register_fallback(cls: type[Fallback]) -> type[Fallback]:
    """Register a fallback class."""
    FALLBACKS[cls.id] = cls
    return cls


def get_fallback(fallback_id: str) -> type[Fallback]:
    if fallback_id not in FALLBACKS:
        available = ", ".join(FALLBACKS.keys())
        raise ValueError(f"Unknown fallback: {fallback_id}. Available: {available}")
    return FALLBACKS[fallback_id]


def list_fallbacks() -> list[str]:
    return list(FALLBACKS.keys())
