# tests/test_translator.py
"""End-to-end tests through the Translator facade."""

import random

import pytest
import redis

from lowkeese.core.config import Settings
from lowkeese.core.fallback.syllable import SyllableFallback
from lowkeese.core.store import MemoryStore, JsonFileStore, RedisStore
from lowkeese.core.translator import Translator, build_store, build_translator
from lowkeese.core.vocabulary import BASE_WORDS


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def translator(store):
    return Translator(store)


def unambiguous_words() -> list[str]:
    targets = list(BASE_WORDS.values())
    return [w for w, t in BASE_WORDS.items() if targets.count(t) == 1]


# === Round trips ===

@pytest.mark.parametrize("word", unambiguous_words())
def test_base_round_trip(translator, word):
    back = translator.translate_reverse(translator.translate_forward(word))
    assert back == word[:1].upper() + word[1:]


@pytest.mark.parametrize("word, back", [
    ("me", "I"),
    ("my", "I"),
    ("hello", "Hi"),
    ("bad", "No"),
])
def test_shared_tokens_are_lossy(translator, word, back):
    assert translator.translate_reverse(translator.translate_forward(word)) == back


def test_sentence_round_trip(translator):
    lowkeese = translator.translate_forward("You are happy!")

    assert lowkeese == "lokēlow lowkey-ār lowkē-hā!"
    assert translator.translate_reverse(lowkeese) == "You are happy!"


def test_name_round_trip(translator):
    lowkeese = translator.translate_forward("My name is Alice.")

    assert translator.translate_reverse(lowkeese) == "My name is Alice."


def test_hello_punctuation(translator):
    lowkeese = translator.translate_forward("Hello!")

    assert lowkeese.endswith("lōwhey!")
    english = translator.translate_reverse(lowkeese)
    assert english.endswith("!")
    assert " !" not in english
    assert english[0].isupper()


def test_empty(translator):
    assert translator.translate_forward("") == ""
    assert translator.translate_reverse("") == ""


# === Teaching ===

def test_teach_cat(translator):
    translator.teach("Cat", "zorple")

    assert translator.translate_forward("cat") == "zorple"
    assert translator.translate_reverse("zorple").startswith("Cat")


def test_teach_twice(translator):
    translator.teach("dog", "woof")
    translator.teach("dog", "bark")

    assert translator.translate_forward("dog") == "bark"


def test_teach_empty(store, translator):
    assert not translator.teach("", "zorple")
    assert store.data == {}


def test_teach_survives_new_translator(store, translator):
    translator.teach("cat", "zorple")

    assert Translator(store).translate_forward("cat") == "zorple"


def test_store_down_still_translates():
    class DownRedis:
        def get(self, key):
            raise redis.ConnectionError("down")

        def set(self, key, value):
            raise redis.ConnectionError("down")

    translator = Translator(RedisStore(DownRedis()))

    assert translator.translate_forward("hello") == "lōwhey"
    assert translator.teach("cat", "zorple")
    assert translator.translate_forward("cat") == "zorple"


# === Detect and translate ===

def test_auto_english(translator):
    result = translator.detect_and_translate("Hello")

    assert result.text == "lōwhey"
    assert result.direction == "en2low"
    assert result.label == "Auto: English → Lowkeese"


def test_auto_lowkeese(translator):
    result = translator.detect_and_translate("lowkey lowkey-ēm lowkē-hā")

    assert result.text == "I am happy"
    assert result.direction == "low2en"
    assert result.label == "Auto: Lowkeese → English"


def test_auto_greeting_round_trip(translator):
    result = translator.detect_and_translate(translator.translate_forward("Hello!"))

    assert result.text == "Hi!"
    assert result.direction == "low2en"


def test_auto_farewell_round_trip(translator):
    result = translator.detect_and_translate(translator.translate_forward("bye"))

    assert result.text == "Bye"
    assert result.direction == "low2en"


def test_auto_blank(translator):
    result = translator.detect_and_translate("  ")

    assert result.text == ""
    assert result.direction is None
    assert result.label == "-"


# === Syllable mode ===

def test_syllable_mode_round_trip(store):
    translator = Translator(store, fallback="syllable")
    translator.fallback = SyllableFallback(translator.dictionary, rng=random.Random(11))
    translator.forward.fallback = translator.fallback

    lowkeese = translator.translate_forward("my phone")
    first, token = lowkeese.split(" ")

    assert first == "lowkey"
    assert token.endswith("kē")
    assert translator.translate_forward("phone") == token
    assert translator.translate_reverse(lowkeese) == "I phone"


# === Wiring ===

def test_build_store(tmp_path):
    assert isinstance(build_store(Settings(STORE="memory")), MemoryStore)
    assert isinstance(build_store(Settings(STORE="file", DATA_DIR=str(tmp_path))), JsonFileStore)
    assert isinstance(build_store(Settings(STORE="redis")), RedisStore)


def test_build_store_unknown():
    with pytest.raises(ValueError, match="Unknown store"):
        build_store(Settings(STORE="floppy"))


def test_build_translator_fallback():
    translator = build_translator(Settings(STORE="memory", FALLBACK="syllable"))

    assert isinstance(translator.fallback, SyllableFallback)


def test_unknown_fallback(store):
    with pytest.raises(ValueError, match="Unknown fallback"):
        Translator(store, fallback="telepathy")
