# src/lowkeese/core/vocabulary.py
"""
Built-in Lowkeese vocabulary.

Everything here is the immutable base layer. User-taught pairs live in the
store and shadow these entries (see dictionary.py).

Several English words deliberately share a Lowkeese token
(i/me/my, hello/hi, bad/no). Reverse lookups for those are lossy.
"""

# English -> Lowkeese. Order matters for the reverse map: the last English
# word to claim a token is the one the token reverses to.
BASE_WORDS: dict[str, str] = {
    # pronouns
    "my": "lowkey",
    "me": "lowkey",
    "i": "lowkey",
    "you": "lokēlow",
    "we": "lowkey-lōw",
    "they": "lowkey-lōwlow",

    # greetings
    "hello": "lōwhey",
    "hi": "lōwhey",
    "bye": "lōwbāy",

    # particles
    "and": "lowkē",
    "with": "lowkey-lō",
    "to": "lowkey-lo",
    "in": "lōwkey",
    "on": "lokēlo",
    "at": "lōwkeylo",
    "after": "lōwkey-āft",

    # quality / yes / no / maybe
    "good": "lowkē-gū",
    "bad": "low-key",
    "yes": "kē",
    "no": "low-key",
    "maybe": "lowkey-mā",

    # feelings
    "tired": "lowkey-zz",
    "happy": "lowkē-hā",
    "sad": "lōwkey-sā",
    "bored": "low-key-bō",
    "confused": "lowkey-hm",
    "scary": "lōwkey-eek",

    # be-verbs
    "am": "lowkey-ēm",
    "are": "lowkey-ār",
    "is": "lowkey-īs",
}

# Multi-word English idioms, longest first. Applied to the running text
# before per-word lookup.
BASE_PHRASES: list[tuple[str, str]] = [
    ("see you later", "lōwkey lokēlow"),
    ("how are you", "lokēlow-hōw"),
    ("my name is", "lowkey"),
    ("good morning", "lowkē lōw-mōrn"),
    ("good night", "lowkē lōw-nīt"),
    ("thank you", "lowkē-tānk"),
    ("what's up", "lowkey-sup"),
]

# Fallback marker tokens (marker mode).
GENERIC_PREFIX = "lowkey-"
ACTION_MARKER = "lowkey-doin"
MANNER_MARKER = "lowkey-lī"
CONCEPT_MARKER = "lowkey-vibe"
NOUN_MARKER = "lowkey-thing"
NAME_MARKER = "lōkē"

# Reverse-only glosses for the markers above.
MARKER_GLOSSES: dict[str, str] = {
    ACTION_MARKER: "doing",
    MANNER_MARKER: "somehow",
    CONCEPT_MARKER: "feeling",
    NOUN_MARKER: "thing",
}

# English words a name after them turns into "my name is ..."
FIRST_PERSON_WORDS = {"i", "me", "my"}
GREETING_TOKEN = "lōwhey"
FAREWELL_TOKEN = "lōwbāy"
GENERIC_PLACEHOLDER = "something"

# Syllable mode.
SYLLABLES = ["low", "lokē", "lōw", "lowkē", "key", "kē", "lōk", "lowy", "ley"]

PLACE_WORDS = {"school", "park", "city", "street", "office", "home", "house", "room"}
OBJECT_WORDS = {"phone", "controller", "game", "app", "message", "messages", "pc", "xbox"}
PERSON_WORDS = {"friend", "friends", "teacher", "mum", "mom", "dad", "brother", "sister", "family"}
VERB_WORDS = {
    "go", "went", "come", "came", "play", "walk", "run", "talk",
    "say", "said", "going", "playing", "running", "talking",
}
