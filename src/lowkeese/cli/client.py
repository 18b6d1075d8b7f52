"""
HTTP client for the Lowkeese API.
"""

import httpx

from lowkeese.core.config import settings


def base_url() -> str:
    return settings().API_URL


# === Translate ===

def translate(direction: str, text: str) -> dict:
    r = httpx.post(f"{base_url()}/translate/{direction}", json={"text": text}, timeout=30)
    r.raise_for_status()
    return r.json()


# === Dictionary ===

def teach(english: str, lowkeese: str) -> dict:
    r = httpx.post(f"{base_url()}/dictionary/teach", json={"english": english, "lowkeese": lowkeese})
    r.raise_for_status()
    return r.json()


def get_dictionary(direction: str) -> dict:
    r = httpx.get(f"{base_url()}/dictionary/{direction}")
    r.raise_for_status()
    return r.json()
