# tests/test_store.py
"""Tests for dictionary persistence backends."""

import json

import pytest
import redis

from lowkeese.core.store import RedisStore, JsonFileStore, MemoryStore, EN2LOW_KEY


class DownRedis:
    """A client whose server is never there."""

    def get(self, key):
        raise redis.ConnectionError("connection refused")

    def set(self, key, value):
        raise redis.ConnectionError("connection refused")


@pytest.fixture
def client():
    r = redis.Redis(host="localhost", port=6379, db=15)  # db=15 for tests
    try:
        r.ping()
    except redis.ConnectionError:
        pytest.skip("Redis not available")
    yield r
    for key in r.scan_iter("testlowkeese:*"):
        r.delete(key)


# === MemoryStore ===

def test_memory_missing_key():
    assert MemoryStore().load(EN2LOW_KEY) == {}


def test_memory_save_and_load():
    store = MemoryStore()
    store.save(EN2LOW_KEY, {"cat": "zorple", "hello": "lōwhey"})

    assert store.load(EN2LOW_KEY) == {"cat": "zorple", "hello": "lōwhey"}
    # Stored as JSON, unicode kept readable
    assert "lōwhey" in store.data[EN2LOW_KEY]


def test_memory_save_overwrites_whole_value():
    store = MemoryStore()
    store.save(EN2LOW_KEY, {"a": "1", "b": "2"})
    store.save(EN2LOW_KEY, {"c": "3"})

    assert store.load(EN2LOW_KEY) == {"c": "3"}


def test_malformed_json():
    store = MemoryStore()
    store.data[EN2LOW_KEY] = "{not json"

    assert store.load(EN2LOW_KEY) == {}


def test_non_object_json():
    store = MemoryStore()
    store.data[EN2LOW_KEY] = json.dumps(["cat", "zorple"])

    assert store.load(EN2LOW_KEY) == {}


def test_non_string_values_dropped():
    store = MemoryStore()
    store.data[EN2LOW_KEY] = json.dumps({"cat": "zorple", "dog": 3, "fish": None})

    assert store.load(EN2LOW_KEY) == {"cat": "zorple"}


# === JsonFileStore ===

def test_file_save_and_load(tmp_path):
    store = JsonFileStore(tmp_path / "data")
    store.save(EN2LOW_KEY, {"cat": "zorple"})

    assert (tmp_path / "data" / "en2low.json").exists()
    assert JsonFileStore(tmp_path / "data").load(EN2LOW_KEY) == {"cat": "zorple"}


def test_file_missing(tmp_path):
    assert JsonFileStore(tmp_path).load(EN2LOW_KEY) == {}


def test_file_garbage(tmp_path):
    (tmp_path / "en2low.json").write_text("\x00\x01 nope", encoding="utf-8")

    assert JsonFileStore(tmp_path).load(EN2LOW_KEY) == {}


def test_file_not_utf8(tmp_path):
    (tmp_path / "en2low.json").write_bytes(b"\xff\xfe\x00garbage")

    assert JsonFileStore(tmp_path).load(EN2LOW_KEY) == {}


def test_file_invalid_utf8_bytes(tmp_path):
    (tmp_path / "en2low.json").write_bytes(b"{\"cat\": \"\xc3\x28\"}")

    assert JsonFileStore(tmp_path).load(EN2LOW_KEY) == {}


def test_file_unwritable(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory")
    store = JsonFileStore(blocker)

    store.save(EN2LOW_KEY, {"cat": "zorple"})  # no exception

    assert store.load(EN2LOW_KEY) == {}


# === RedisStore ===

def test_redis_unavailable():
    store = RedisStore(DownRedis())

    assert store.load(EN2LOW_KEY) == {}
    store.save(EN2LOW_KEY, {"cat": "zorple"})  # no exception


def test_redis_save_and_load(client):
    store = RedisStore(client, prefix="testlowkeese")
    store.save(EN2LOW_KEY, {"cat": "zorple"})

    assert client.exists("testlowkeese:en2low")
    assert store.load(EN2LOW_KEY) == {"cat": "zorple"}


def test_redis_missing(client):
    assert RedisStore(client, prefix="testlowkeese").load(EN2LOW_KEY) == {}


def test_redis_clear(client):
    store = RedisStore(client, prefix="testlowkeese")
    store.save(EN2LOW_KEY, {"cat": "zorple"})
    store.clear()

    assert store.load(EN2LOW_KEY) == {}
