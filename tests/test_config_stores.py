"""
Tests for configuration stores.

**Purpose**: Each store must answer get() and `in` consistently, and never
be mutated by reading.
"""

import pytest

from configutils.config.accessor import SettingsAccessor
from configutils.config.stores import (
    ChainStore,
    DotenvStore,
    EnvironmentStore,
    MappingStore,
)


def test_mapping_store_copies_input():
    values = {"A": "1"}
    store = MappingStore(values)

    values["A"] = "changed"
    values["B"] = "2"

    assert store.get("A") == "1"
    assert "B" not in store
    assert store.get("B") is None


def test_environment_store_reads_at_lookup_time(monkeypatch):
    store = EnvironmentStore()
    monkeypatch.delenv("CONFIGUTILS_TEST_KEY", raising=False)

    assert "CONFIGUTILS_TEST_KEY" not in store

    monkeypatch.setenv("CONFIGUTILS_TEST_KEY", "late")

    assert "CONFIGUTILS_TEST_KEY" in store
    assert store.get("CONFIGUTILS_TEST_KEY") == "late"


def test_environment_store_prefix(monkeypatch):
    monkeypatch.setenv("MYAPP_PORT", "9000")
    store = EnvironmentStore(prefix="MYAPP_")

    assert store.get("PORT") == "9000"
    assert "PORT" in store
    assert 42 not in store


def test_dotenv_store(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "PORT=9000\n"
        "HOSTS=a.local,b.local\n"
        'GREETING="hello world"\n'
        "BARE_KEY\n"
    )

    store = DotenvStore(env_file)

    assert store.get("PORT") == "9000"
    assert store.get("GREETING") == "hello world"
    assert "BARE_KEY" not in store
    assert store.get("MISSING") is None

    settings = SettingsAccessor(store)
    assert settings.get_typed("PORT", 8080) == 9000
    assert settings.get_list("HOSTS") == ["a.local", "b.local"]


def test_dotenv_store_does_not_touch_environment(tmp_path, monkeypatch):
    monkeypatch.delenv("ONLY_IN_FILE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("ONLY_IN_FILE=1\n")

    DotenvStore(env_file)

    assert "ONLY_IN_FILE" not in EnvironmentStore()


def test_dotenv_store_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DotenvStore(tmp_path / "nope.env")


def test_chain_store_first_hit_wins():
    overrides = MappingStore({"PORT": "9000"})
    base = MappingStore({"PORT": "8080", "HOST": "localhost"})
    store = ChainStore(overrides, base)

    assert store.get("PORT") == "9000"
    assert store.get("HOST") == "localhost"
    assert store.get("MISSING") is None
    assert "HOST" in store
    assert "MISSING" not in store


def test_chain_store_empty_string_is_a_hit():
    store = ChainStore(MappingStore({"K": ""}), MappingStore({"K": "fallback"}))

    assert store.get("K") == ""
