"""Tests for ConfigStore first-load and reload behaviour."""

import os

import pytest

from engine.config_store import ConfigStore
from engine.exc import ConfigLoadError

VALID = 'commands:\n  "!ping": pong\napproved_only: true\nids:\n  - "1"\n'


class TestFirstLoad:
    def test_publishes_config(self, write_config):
        store = ConfigStore(write_config(VALID))
        assert not store.loaded

        config = store.load()

        assert store.loaded
        assert store.current is config
        assert config.commands == {"!ping": "pong"}

    def test_missing_file_raises(self, tmp_path):
        store = ConfigStore(str(tmp_path / "missing.yaml"))
        with pytest.raises(ConfigLoadError):
            store.load()
        assert not store.loaded

    def test_malformed_file_raises(self, write_config):
        store = ConfigStore(write_config("commands: [\n"))
        with pytest.raises(ConfigLoadError):
            store.load()

    def test_logs_success(self, write_config, caplog):
        store = ConfigStore(write_config(VALID))
        with caplog.at_level("INFO"):
            store.load()
        assert "config loaded successfully" in caplog.text


class TestReload:
    def test_replaces_config(self, write_config):
        path = write_config(VALID)
        store = ConfigStore(path)
        first = store.load()

        write_config('commands:\n  "!hello": world\n')
        second = store.load()

        assert second is not None
        assert store.current is second
        assert store.current is not first
        assert store.current.commands == {"!hello": "world"}
        assert store.current.approved_only is False

    def test_malformed_reload_keeps_previous(self, write_config, caplog):
        store = ConfigStore(write_config(VALID))
        previous = store.load()

        write_config("approved_only: [\n")
        with caplog.at_level("ERROR"):
            assert store.load() is None

        assert store.current is previous
        assert store.current.commands == {"!ping": "pong"}
        assert store.current.ids == ["1"]
        assert "keeping previous config" in caplog.text

    def test_deleted_file_keeps_previous(self, write_config):
        path = write_config(VALID)
        store = ConfigStore(path)
        previous = store.load()

        os.remove(path)

        assert store.load() is None
        assert store.current is previous


class TestNonTextFiles:
    def test_invalid_utf8_first_load_raises(self, write_config):
        path = write_config("")
        with open(path, "wb") as f:
            f.write(b"commands:\n  a: \xff\xfe\n")

        with pytest.raises(ConfigLoadError, match="Failed to read"):
            ConfigStore(path).load()

    def test_invalid_utf8_reload_keeps_previous(self, write_config):
        path = write_config(VALID)
        store = ConfigStore(path)
        previous = store.load()

        with open(path, "wb") as f:
            f.write(b"\xff\xfe\x00")

        assert store.load() is None
        assert store.current is previous

    def test_non_string_key_reload_keeps_previous(self, write_config):
        store = ConfigStore(write_config(VALID))
        previous = store.load()

        write_config("1: x\n")

        assert store.load() is None
        assert store.current is previous
