"""Tests for persisted settings and the write key."""

import sqlite3
from pathlib import Path

from roadnoise.storage import settings_repo
from roadnoise.storage.database import connect


class TestSettings:
    def test_missing(self, db: sqlite3.Connection):
        assert settings_repo.get_setting(db, "nothing") is None

    def test_set_and_overwrite(self, db: sqlite3.Connection):
        settings_repo.set_setting(db, "color", "blue")
        settings_repo.set_setting(db, "color", "red")
        assert settings_repo.get_setting(db, "color") == "red"

    def test_delete(self, db: sqlite3.Connection):
        settings_repo.set_setting(db, "color", "blue")
        assert settings_repo.delete_setting(db, "color") is True
        assert settings_repo.delete_setting(db, "color") is False


class TestKey:
    def test_default_empty(self, db: sqlite3.Connection):
        assert settings_repo.get_key(db) == ""

    def test_set_strips(self, db: sqlite3.Connection):
        settings_repo.set_key(db, "  abc123 \n")
        assert settings_repo.get_key(db) == "abc123"

    def test_clear(self, db: sqlite3.Connection):
        settings_repo.set_key(db, "abc123")
        assert settings_repo.clear_key(db) is True
        assert settings_repo.get_key(db) == ""

    def test_persists_across_connections(self, tmp_path: Path):
        path = tmp_path / "settings.db"
        conn = connect(path)
        settings_repo.set_key(conn, "persisted")
        conn.close()

        conn = connect(path)
        assert settings_repo.get_key(conn) == "persisted"
        conn.close()
