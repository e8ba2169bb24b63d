"""Tests for the index maintenance script."""

from __future__ import annotations

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from pms.db import MongoDatabaseClient
from scripts import ensure_indexes as script


def test_ensure_indexes_creates_unique_email_index(
    monkeypatch: pytest.MonkeyPatch, database: MongoDatabaseClient
) -> None:
    closed: list[bool] = []
    monkeypatch.setattr(database, "close", lambda: closed.append(True))
    monkeypatch.setattr(script, "get_database", lambda uri, db_name: database)

    assert script.ensure_indexes() == 0
    assert closed == [True]

    database.create_user({"email": "ops@example.com"})
    with pytest.raises(DuplicateKeyError):
        database.create_user({"email": "ops@example.com"})


def test_ensure_indexes_reports_unreachable_store(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    def failing_connect(uri, db_name):
        raise ServerSelectionTimeoutError("no servers available")

    monkeypatch.setattr(script, "get_database", failing_connect)

    assert script.ensure_indexes("mongodb://nowhere:27017", "pms") == 1
    assert "Could not connect" in capsys.readouterr().err


def test_ensure_indexes_reports_refused_index(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    class _RefusingDatabase:
        closed = False

        def ensure_indexes(self) -> bool:
            return False

        def close(self) -> None:
            self.closed = True

    db = _RefusingDatabase()
    monkeypatch.setattr(script, "get_database", lambda uri, db_name: db)

    assert script.ensure_indexes() == 1
    assert db.closed is True
    assert "duplicate user emails" in capsys.readouterr().err
