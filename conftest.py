"""Repository-wide pytest fixtures."""

from __future__ import annotations

from collections.abc import Generator

import mongomock
import pytest

from pms.config import reload_config
from pms.db import MongoDatabaseClient


@pytest.fixture(autouse=True)
def _set_default_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point configuration at a throwaway database for every test."""

    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017")
    monkeypatch.setenv("MONGO_DB_NAME", "pms_test")
    monkeypatch.setenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "50")
    reload_config()
    yield
    reload_config()


@pytest.fixture
def database() -> MongoDatabaseClient:
    """In-memory database client backed by mongomock."""

    client = mongomock.MongoClient()
    return MongoDatabaseClient(client["pms_test"], client=client)
