"""Shared fixtures: every test gets its own SQLite file under tmp_path."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from taxbook.config import Settings
from taxbook.main import create_app
from taxbook.store import LedgerStore


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'tax_tracker.db'}"


@pytest.fixture
def store(db_url) -> LedgerStore:
    ledger = LedgerStore(db_url)
    ledger.initialize()
    yield ledger
    ledger.engine.dispose()


@pytest.fixture
def client(tmp_path, db_url):
    settings = Settings(db_url=db_url, static_dir=tmp_path / "no-public")
    app = create_app(LedgerStore(db_url), settings=settings)
    with TestClient(app) as test_client:
        yield test_client
    app.state.store.engine.dispose()
