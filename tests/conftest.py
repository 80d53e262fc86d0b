"""Shared pytest fixtures for the dashboard tests."""

from pathlib import Path
from typing import List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert
from sqlalchemy.engine import Engine

from app.api.dependencies import get_db_engine, get_view_cache
from app.core.cache import ViewCache
from app.db.engine import create_db_engine
from app.db.schema import customers, metadata
from app.main import app

CUSTOMER_ID = "c1"
OTHER_CUSTOMER_ID = "c2"


class RecordingCache(ViewCache):
    """ViewCache that remembers every path it was asked to revalidate."""

    def __init__(self) -> None:
        super().__init__()
        self.revalidated: List[str] = []

    def revalidate_path(self, path: str) -> None:
        self.revalidated.append(path)
        super().revalidate_path(path)


@pytest.fixture
def db_engine(tmp_path: Path) -> Engine:
    """SQLite engine on a temp file with all tables created."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.sqlite'}")
    metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def seeded_engine(db_engine: Engine) -> Engine:
    """Engine with two customers to hang invoices on."""
    with db_engine.begin() as conn:
        conn.execute(
            insert(customers),
            [
                {
                    "id": CUSTOMER_ID,
                    "name": "Ada",
                    "email": "ada@example.com",
                    "image_url": "/img/ada.png",
                },
                {
                    "id": OTHER_CUSTOMER_ID,
                    "name": "Grace",
                    "email": "grace@example.com",
                    "image_url": "/img/grace.png",
                },
            ],
        )
    return db_engine


@pytest.fixture
def cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def client(seeded_engine: Engine, cache: RecordingCache) -> TestClient:
    app.dependency_overrides[get_db_engine] = lambda: seeded_engine
    app.dependency_overrides[get_view_cache] = lambda: cache
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
