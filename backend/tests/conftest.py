import os

# Must be set before database/main are imported by any test module.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CHAT_TELEMETRY_ENABLED"] = "0"
os.environ.setdefault("ADMIN_PASSWORD", "test-admin-pass")

import pytest
from fastapi.testclient import TestClient

from catalog import CATALOG
from database import SessionLocal
from deps import get_chat_engine, get_context_store
from engine import ChatEngine
from interaction_log import reset_interactions
from main import app
from memory_service import ContextStore
from random_source import RandomSource


class FixedRandom(RandomSource):
    """RandomSource whose coin flips always return *value*; choices still seeded."""

    def __init__(self, value: float, seed: int = 0):
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def rng():
    return RandomSource(1234)


@pytest.fixture
def chat_engine():
    return ChatEngine(rules=CATALOG, rng=RandomSource(7))


@pytest.fixture
def context_store():
    return ContextStore()


@pytest.fixture
def client(chat_engine, context_store):
    app.dependency_overrides[get_chat_engine] = lambda: chat_engine
    app.dependency_overrides[get_context_store] = lambda: context_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    db = SessionLocal()
    try:
        reset_interactions(db)
    finally:
        db.close()


@pytest.fixture
def admin_headers(client):
    r = client.post("/api/admin/login", json={"password": os.environ["ADMIN_PASSWORD"]})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}
