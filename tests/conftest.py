"""
Shared pytest fixtures for the WordNet service test suite.

Uses an in-memory SQLite database so tests run without MySQL.
The FastAPI TestClient provides a fully wired ASGI test harness.
"""

import copy

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import main as app_main
from app.database import Base, get_db
from app.main import app
from app.services.wordnet_service import WordNet

# ── In-memory SQLite engine (no MySQL required for tests) ─────────────────────
# StaticPool ensures all connections reuse the same in-memory database so that
# tables created in reset_db are visible to sessions opened inside the TestClient.
SQLITE_URL = "sqlite://"

_engine = create_engine(
    SQLITE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestingSession = sessionmaker(bind=_engine, autocommit=False, autoflush=False)


def _override_get_db():
    db = _TestingSession()
    try:
        yield db
    finally:
        db.close()


# ── Sample taxonomy ───────────────────────────────────────────────────────────
#
#                 0 entity
#               /          \
#      1 animal beast     2 plant flora
#     /   |    |    \          |
#  3 dog  4 cat 5 horse 7 bass  6 tree
#                               |
#                         8 bass basswood
#
# "bass" is ambiguous (synsets 7 and 8).  Synset 3 lists itself as a
# hypernym; that self-loop must be dropped on import.

SYNSETS = [
    {"id": 0, "nouns": ["entity"], "gloss": "that which is perceived to exist"},
    {"id": 1, "nouns": ["animal", "beast"], "gloss": "a living organism"},
    {"id": 2, "nouns": ["plant", "flora"], "gloss": "a living organism lacking locomotion"},
    {"id": 3, "nouns": ["dog", "domestic_dog"], "gloss": "a domesticated canid"},
    {"id": 4, "nouns": ["cat"], "gloss": "a small domesticated feline"},
    {"id": 5, "nouns": ["horse"], "gloss": "a hoofed herbivore"},
    {"id": 6, "nouns": ["tree"], "gloss": "a tall perennial woody plant"},
    {"id": 7, "nouns": ["bass"], "gloss": "a freshwater fish"},
    {"id": 8, "nouns": ["bass", "basswood"], "gloss": "the linden tree"},
]

HYPERNYMS = [
    {"synset_id": 1, "hypernym_ids": [0]},
    {"synset_id": 2, "hypernym_ids": [0]},
    {"synset_id": 3, "hypernym_ids": [3, 1]},
    {"synset_id": 4, "hypernym_ids": [1]},
    {"synset_id": 5, "hypernym_ids": [1]},
    {"synset_id": 6, "hypernym_ids": [2]},
    {"synset_id": 7, "hypernym_ids": [1]},
    {"synset_id": 8, "hypernym_ids": [6]},
]


def _synset_tuples():
    return [(s["id"], s["nouns"], s["gloss"]) for s in SYNSETS]


def _hypernym_tuples():
    return [(h["synset_id"], h["hypernym_ids"]) for h in HYPERNYMS]


@pytest.fixture
def taxonomy_payload() -> dict:
    """JSON body for POST /taxonomy (deep-copied so tests may mutate it)."""
    return copy.deepcopy({"synsets": SYNSETS, "hypernyms": HYPERNYMS})


@pytest.fixture
def wordnet() -> WordNet:
    """The sample taxonomy built directly, without the database."""
    return WordNet(_synset_tuples(), _hypernym_tuples())


@pytest.fixture
def star_wordnet() -> WordNet:
    """animal(0) ← dog(1), cat(2), pet(3), a star rooted at 0."""
    return WordNet(
        [(0, ["animal"]), (1, ["dog"]), (2, ["cat"]), (3, ["pet"])],
        [(1, [0]), (2, [0]), (3, [0])],
    )


# ── Database / client ─────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_db():
    """Drop and recreate all tables before each test for isolation."""
    # Import ORM models so metadata knows about all tables
    from app.models import orm  # noqa: F401

    Base.metadata.drop_all(bind=_engine)
    Base.metadata.create_all(bind=_engine)
    yield


@pytest.fixture
def db_session(reset_db):
    """A session on the test database, outside any request."""
    db = _TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(reset_db) -> TestClient:
    """Return a TestClient with the DB dependency overridden.

    Entering the client runs the lifespan, which clears ``app.state.wordnet``.
    """
    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app, raise_server_exceptions=True) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def loaded_client(client: TestClient, taxonomy_payload: dict) -> TestClient:
    """Client with the sample taxonomy imported and active."""
    resp = client.post("/api/v1/taxonomy", json=taxonomy_payload)
    assert resp.status_code == 201, resp.json()
    return client


@pytest.fixture
def start_app(reset_db, monkeypatch):
    """Return a factory for TestClients whose lifespan reads the test database.

    Each ``with start_app() as c:`` block is one process start: the lifespan
    clears the active taxonomy and loads whatever is stored.
    """
    monkeypatch.setattr(app_main, "init_db", lambda: True)
    monkeypatch.setattr(app_main, "SessionFactory", _TestingSession)
    app.dependency_overrides[get_db] = _override_get_db
    yield lambda: TestClient(app, raise_server_exceptions=True)
    app.dependency_overrides.clear()
