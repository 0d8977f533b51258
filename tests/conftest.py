"""Root conftest - shared fixtures: seeded store, fresh app, async HTTP client.

Invariants:
    - Every test gets its own app and therefore its own PersonStore
    - Tests never depend on a developer's .env or GREETING_TEXT
"""

import os
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

# Keep test output readable and independent of the shell environment
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("GREETING_TEXT", "Hi!")

from person_api.config import Settings  # noqa: E402
from person_api.core.person import Person, create_person_collection  # noqa: E402
from person_api.core.person_store import PersonStore  # noqa: E402
from person_api.main import create_app  # noqa: E402


@pytest.fixture
def ada() -> Person:
    return Person(id=99, name="Ada", age=30, date=date(1990, 1, 1))


@pytest.fixture
def store() -> PersonStore:
    return PersonStore(create_person_collection())


@pytest.fixture
def settings() -> Settings:
    return Settings(greeting_text="Hello tests", log_format="text")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """FastAPI test client bound to a fresh app."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
