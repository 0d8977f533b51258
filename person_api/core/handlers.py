"""Request Handlers - one pure function per operation.

Invariants:
    - Each handler is a function of (extracted params, store) -> value
    - Taxonomy errors propagate unchanged; no local conversion, no retries
    - landing/health/fallback never touch the store
"""

from datetime import datetime

from person_api.core.person import Person, PersonId
from person_api.core.person_store import PersonStore

FALLBACK_TEXT = "Oops! The page you are looking for does not exist."
HEALTH_TEXT = "OK"


def landing(greeting: str, now: datetime) -> str:
    """Informational landing text."""
    return f"Python-FastAPI {greeting} <br> Current UTC time: {now.isoformat()}"


def health() -> str:
    return HEALTH_TEXT


def fallback() -> str:
    return FALLBACK_TEXT


def list_persons(store: PersonStore) -> list[Person]:
    return store.list()


def get_person(store: PersonStore, person_id: PersonId) -> Person:
    return store.get(person_id)


def create_person(store: PersonStore, person: Person) -> Person:
    return store.insert(person)


def update_person(
    store: PersonStore, person_id: PersonId, person: Person,
) -> Person:
    return store.update(person_id, person)


def delete_person(store: PersonStore, person_id: PersonId) -> None:
    store.delete(person_id)
