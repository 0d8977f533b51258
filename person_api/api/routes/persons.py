"""Person Endpoints - extraction + wire conversion around core.handlers.

Invariants:
    - Path id validated as an unsigned 32-bit integer before the handler runs
    - Bodies validated by PersonPayload (400 on malformed input)
    - Taxonomy errors are left to the global error handler

Design Decisions:
    - Plain `def` endpoints: FastAPI runs them in its thread pool, so the
      blocking reader/writer guard never stalls the event loop
    - No decorators here: registration lives in api/route_table.py
"""

from typing import Annotated

from fastapi import Depends, Path, Response, status

from person_api.api.dependencies import get_person_store
from person_api.core import handlers
from person_api.core.person import MAX_PERSON_ID
from person_api.core.person_store import PersonStore
from person_api.schemas.person import PersonPayload

PersonIdPath = Annotated[int, Path(ge=0, le=MAX_PERSON_ID)]


def list_persons(
    store: PersonStore = Depends(get_person_store),
) -> list[PersonPayload]:
    """All persons in insertion order."""
    return [PersonPayload.from_domain(p) for p in handlers.list_persons(store)]


def get_person(
    person_id: PersonIdPath,
    store: PersonStore = Depends(get_person_store),
) -> PersonPayload:
    return PersonPayload.from_domain(handlers.get_person(store, person_id))


def create_person(
    body: PersonPayload,
    store: PersonStore = Depends(get_person_store),
) -> PersonPayload:
    """Create a person with a client-supplied id (409 if taken)."""
    created = handlers.create_person(store, body.to_domain())
    return PersonPayload.from_domain(created)


def update_person(
    body: PersonPayload,
    person_id: PersonIdPath,
    store: PersonStore = Depends(get_person_store),
) -> PersonPayload:
    """Replace a person. The path id wins over the body id."""
    updated = handlers.update_person(store, person_id, body.to_domain())
    return PersonPayload.from_domain(updated)


def delete_person(
    person_id: PersonIdPath,
    store: PersonStore = Depends(get_person_store),
) -> Response:
    handlers.delete_person(store, person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
