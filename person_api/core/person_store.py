"""Person Store - the shared in-memory collection and its concurrency guard.

Invariants:
    - One store per application, created at startup and shared by reference
    - Ids are unique: insert of an existing id raises Conflict, store unchanged
    - update() stores the record under the path id, whatever the body id says
    - list()/get() hold the guard in read mode, insert/update/delete in write mode
    - Guard poisoning surfaces as LockError, never as a process abort

Design Decisions:
    - Insertion-ordered dict keyed by id: O(1) lookup, listing keeps
      insertion order
    - Taxonomy errors are raised before any mutation, so they do not poison
      the guard
"""

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator

from person_api.core.errors import Conflict, LockError, NotFound, PersonApiError
from person_api.core.person import Person, PersonId
from person_api.core.rw_guard import GuardMode, GuardPoisoned, RWGuard

logger = logging.getLogger(__name__)


class PersonStore:
    """Concurrency-guarded holder of all Person records."""

    def __init__(self, persons: Iterable[Person] = ()):
        self._guard = RWGuard(expected=(PersonApiError,))
        self._persons: dict[PersonId, Person] = {}
        for person in persons:
            if person.id in self._persons:
                raise Conflict()
            self._persons[person.id] = person

    @contextmanager
    def _locked(self, mode: GuardMode) -> Iterator[dict[PersonId, Person]]:
        try:
            with self._guard.hold(mode):
                yield self._persons
        except GuardPoisoned as exc:
            logger.error(f"Store guard poisoned ({exc.mode.value.lower()})")
            raise LockError(str(exc)) from exc

    def list(self) -> list[Person]:
        """Snapshot of all records in insertion order."""
        with self._locked(GuardMode.READ) as persons:
            return list(persons.values())

    def get(self, person_id: PersonId) -> Person:
        with self._locked(GuardMode.READ) as persons:
            person = persons.get(person_id)
        if person is None:
            raise NotFound()
        return person

    def insert(self, person: Person) -> Person:
        with self._locked(GuardMode.WRITE) as persons:
            if person.id in persons:
                raise Conflict()
            persons[person.id] = person
        logger.info("Person created", extra={"person_id": person.id})
        return person

    def update(self, person_id: PersonId, person: Person) -> Person:
        stored = person.with_id(person_id)
        with self._locked(GuardMode.WRITE) as persons:
            if person_id not in persons:
                raise NotFound()
            persons[person_id] = stored
        logger.info("Person updated", extra={"person_id": person_id})
        return stored

    def delete(self, person_id: PersonId) -> None:
        with self._locked(GuardMode.WRITE) as persons:
            if persons.pop(person_id, None) is None:
                raise NotFound()
        logger.info("Person deleted", extra={"person_id": person_id})

    def __len__(self) -> int:
        with self._locked(GuardMode.READ) as persons:
            return len(persons)
