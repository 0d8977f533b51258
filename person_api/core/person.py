"""Person - the single managed entity and its startup seed set.

Invariants:
    - id fits an unsigned 32-bit integer, age an unsigned 8-bit integer
    - Person is immutable; "changing" a record means storing a new instance
    - create_person_collection() is deterministic: same records, same order

Design Decisions:
    - Frozen dataclass over pydantic model: core stays free of boundary
      validation, range checks live in schemas/person.py
"""

from dataclasses import dataclass, replace
from datetime import date

PersonId = int

MAX_PERSON_ID = 2**32 - 1
MAX_AGE = 2**8 - 1


@dataclass(frozen=True)
class Person:
    """One record of the collection."""
    id: PersonId
    name: str
    age: int
    date: date

    def with_id(self, person_id: PersonId) -> "Person":
        """Copy of this record carrying another id."""
        return replace(self, id=person_id)


def create_person_collection() -> list[Person]:
    """Fixed seed set loaded into the store at startup."""
    return [
        Person(id=1, name="Elijah", age=23, date=date(2000, 4, 12)),
        Person(id=2, name="Grace", age=31, date=date(1993, 9, 2)),
        Person(id=3, name="Linus", age=54, date=date(1969, 12, 28)),
        Person(id=4, name="Margaret", age=87, date=date(1936, 8, 17)),
    ]
