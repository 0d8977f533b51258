"""Person Schemas - Pydantic wire model for Person bodies.

Invariants:
    - All four fields required on input, no server-side defaults
    - id: 0..2^32-1, age: 0..255, both JSON integers (no strings, floats, booleans)
    - date: a "YYYY-MM-DD" string on the wire, never a timestamp or datetime
    - Malformed bodies are rejected here (400), never inside core/

Design Decisions:
    - Separate from core.person.Person: schemas are API contracts, the
      dataclass is the domain record
    - Strict types per field instead of model-wide strict mode: FastAPI
      validates the decoded body in python mode, where a strict date would
      refuse every ISO string
"""

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

from person_api.core.person import MAX_AGE, MAX_PERSON_ID, Person

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


class PersonPayload(BaseModel):
    """Person as it travels over the wire."""
    model_config = ConfigDict(extra="ignore")

    id: StrictInt = Field(ge=0, le=MAX_PERSON_ID)
    name: StrictStr
    age: StrictInt = Field(ge=0, le=MAX_AGE)
    date: date

    @field_validator("date", mode="before")
    @classmethod
    def require_iso_date(cls, v):
        if isinstance(v, date) and not isinstance(v, datetime):
            return v
        if isinstance(v, str) and _ISO_DATE.fullmatch(v):
            return v
        raise ValueError("date must be an ISO-8601 calendar date (YYYY-MM-DD)")

    def to_domain(self) -> Person:
        return Person(id=self.id, name=self.name, age=self.age, date=self.date)

    @classmethod
    def from_domain(cls, person: Person) -> "PersonPayload":
        return cls(
            id=person.id, name=person.name, age=person.age, date=person.date,
        )
