"""Error Taxonomy - typed failure kinds produced by PersonStore operations.

Invariants:
    - Exactly three kinds: Conflict (409), NotFound (404), LockError (500)
    - Every kind maps to exactly one HTTP status (status_for is total)
    - to_response() is the error's textual description, nothing more

Design Decisions:
    - Single hierarchy with PersonApiError base: one FastAPI handler catches all
    - Handlers never convert errors locally; api/error_handlers.py does it once
"""

from enum import Enum


class ErrorKind(str, Enum):
    """The fixed failure kinds of the store."""
    CONFLICT = "CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    LOCK_ERROR = "LOCK_ERROR"


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.CONFLICT: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.LOCK_ERROR: 500,
}


def status_for(kind: ErrorKind) -> int:
    """HTTP status for an error kind."""
    return _STATUS_BY_KIND[kind]


class PersonApiError(Exception):
    """Base exception for all taxonomy errors."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def code(self) -> str:
        return self.kind.value

    @property
    def http_status(self) -> int:
        return status_for(self.kind)

    def to_response(self) -> str:
        """Body of the error response (serialized as a JSON string)."""
        return self.message


class Conflict(PersonApiError):
    """A record with the same id already exists."""
    kind = ErrorKind.CONFLICT

    def __init__(self):
        super().__init__("An element with the same ID already exists")


class NotFound(PersonApiError):
    """Referenced record does not exist."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self):
        super().__init__("Not found")


class LockError(PersonApiError):
    """The shared-state guard could not be acquired."""
    kind = ErrorKind.LOCK_ERROR

    def __init__(self, detail: str):
        super().__init__(f"Poison error {detail}")
        self.detail = detail
