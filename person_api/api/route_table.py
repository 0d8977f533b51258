"""Route Table - static (method, path pattern) -> endpoint registration.

Invariants:
    - ROUTE_TABLE is built once at import and never mutated
    - A pattern has at most one variable segment, and only as the final component
    - Resolution is first-match in table order; FALLBACK is checked last and
      matches any method on any path
    - A known path requested with an unknown method resolves to FALLBACK (404, not 405)

Design Decisions:
    - Explicit, inspectable table over decorators: the table can be resolved
      without FastAPI (resolve) and registered onto FastAPI (build_router)
"""

from dataclasses import dataclass
from typing import Callable, Sequence

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from person_api.api.routes import pages, persons


@dataclass(frozen=True)
class RouteEntry:
    method: str
    path: str
    endpoint: Callable
    name: str
    status_code: int = status.HTTP_200_OK
    response_class: type[Response] | None = None

    def __post_init__(self):
        _check_pattern(self.path)

    def match(self, method: str, path: str) -> dict[str, str] | None:
        """Captured variables if this entry handles (method, path), else None."""
        if method.upper() != self.method:
            return None
        pattern = _segments(self.path)
        actual = _segments(path)
        if len(pattern) != len(actual):
            return None
        captures: dict[str, str] = {}
        for expected, segment in zip(pattern, actual):
            if _is_variable(expected):
                if not segment:
                    return None
                captures[expected[1:-1]] = segment
            elif expected != segment:
                return None
        return captures


@dataclass(frozen=True)
class FallbackEntry:
    endpoint: Callable
    name: str = "fallback"
    path: str = "/{path:path}"


def _segments(path: str) -> list[str]:
    return path.split("/")[1:]


def _is_variable(segment: str) -> bool:
    return segment.startswith("{") and segment.endswith("}")


def _check_pattern(path: str) -> None:
    if not path.startswith("/"):
        raise ValueError(f"Route path must start with '/': {path!r}")
    segments = _segments(path)
    variables = [i for i, s in enumerate(segments) if _is_variable(s)]
    if len(variables) > 1 or (variables and variables[0] != len(segments) - 1):
        raise ValueError(
            f"Only one variable segment, as the last component, is allowed: {path!r}",
        )


ROUTE_TABLE: tuple[RouteEntry, ...] = (
    RouteEntry("GET", "/", pages.landing_page, "landing",
               response_class=HTMLResponse),
    RouteEntry("GET", "/health", pages.health, "health",
               response_class=PlainTextResponse),
    RouteEntry("GET", "/api/persons", persons.list_persons, "list_persons"),
    RouteEntry("GET", "/api/person/{person_id}", persons.get_person, "get_person"),
    RouteEntry("POST", "/api/person", persons.create_person, "create_person",
               status_code=status.HTTP_201_CREATED),
    RouteEntry("PUT", "/api/person/{person_id}", persons.update_person,
               "update_person"),
    RouteEntry("DELETE", "/api/person/{person_id}", persons.delete_person,
               "delete_person", status_code=status.HTTP_204_NO_CONTENT,
               response_class=Response),
)

FALLBACK = FallbackEntry(pages.not_found)


def resolve(
    method: str,
    path: str,
    table: Sequence[RouteEntry] = ROUTE_TABLE,
    fallback: FallbackEntry = FALLBACK,
) -> tuple[RouteEntry | FallbackEntry, dict[str, str]]:
    """First matching entry and its captures; the fallback when nothing matches."""
    for entry in table:
        captures = entry.match(method, path)
        if captures is not None:
            return entry, captures
    return fallback, {}


def build_router(
    table: Sequence[RouteEntry] = ROUTE_TABLE,
    fallback: FallbackEntry = FALLBACK,
) -> APIRouter:
    """Register the table on a FastAPI router, fallback last."""
    router = APIRouter()
    for entry in table:
        kwargs = {}
        if entry.response_class is not None:
            kwargs["response_class"] = entry.response_class
        router.add_api_route(
            entry.path,
            entry.endpoint,
            methods=[entry.method],
            name=entry.name,
            status_code=entry.status_code,
            **kwargs,
        )
    # methods=None: a full match for every verb, so no route can answer 405
    router.add_route(
        fallback.path,
        fallback.endpoint,
        methods=None,
        name=fallback.name,
        include_in_schema=False,
    )
    return router
