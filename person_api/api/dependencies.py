"""Dependencies - inject the application's shared objects into endpoints.

Invariants:
    - The PersonStore lives on app.state, created once by create_app()
    - Endpoints receive it by reference, never through a module global
"""

from fastapi import Request

from person_api.config import Settings
from person_api.core.person_store import PersonStore


def get_person_store(request: Request) -> PersonStore:
    return request.app.state.person_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
