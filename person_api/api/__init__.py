"""API Layer - FastAPI routes, route table and error handlers.

Invariants:
    - Routes registered explicitly through route_table (no auto-discovery)
    - Errors converted to responses in exactly one place (error_handlers)
"""
