"""Route Modules - thin endpoints, one file per concern.

Invariants:
    - Endpoints never contain business logic (delegate to core.handlers)
    - Endpoints never catch taxonomy errors
"""
