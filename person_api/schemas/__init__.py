"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies, responses)
    - Conversion to core types happens here, never inside core/
"""
