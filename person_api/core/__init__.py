"""Core Layer - domain types, error taxonomy, shared store, handlers.

Invariants:
    - No module in core/ imports from api/, schemas/ or infrastructure/
    - Nothing here knows about FastAPI or HTTP framing

Design Decisions:
    - Functional core separated from imperative shell: handlers are plain
      functions over an explicitly passed PersonStore
"""
