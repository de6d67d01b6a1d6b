"""Core Layer: pure event and option values, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - normalize_event() is pure and deterministic

Design Decisions:
    - Functional core separated from the async streaming shell
"""
