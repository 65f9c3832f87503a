"""Core Layer - registry validation and storage engine, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Enforcement checks are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the shell persists and serves,
      the core decides whether a record may exist
"""
