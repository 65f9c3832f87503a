"""API Layer - FastAPI routes, the operator gate, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every mutating route depends on require_operator
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to RegistryService
"""
