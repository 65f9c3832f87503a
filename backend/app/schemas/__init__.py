"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas validate shape and types at the system boundary
    - Registry rules (empty fields, uniqueness, references) are left to the core

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
