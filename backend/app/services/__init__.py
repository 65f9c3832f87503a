"""Services Layer - imperative shell around the registry core.

Invariants:
    - Services own IO (database, notifications); the core owns validation
    - A record reaches memory only after it reached the database

Design Decisions:
    - One service object per process, initialized in the FastAPI lifespan
"""
