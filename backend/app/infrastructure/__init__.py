"""Infrastructure Layer - database sessions, structured logging, notification sinks.

Invariants:
    - Infrastructure modules may import from core/, never the other way round
"""
