"""Route Modules - one file per registry collection plus health and stats.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never contain validation logic (delegate to RegistryService / core)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
