"""Root conftest - shared test configuration."""

import os

# Tests never talk to a real database or use a real operator secret
os.environ.setdefault("OPERATOR_KEY", "test-operator-key")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
