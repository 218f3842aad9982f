"""Root conftest: shared test configuration."""

import os

# Ensure tests never reach a real database or reuse a real signing key
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
