"""Root conftest — shared test configuration."""

import os

# Never point tests at a real database or a real admin token
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("TEST_ADMIN_TOKEN", "test-admin-token")
os.environ.setdefault("PASSWORD_PEPPER", "test-pepper")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
