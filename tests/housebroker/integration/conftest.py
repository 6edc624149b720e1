"""
Pytest configuration for housebroker integration tests.

Integration tests run against a throwaway SQLite database per test.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    sqlite_url,
)

__all__ = [
    "async_engine",
    "db_session",
    "sqlite_url",
]
