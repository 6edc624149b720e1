"""Root pytest configuration.

Test Structure:
    tests/
    ├── housebroker/           # Commission domain, application and API tests
    │   ├── unit/              # Fast, isolated tests
    │   └── integration/       # Tests against a SQLite database (aiosqlite)
    ├── housebroker_identity/  # Identity domain tests (users, roles, tokens)
    │   ├── unit/
    │   └── integration/
    └── shared/                # Shared fixtures and utilities
"""

import pytest

from housebroker_config import clear_settings_cache


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Never leak cached settings between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()
