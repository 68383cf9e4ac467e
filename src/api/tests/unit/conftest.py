"""Unit test fixtures with mocked dependencies."""

from unittest.mock import MagicMock

import pytest
import structlog


@pytest.fixture
def mock_logger():
    """Provide a structlog logger double for probe assertions."""
    return MagicMock(spec=structlog.stdlib.BoundLogger)


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )
