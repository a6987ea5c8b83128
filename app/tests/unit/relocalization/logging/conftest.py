"""Fixtures for relocalization.logging tests."""

from unittest.mock import Mock

import pytest

from relocalization.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings
