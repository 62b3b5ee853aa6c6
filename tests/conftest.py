"""Pytest configuration and shared fixtures for Card Scanner tests."""

from datetime import date
from unittest.mock import patch

import pytest

from card_scanner.parser.expiry import ExpiryDateExtractor


@pytest.fixture(scope="session")
def test_environment():
    """Set up test environment for the entire test session."""
    with patch.dict('os.environ', {
        'LOG_LEVEL': 'DEBUG',
        'CARD_SCAN_TRIES': '3',
    }):
        yield


@pytest.fixture(scope="function")
def fixed_today():
    """Clock pinned to mid 2025 so century resolution is deterministic."""
    return lambda: date(2025, 6, 1)


@pytest.fixture(scope="function")
def expiry_extractor(fixed_today):
    return ExpiryDateExtractor(today=fixed_today)


@pytest.fixture(scope="function")
def mock_settings():
    """Mock application settings."""
    with patch('card_scanner.utils.config.settings') as mock_settings:
        mock_settings.LOG_LEVEL = 'DEBUG'
        mock_settings.LOG_CARD_NUMBERS = False
        mock_settings.CARD_SCAN_TRIES = 3
        yield mock_settings


@pytest.fixture(scope="function")
def visa_front_frame():
    """Fragments as an OCR engine returns them for the front of a Visa card."""
    return [
        "BANK OF EXAMPLE",
        "4111 1111 1111 1111",
        "VALID THRU 11/29",
        "JANE DOE",
    ]


@pytest.fixture(scope="function")
def amex_front_frame():
    return [
        "AMERICAN EXPRESS",
        "3782 822463 10005",
        "VALID\nTHRU 04/27",
    ]


@pytest.fixture(scope="function")
def split_number_frame():
    """Card number recognized as four separate fragments."""
    return ["4890", "1603", "4347", "0305"]


@pytest.fixture(scope="function")
def noise_frame():
    return ["CUSTOMER SERVICE", "TEL 1588-1234", "AUTHORIZED SIGNATURE"]


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom options."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # Mark integration tests
        if "integration" in item.name.lower() or "Integration" in str(item.cls):
            item.add_marker(pytest.mark.integration)

        # Mark slow tests
        if any(slow_indicator in item.name.lower() for slow_indicator in ['performance', 'bulk']):
            item.add_marker(pytest.mark.slow)

        # Mark unit tests (default)
        if not item.get_closest_marker('integration') and not item.get_closest_marker('slow'):
            item.add_marker(pytest.mark.unit)
