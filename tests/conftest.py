"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Set environment variable to ensure minimal logging during tests
    os.environ['ARGGUARD_LOG_LEVEL'] = 'WARNING'

    # Also configure root logger to be quiet
    logging.getLogger().setLevel(logging.WARNING)

    # The bitwise comparer logs its dtype dispatch at DEBUG
    logging.getLogger('argguard.bitwise').setLevel(logging.ERROR)
