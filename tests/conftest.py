"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Set environment variable to ensure minimal logging during tests
    os.environ['ALPHARECTS_LOG_LEVEL'] = 'WARNING'

    # Also configure root logger to be quiet
    logging.getLogger().setLevel(logging.WARNING)

    # The scanner and tracer log every region at debug level
    for logger_name in ['alpharects.regions.detection', 'alpharects.regions.tracer']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
