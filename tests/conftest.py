"""Shared fixtures for the test suite."""

import logging

import pytest

from common.logging_utils import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop handlers the CLI installs so they never outlive capsys streams."""
    root = logging.getLogger()
    level = root.level
    yield
    reset_logging()
    root.setLevel(level)
