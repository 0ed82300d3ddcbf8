"""Shared fixtures for the Orrery test suite."""

import pytest
from orrery import config


@pytest.fixture(autouse=True)
def restore_config():
    """Undo any configuration changes a test makes."""
    yield
    config.reset()
