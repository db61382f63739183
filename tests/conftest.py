"""Shared fixtures."""

import pytest

from dental_scope.config import Config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the built-in threshold tables."""
    config = Config()
    set_config(config)
    yield config
    set_config(None)
