"""
Shared fixtures.
"""

import pytest

from data_factory import FactoryConfig, get_config, set_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default (unseeded, en_US) config."""
    previous = get_config()
    set_config(FactoryConfig())
    yield
    set_config(previous)


@pytest.fixture
def seeded_config():
    config = FactoryConfig(seed=1234)
    set_config(config)
    return config
