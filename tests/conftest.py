import pytest

from replaycache.utils.config import config_manager


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the default configuration."""
    config_manager.reset()
    yield
    config_manager.reset()


@pytest.fixture
def o1():
    return object()


@pytest.fixture
def o2():
    return object()
