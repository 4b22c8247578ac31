import pytest

from src.api.deps import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; re-read the environment for each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
