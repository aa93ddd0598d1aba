import pytest

from taxcheckdigit.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached, reload them around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
