import pytest

from forwarded_for.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test reads settings from its own environment."""
    for name in ("FORWARDED_ENABLED", "FORWARDED_STATE_ATTR", "FORWARDED_LOG_RESOLUTION", "FORWARDED_UNKNOWN_IP"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
