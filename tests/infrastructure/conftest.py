import pytest

from shopflow.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings so each test sees its own environment."""
    for name in ("PROCESSED_STATUS", "REPORTER", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(f"SHOPFLOW_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
