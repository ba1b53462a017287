"""
Pytest configuration
"""
import pytest

from sandbox_gateway.infrastructure.config.settings import get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep tests independent of the developer's environment and cached settings"""
    for var in ("PISTON_URL", "PISTON_TIMEOUT", "LOG_LEVEL", "LOG_FORMAT", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
