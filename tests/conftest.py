import pytest
import structlog

from rachaconta.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for name in (
        "RACHACONTA_STRATEGY",
        "RACHACONTA_TOLERANCE_PER_HEAD",
        "RACHACONTA_STRICT",
        "RACHACONTA_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
