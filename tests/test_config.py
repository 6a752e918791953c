from decimal import Decimal

from rachaconta.config import get_settings
from rachaconta.services.strategy import Strategy


def test_defaults():
    settings = get_settings()
    assert settings.strategy == Strategy.GREEDY
    assert settings.tolerance_per_head == Decimal("0.005")
    assert settings.strict is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RACHACONTA_STRATEGY", "netting")
    monkeypatch.setenv("RACHACONTA_STRICT", "true")
    monkeypatch.setenv("RACHACONTA_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.strategy == Strategy.NETTING
    assert settings.strict is True
    assert settings.log_level == "debug"
