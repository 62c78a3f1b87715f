from __future__ import annotations

from finmetrics_app.core.config import Settings


def test_settings_defaults():
    settings = Settings(_env_file=None)

    assert settings.DEFAULT_CURRENCY == "EUR"
    assert settings.LOG_LEVEL == "INFO"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DEFAULT_CURRENCY", "GBP")
    monkeypatch.setenv("ALLOWED_HOSTS", '["https://calc.example.com"]')

    settings = Settings(_env_file=None)

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.DEFAULT_CURRENCY == "GBP"
    assert settings.ALLOWED_HOSTS == ["https://calc.example.com"]


def test_currency_config_defaults_to_configured_currency():
    from finmetrics_app.core.config import settings
    from finmetrics_app.models.common import CurrencyConfig

    config = CurrencyConfig()

    assert config.currency_name == settings.DEFAULT_CURRENCY
    assert config.ratio == 1.0
