import pytest
import structlog

from partysplit.config import Settings, get_settings
from partysplit.logging import configure_logging, get_logger


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CURRENCY", "€")
    monkeypatch.setenv("DEFAULT_EXPENSE_DESCRIPTION", "Misc")

    settings = Settings()

    assert settings.currency == "€"
    assert settings.default_expense_description == "Misc"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("LOUD")


def test_get_logger_after_configure():
    configure_logging("DEBUG")
    try:
        log = get_logger("partysplit.test")
        log.info("config.test", value=1)
    finally:
        structlog.reset_defaults()
