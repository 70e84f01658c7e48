"""
Camarim — Settings Tests
==========================
Covers:
- Defaults and validation
- Environment overrides
- Money formatting
- Logger configuration
"""

import logging
from decimal import Decimal

import pytest

from camarim.config import DEFAULT_SETTINGS, Settings, configure_logging


class TestSettingsDefaults:
    def test_defaults(self):
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.currency_symbol == "R$"
        assert settings.money_places == 2

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_SETTINGS.log_level = "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="log_level"):
            Settings(log_level="LOUD")

    def test_money_places_range(self):
        with pytest.raises(ValueError, match="money_places"):
            Settings(money_places=9)


class TestSettingsFromEnv:
    def test_empty_environment_gives_defaults(self):
        assert Settings.from_env({}) == Settings()

    def test_overrides(self):
        settings = Settings.from_env({
            "CAMARIM_LOG_LEVEL": "debug",
            "CAMARIM_CURRENCY": "EUR",
            "CAMARIM_MONEY_PLACES": "3",
        })
        assert settings.log_level == "DEBUG"
        assert settings.currency_symbol == "EUR"
        assert settings.money_places == 3

    def test_bad_money_places(self):
        with pytest.raises(ValueError, match="CAMARIM_MONEY_PLACES"):
            Settings.from_env({"CAMARIM_MONEY_PLACES": "two"})


class TestFormatMoney:
    def test_two_places(self):
        assert Settings().format_money(Decimal("12.5")) == "R$ 12.50"

    def test_zero_places(self):
        assert Settings(money_places=0, currency_symbol="$").format_money(Decimal("7")) == "$ 7"

    def test_amount_beyond_context_precision_shown_unrounded(self):
        assert Settings().format_money(Decimal("1e30")) == "R$ 1E+30"


class TestConfigureLogging:
    def test_sets_package_logger_level(self):
        logger = logging.getLogger("camarim")
        previous = logger.level
        try:
            configure_logging(Settings(log_level="DEBUG"))
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
