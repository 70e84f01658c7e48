"""
Camarim Config — Runtime Settings
===================================
Process-level settings for logging and money rendering.

Values come from defaults or from the environment:
    CAMARIM_LOG_LEVEL      DEBUG | INFO | WARNING | ERROR   (default WARNING)
    CAMARIM_CURRENCY       currency symbol used in displays (default "R$")
    CAMARIM_MONEY_PLACES   decimal places shown for money   (default 2)

No files are read or written.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


# ══════════════════════════════════════════════════════════════
# SETTINGS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Settings:
    """Immutable runtime settings, built once at process start."""

    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT
    currency_symbol: str = "R$"
    money_places: int = 2

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, "
                f"got '{self.log_level}'."
            )
        if not isinstance(self.money_places, int) or not 0 <= self.money_places <= 6:
            raise ValueError(
                f"money_places must be between 0 and 6, got {self.money_places}."
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        places = env.get("CAMARIM_MONEY_PLACES", "2")
        try:
            money_places = int(places)
        except ValueError:
            raise ValueError(
                f"CAMARIM_MONEY_PLACES must be an integer, got '{places}'."
            )
        return cls(
            log_level=env.get("CAMARIM_LOG_LEVEL", "WARNING").upper(),
            currency_symbol=env.get("CAMARIM_CURRENCY", "R$"),
            money_places=money_places,
        )

    def format_money(self, amount: Decimal) -> str:
        """
        Render an amount as e.g. 'R$ 12.50'.

        Amounts too large to round within the decimal context precision
        are shown unrounded.
        """
        quantum = Decimal(1).scaleb(-self.money_places)
        try:
            rendered = amount.quantize(quantum)
        except InvalidOperation:
            rendered = amount
        return f"{self.currency_symbol} {rendered}"


DEFAULT_SETTINGS = Settings()


def configure_logging(settings: Settings) -> None:
    """Apply level and format to the 'camarim' logger tree."""
    logging.basicConfig(format=settings.log_format)
    logging.getLogger("camarim").setLevel(settings.log_level)
