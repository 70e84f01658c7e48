"""
Camarim Config — Public API
=============================
"""

from camarim.config.settings import (
    DEFAULT_SETTINGS,
    Settings,
    configure_logging,
)

__all__ = [
    "DEFAULT_SETTINGS",
    "Settings",
    "configure_logging",
]
