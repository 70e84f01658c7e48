"""
Camarim — Input Validation
============================
Shared guards used by records, ledgers and managers.
All guards raise ValidationError and return the accepted value.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from camarim.errors import ValidationError


def require_text(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{what} must not be empty.")
    return value


def require_id(value: Any, what: str) -> int:
    """Identifiers and foreign keys: integers >= 0 (0 means unassigned)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{what} must be an integer.")
    if value < 0:
        raise ValidationError(f"{what} is invalid: {value}.")
    return value


def require_quantity(value: Any, *, allow_zero: bool = False) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Quantity must be an integer.")
    if allow_zero:
        if value < 0:
            raise ValidationError("Quantity cannot be negative.")
    elif value <= 0:
        raise ValidationError("Quantity must be greater than zero.")
    return value


def to_money(value: Any, what: str = "Price") -> Decimal:
    """Convert int/float/str/Decimal into a non-negative Decimal."""
    if isinstance(value, bool):
        raise ValidationError(f"{what} must be a number.")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{what} must be a number, got {value!r}.")
    if not amount.is_finite():
        raise ValidationError(f"{what} must be a finite number.")
    if amount < 0:
        raise ValidationError(f"{what} cannot be negative.")
    return amount
