"""
Camarim Shell — Numeric Input Parsing
=======================================
Operators type prices with either a comma or a dot as the decimal
separator ("12,50" or "12.50"). The core only ever sees parsed values.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from camarim.errors import ValidationError


def parse_decimal(text: str) -> Decimal:
    raw = text.strip().replace(",", ".")
    if not raw:
        raise ValidationError("A number is required.")
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f"'{text.strip()}' is not a valid number.")
    if not value.is_finite():
        raise ValidationError(f"'{text.strip()}' is not a valid number.")
    return value


def parse_int(text: str) -> int:
    raw = text.strip()
    if not raw:
        raise ValidationError("An integer is required.")
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"'{raw}' is not a valid integer.")
