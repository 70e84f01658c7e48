"""
Camarim — Errors
==================
Failure kinds raised by every manager and ledger.

Hierarchy:
    CamarimError
    ├── ValidationError
    ├── PerformerError
    ├── ItemError
    ├── StockError
    │   └── StockInsufficientError
    ├── DressingRoomError
    ├── OrderError
    └── ShoppingListError

Each kind prefixes the caller detail with a fixed category label and also
exposes the category as a tag, so callers may match on either the class or
the tag. The shell catches CamarimError, prints it and keeps going.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    """Bounded context a failure belongs to."""
    VALIDATION = "VALIDATION"
    PERFORMER = "PERFORMER"
    ITEM = "ITEM"
    STOCK = "STOCK"
    DRESSING_ROOM = "DRESSING_ROOM"
    ORDER = "ORDER"
    SHOPPING_LIST = "SHOPPING_LIST"


class ErrorSpecialization(Enum):
    """Precise case within a category."""
    INSUFFICIENT = "INSUFFICIENT"


class CamarimError(Exception):
    """Base error for all camarim operations."""

    category: Optional[ErrorCategory] = None
    specialization: Optional[ErrorSpecialization] = None
    label: str = ""

    def __init__(self, detail: str):
        self.detail = detail
        self.message = f"{self.label}{detail}"
        super().__init__(self.message)

    def is_category(self, category: ErrorCategory) -> bool:
        return self.category is category


class ValidationError(CamarimError):
    """Malformed or out-of-range input."""
    category = ErrorCategory.VALIDATION
    label = "Validation error: "


class PerformerError(CamarimError):
    """Performer not found."""
    category = ErrorCategory.PERFORMER
    label = "Performer error: "


class ItemError(CamarimError):
    """Catalog item not found or duplicated."""
    category = ErrorCategory.ITEM
    label = "Item error: "


class StockError(CamarimError):
    """Central stock failure."""
    category = ErrorCategory.STOCK
    label = "Stock error: "


class StockInsufficientError(StockError):
    """Withdrawal exceeds the quantity held in stock."""

    specialization = ErrorSpecialization.INSUFFICIENT

    def __init__(self, detail: str, available: int = 0, requested: int = 0):
        self.available = available
        self.requested = requested
        super().__init__(f"Insufficient stock: {detail}")


class DressingRoomError(CamarimError):
    """Dressing room not found, or its ledger cannot cover a withdrawal."""
    category = ErrorCategory.DRESSING_ROOM
    label = "Dressing room error: "


class OrderError(CamarimError):
    """Order not found or already fulfilled."""
    category = ErrorCategory.ORDER
    label = "Order error: "


class ShoppingListError(CamarimError):
    """Shopping list or one of its lines not found."""
    category = ErrorCategory.SHOPPING_LIST
    label = "Shopping list error: "
