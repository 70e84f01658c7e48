"""
Camarim — Backstage Inventory
===============================
In-memory management of performers, dressing rooms, the item catalog,
the central stock, orders and shopping lists.

Nothing is persisted: a new process always starts from empty managers.
"""

from camarim.context import BackstageContext
from camarim.errors import (
    CamarimError,
    DressingRoomError,
    ErrorCategory,
    ErrorSpecialization,
    ItemError,
    OrderError,
    PerformerError,
    ShoppingListError,
    StockError,
    StockInsufficientError,
    ValidationError,
)

__all__ = [
    "BackstageContext",
    "CamarimError",
    "DressingRoomError",
    "ErrorCategory",
    "ErrorSpecialization",
    "ItemError",
    "OrderError",
    "PerformerError",
    "ShoppingListError",
    "StockError",
    "StockInsufficientError",
    "ValidationError",
]
