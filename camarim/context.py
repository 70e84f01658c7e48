"""
Camarim Context — BackstageContext
====================================
The one set of managers a process works with. Built once at start-up
and handed to whatever drives it (the shell, tests); there is no
module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from camarim.config.settings import Settings
from camarim.managers.dressing_rooms import DressingRoomManager
from camarim.managers.orders import OrderManager
from camarim.managers.performers import PerformerManager
from camarim.managers.shopping_lists import ShoppingListManager
from camarim.primitives.catalog import ItemCatalog
from camarim.primitives.ledger import StockLedger


@dataclass
class BackstageContext:
    """Catalog, central stock and every entity manager."""

    settings: Settings = field(default_factory=Settings)
    catalog: ItemCatalog = field(default_factory=ItemCatalog)
    stock: StockLedger = field(default_factory=StockLedger)
    performers: PerformerManager = field(default_factory=PerformerManager)
    dressing_rooms: DressingRoomManager = field(default_factory=DressingRoomManager)
    orders: OrderManager = field(default_factory=OrderManager)
    shopping_lists: ShoppingListManager = field(default_factory=ShoppingListManager)

    @classmethod
    def create(cls, settings: Optional[Settings] = None) -> BackstageContext:
        """Fresh, empty context; every id counter starts at 1."""
        return cls(settings=settings or Settings())
