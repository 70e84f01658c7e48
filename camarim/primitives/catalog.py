"""
Camarim Item Primitive — Catalog of Purchasable Items
=======================================================
The catalog defines which items exist and what they cost. It holds no
quantities: stock, dressing rooms, orders and shopping lists keep their
own lines and their own copy of the item name.

RULES:
- Item names are unique within the catalog (case-sensitive)
- Prices are Decimal, never negative
- Ids start at 1 and are never reused
- Removing an item does not touch any ledger
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import List, Optional

from camarim.config.settings import DEFAULT_SETTINGS, Settings
from camarim.errors import ItemError
from camarim.validation import require_id, require_text, to_money

logger = logging.getLogger("camarim.catalog")


@dataclass(frozen=True)
class Item:
    """Catalog entry. Updates store a new snapshot."""
    id: int
    name: str
    price: Decimal

    def __post_init__(self):
        require_id(self.id, "Item ID")
        require_text(self.name, "Item name")
        object.__setattr__(self, "price", to_money(self.price, "Item price"))

    def display(self, settings: Settings = DEFAULT_SETTINGS) -> str:
        return (
            f"Item [ID: {self.id}, Name: {self.name}, "
            f"Price: {settings.format_money(self.price)}]"
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "price": str(self.price)}


class ItemCatalog:
    """
    In-memory registry of catalog items.

    Lookups scan linearly and return None when nothing matches.
    """

    def __init__(self) -> None:
        self._items: List[Item] = []
        self._next_id = 1

    @property
    def item_count(self) -> int:
        return len(self._items)

    def register(self, name: str, price) -> int:
        """
        Add a new item and return its id.

        Raises:
            ValidationError: Empty name or negative price.
            ItemError: An item with the same name already exists.
        """
        require_text(name, "Item name")
        amount = to_money(price, "Item price")
        if self.find_by_name(name) is not None:
            raise ItemError(f"An item with this name already exists: {name}")

        item = Item(self._next_id, name, amount)
        self._items.append(item)
        self._next_id += 1
        logger.info(f"Item {item.id} registered: {name}")
        return item.id

    def find_by_id(self, item_id: int) -> Optional[Item]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def find_by_name(self, name: str) -> Optional[Item]:
        for item in self._items:
            if item.name == name:
                return item
        return None

    def remove(self, item_id: int) -> bool:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                del self._items[index]
                logger.info(f"Item {item_id} removed")
                return True
        return False

    def update(self, item_id: int, name: str, price) -> bool:
        """
        Rename and reprice an item.

        Raises:
            ItemError: Unknown id, or name taken by another item.
            ValidationError: Empty name or negative price.
        """
        current = self.find_by_id(item_id)
        if current is None:
            raise ItemError(f"Item with ID {item_id} not found")

        holder = self.find_by_name(name)
        if holder is not None and holder.id != item_id:
            raise ItemError(f"Another item already has this name: {name}")

        updated = replace(current, name=name, price=price)
        self._items[self._items.index(current)] = updated
        logger.info(f"Item {item_id} updated")
        return True

    def list_all(self) -> List[Item]:
        return list(self._items)
