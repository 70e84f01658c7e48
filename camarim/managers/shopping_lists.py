"""
Camarim Managers — Shopping Lists
===================================
"""

from __future__ import annotations

from decimal import Decimal

from camarim.config.settings import DEFAULT_SETTINGS, Settings
from camarim.errors import ShoppingListError
from camarim.managers.base import SequentialRegistry
from camarim.primitives.ledger import ShoppingListLedger
from camarim.validation import require_id, require_text


class ShoppingList:
    """Named list of items to buy, priced per line."""

    def __init__(self, id: int, description: str):
        self.id = require_id(id, "Shopping list ID")
        self._description = require_text(description, "Description")
        self.ledger = ShoppingListLedger()

    def __repr__(self) -> str:
        return f"ShoppingList(id={self.id}, description={self._description!r})"

    @property
    def description(self) -> str:
        return self._description

    def rename(self, description: str) -> None:
        self._description = require_text(description, "Description")

    def add_item(self, item_id: int, name: str, quantity: int, unit_price) -> None:
        self.ledger.upsert(item_id, name, quantity, unit_price)

    def remove_item(self, item_id: int) -> bool:
        return self.ledger.remove(item_id)

    def set_quantity(self, item_id: int, quantity: int) -> None:
        self.ledger.set_quantity(item_id, quantity)

    def total(self) -> Decimal:
        return self.ledger.total()

    def clear(self) -> None:
        self.ledger.clear()

    def display(self, settings: Settings = DEFAULT_SETTINGS) -> str:
        lines = [
            "=== SHOPPING LIST ===",
            f"ID: {self.id}",
            f"Description: {self.description}",
            "",
            "Items:",
        ]
        lines.extend(self.ledger.render_lines(indent="  ", settings=settings))
        return "\n".join(lines)


class ShoppingListManager(SequentialRegistry[ShoppingList]):
    """Registry of shopping lists."""

    area = "shopping_lists"
    record_label = "Shopping list"
    not_found_error = ShoppingListError

    def create(self, description: str) -> int:
        require_text(description, "Description")
        return self._append(lambda new_id: ShoppingList(new_id, description))

    def update(self, list_id: int, description: str) -> bool:
        shopping_list = self._require(list_id)
        shopping_list.rename(description)
        self._logger.info(f"Shopping list {list_id} updated")
        return True
