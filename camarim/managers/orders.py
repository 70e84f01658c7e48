"""
Camarim Managers — Orders
===========================
Purchase orders raised for a dressing room.

Lifecycle:
    PENDING ──mark_fulfilled()──> FULFILLED

Once fulfilled, the order's lines are frozen. Fulfilling does not move
stock; transfers are separate stock / dressing room calls.
"""

from __future__ import annotations

from typing import List

from camarim.config.settings import DEFAULT_SETTINGS, Settings
from camarim.errors import OrderError
from camarim.managers.base import SequentialRegistry
from camarim.primitives.ledger import OrderLedger
from camarim.validation import require_id, require_text


class Order:
    """
    Order record with its line items.

    fulfilled is read-only; mark_fulfilled() is the only transition.
    """

    def __init__(self, id: int, dressing_room_id: int, performer_name: str):
        self.id = require_id(id, "Order ID")
        self.dressing_room_id = require_id(dressing_room_id, "Dressing room ID")
        self.performer_name = require_text(performer_name, "Performer name")
        self._fulfilled = False
        self.ledger = OrderLedger()

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id}, dressing_room_id={self.dressing_room_id}, "
            f"performer_name={self.performer_name!r}, status={self.status})"
        )

    @property
    def fulfilled(self) -> bool:
        return self._fulfilled

    @property
    def status(self) -> str:
        return "FULFILLED" if self.fulfilled else "PENDING"

    def _require_open(self, action: str) -> None:
        if self.fulfilled:
            raise OrderError(f"Cannot {action} an order that is already fulfilled")

    def add_line(self, item_id: int, name: str, quantity: int) -> None:
        self._require_open("add items to")
        self.ledger.upsert(item_id, name, quantity)

    def remove_line(self, item_id: int) -> bool:
        self._require_open("remove items from")
        return self.ledger.remove(item_id)

    def mark_fulfilled(self) -> None:
        self._fulfilled = True

    def display(self, settings: Settings = DEFAULT_SETTINGS) -> str:
        lines = [
            "=== ORDER ===",
            f"ID: {self.id}",
            f"Dressing room ID: {self.dressing_room_id}",
            f"Performer: {self.performer_name}",
            f"Status: {self.status}",
            "",
            "Items:",
        ]
        lines.extend(self.ledger.render_lines(indent="  ", settings=settings))
        return "\n".join(lines)


class OrderManager(SequentialRegistry[Order]):
    """Registry of orders."""

    area = "orders"
    record_label = "Order"
    not_found_error = OrderError

    def create(self, dressing_room_id: int, performer_name: str) -> int:
        require_id(dressing_room_id, "Dressing room ID")
        require_text(performer_name, "Performer name")
        return self._append(
            lambda new_id: Order(new_id, dressing_room_id, performer_name)
        )

    def update(
        self, order_id: int, dressing_room_id: int, performer_name: str
    ) -> bool:
        order = self._require(order_id)
        require_id(dressing_room_id, "Dressing room ID")
        require_text(performer_name, "Performer name")
        order.dressing_room_id = dressing_room_id
        order.performer_name = performer_name
        self._logger.info(f"Order {order_id} updated")
        return True

    def mark_fulfilled(self, order_id: int) -> bool:
        order = self._require(order_id)
        order.mark_fulfilled()
        self._logger.info(f"Order {order_id} fulfilled")
        return True

    def list_pending(self) -> List[Order]:
        return [o for o in self.list_all() if not o.fulfilled]

    def find_by_dressing_room(self, dressing_room_id: int) -> List[Order]:
        return [o for o in self.list_all() if o.dressing_room_id == dressing_room_id]
