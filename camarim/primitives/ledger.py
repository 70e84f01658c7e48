"""
Camarim Ledger Primitive — Item Quantity Accounting
=====================================================
Keyed item → quantity records, instantiated four times:

    StockLedger         central stock, collapses lines at zero
    DressingRoomLedger  items allocated to one dressing room, collapses at zero
    OrderLedger         requested quantities of one order, keeps lines
    ShoppingListLedger  quantities with unit price and subtotal, keeps lines

RULES:
- A line is keyed by item_id; adding to an existing line sums quantities
- Stock and dressing-room lines never persist at quantity 0
- Order and shopping-list lines stay until removed explicitly
- Lines are frozen snapshots; every change stores a new line
- Lines carry their own item name, independent of the catalog

This file contains NO persistence logic.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Dict, List, Type

from camarim.config.settings import DEFAULT_SETTINGS, Settings
from camarim.errors import (
    CamarimError,
    DressingRoomError,
    ShoppingListError,
    StockError,
    StockInsufficientError,
)
from camarim.primitives.display import render_table
from camarim.validation import require_id, require_quantity, require_text, to_money

logger = logging.getLogger("camarim.ledger")


# ══════════════════════════════════════════════════════════════
# LEDGER LINES
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class LedgerLine:
    """
    Quantity of one item held by a ledger.

    item_name is a snapshot taken when the line was first created.
    """
    item_id: int
    item_name: str
    quantity: int

    def __post_init__(self):
        require_id(self.item_id, "Item ID")
        require_text(self.item_name, "Item name")
        require_quantity(self.quantity, allow_zero=True)

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "item_name": self.item_name,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class PricedLedgerLine(LedgerLine):
    """Line that also tracks a unit price; subtotal is always derived."""
    unit_price: Decimal = Decimal("0")

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "unit_price", to_money(self.unit_price))

    @property
    def subtotal(self) -> Decimal:
        return self.quantity * self.unit_price

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["unit_price"] = str(self.unit_price)
        data["subtotal"] = str(self.subtotal)
        return data


# ══════════════════════════════════════════════════════════════
# BASE LEDGER
# ══════════════════════════════════════════════════════════════

class QuantityLedger:
    """
    Insertion-ordered mapping of item_id → LedgerLine.

    Subclasses decide which mutations exist and which error kind
    signals a missing line.
    """

    title = "LEDGER"
    empty_text = "No items"
    not_found_error: Type[CamarimError] = CamarimError

    def __init__(self) -> None:
        self._lines: Dict[int, LedgerLine] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._lines

    def _require_line(self, item_id: int) -> LedgerLine:
        line = self._lines.get(item_id)
        if line is None:
            raise self.not_found_error(
                f"Item not found (ID: {item_id})."
            )
        return line

    def _accumulate(
        self, item_id: int, name: str, quantity: int, *, allow_zero: bool = False
    ) -> None:
        require_id(item_id, "Item ID")
        require_text(name, "Item name")
        require_quantity(quantity, allow_zero=allow_zero)

        existing = self._lines.get(item_id)
        if existing is not None:
            self._lines[item_id] = replace(
                existing, quantity=existing.quantity + quantity
            )
        else:
            self._lines[item_id] = LedgerLine(item_id, name, quantity)
        logger.debug(
            f"{type(self).__name__}: +{quantity} of item {item_id} "
            f"(now {self._lines[item_id].quantity})"
        )

    def check_availability(self, item_id: int, quantity: int) -> bool:
        """True iff a line exists holding at least `quantity`."""
        line = self._lines.get(item_id)
        if line is None:
            return False
        return line.quantity >= quantity

    def quantity_of(self, item_id: int) -> int:
        line = self._lines.get(item_id)
        return line.quantity if line is not None else 0

    def get(self, item_id: int):
        return self._lines.get(item_id)

    def list(self) -> List[LedgerLine]:
        return list(self._lines.values())

    def total_quantity(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    def render_lines(
        self, indent: str = "", settings: Settings = DEFAULT_SETTINGS
    ) -> List[str]:
        if not self._lines:
            return [f"{indent}{self.empty_text}"]
        return render_table(
            [("ID", 5), ("Name", 30), ("Quantity", 10)],
            [(l.item_id, l.item_name, l.quantity) for l in self._lines.values()],
            indent=indent,
        )

    def display(self, settings: Settings = DEFAULT_SETTINGS) -> str:
        lines = [f"=== {self.title} ==="]
        lines.extend(self.render_lines(settings=settings))
        return "\n".join(lines)


# ══════════════════════════════════════════════════════════════
# COLLAPSING LEDGERS (physical presence)
# ══════════════════════════════════════════════════════════════

class CollapsingLedger(QuantityLedger, ABC):
    """Ledger whose lines disappear when their quantity reaches zero."""

    @abstractmethod
    def _insufficient(self, line: LedgerLine, quantity: int) -> CamarimError:
        """Error raised when `quantity` exceeds what the line holds."""
        ...

    def _store(self, line: LedgerLine, quantity: int) -> None:
        if quantity == 0:
            del self._lines[line.item_id]
            logger.debug(
                f"{type(self).__name__}: item {line.item_id} reached zero, removed"
            )
        else:
            self._lines[line.item_id] = replace(line, quantity=quantity)

    def withdraw(self, item_id: int, quantity: int) -> bool:
        """
        Subtract `quantity` from the line for item_id.

        Raises:
            not_found_error: No line for item_id.
            ValidationError: Negative quantity.
            insufficient kind: Stored quantity below `quantity`;
                the line is left unchanged.
        """
        line = self._require_line(item_id)
        require_quantity(quantity, allow_zero=True)
        if line.quantity < quantity:
            logger.warning(
                f"{type(self).__name__}: rejected withdrawal of {quantity} "
                f"of item {item_id}, only {line.quantity} held"
            )
            raise self._insufficient(line, quantity)

        self._store(line, line.quantity - quantity)
        logger.debug(f"{type(self).__name__}: -{quantity} of item {item_id}")
        return True


class StockLedger(CollapsingLedger):
    """The single central stock of physically available items."""

    title = "STOCK"
    empty_text = "Stock is empty"
    not_found_error = StockError

    def upsert(self, item_id: int, name: str, quantity: int) -> None:
        """Add stock. Adding zero is accepted and changes nothing."""
        if quantity == 0:
            require_id(item_id, "Item ID")
            require_text(name, "Item name")
            return
        self._accumulate(item_id, name, quantity, allow_zero=True)

    def _insufficient(self, line: LedgerLine, quantity: int) -> CamarimError:
        return StockInsufficientError(
            f"Available: {line.quantity}, requested: {quantity}.",
            available=line.quantity,
            requested=quantity,
        )

    def set_quantity(self, item_id: int, new_quantity: int) -> None:
        """Overwrite the stored quantity; zero removes the line."""
        line = self._require_line(item_id)
        require_quantity(new_quantity, allow_zero=True)
        self._store(line, new_quantity)


class DressingRoomLedger(CollapsingLedger):
    """Items currently allocated to one dressing room."""

    title = "DRESSING ROOM ITEMS"
    empty_text = "No items in this dressing room"
    not_found_error = DressingRoomError

    def upsert(self, item_id: int, name: str, quantity: int) -> None:
        self._accumulate(item_id, name, quantity)

    def _insufficient(self, line: LedgerLine, quantity: int) -> CamarimError:
        return DressingRoomError(
            f"Insufficient quantity in dressing room. "
            f"Available: {line.quantity}, requested: {quantity}."
        )


# ══════════════════════════════════════════════════════════════
# RETAINING LEDGERS (intent)
# ══════════════════════════════════════════════════════════════

class RetainingLedger(QuantityLedger):
    """Ledger whose lines stay until removed explicitly."""

    def remove(self, item_id: int) -> bool:
        """Drop the line whatever its quantity. False when absent."""
        if item_id not in self._lines:
            return False
        del self._lines[item_id]
        return True


class OrderLedger(RetainingLedger):
    """Requested quantities of one order."""

    title = "ORDER ITEMS"
    empty_text = "No items in this order"

    def upsert(self, item_id: int, name: str, quantity: int) -> None:
        self._accumulate(item_id, name, quantity)


class ShoppingListLedger(RetainingLedger):
    """Shopping quantities with unit price and subtotal."""

    title = "SHOPPING LIST ITEMS"
    empty_text = "List is empty"
    not_found_error = ShoppingListError

    def upsert(
        self, item_id: int, name: str, quantity: int, unit_price
    ) -> None:
        """
        Add `quantity` of an item at `unit_price`.

        On an existing line the latest supplied unit price replaces
        the stored one and the subtotal follows it.
        """
        require_id(item_id, "Item ID")
        require_text(name, "Item name")
        require_quantity(quantity)
        price = to_money(unit_price)

        existing = self._lines.get(item_id)
        if existing is not None:
            self._lines[item_id] = replace(
                existing,
                quantity=existing.quantity + quantity,
                unit_price=price,
            )
        else:
            self._lines[item_id] = PricedLedgerLine(item_id, name, quantity, price)
        logger.debug(
            f"ShoppingListLedger: +{quantity} of item {item_id} at {price}"
        )

    def set_quantity(self, item_id: int, new_quantity: int) -> None:
        line = self._require_line(item_id)
        require_quantity(new_quantity)
        self._lines[item_id] = replace(line, quantity=new_quantity)

    def total(self) -> Decimal:
        return sum((line.subtotal for line in self._lines.values()), Decimal("0"))

    def clear(self) -> None:
        self._lines.clear()

    def render_lines(
        self, indent: str = "", settings: Settings = DEFAULT_SETTINGS
    ) -> List[str]:
        if not self._lines:
            return [f"{indent}{self.empty_text}"]
        lines = render_table(
            [("ID", 5), ("Name", 25), ("Qty", 8), ("Unit price", 14), ("Subtotal", 14)],
            [
                (
                    l.item_id,
                    l.item_name,
                    l.quantity,
                    settings.format_money(l.unit_price),
                    settings.format_money(l.subtotal),
                )
                for l in self._lines.values()
            ],
            indent=indent,
        )
        lines.append(indent + "-" * 66)
        lines.append(f"{indent}TOTAL: {settings.format_money(self.total())}")
        return lines
