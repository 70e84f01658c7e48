"""
Camarim Shell — Interactive Menu
==================================
Text menus over a BackstageContext.

Every operation runs inside a handler that catches CamarimError,
prints "[ERROR] <message>" and returns to the menu; a domain failure
never ends the session. Invalid numbers are asked for again. End of
input ends the session.

Usage:
    python -m camarim
    python -m camarim --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from camarim.config.settings import LOG_LEVELS, Settings, configure_logging
from camarim.context import BackstageContext
from camarim.errors import CamarimError
from camarim.shell.parsing import parse_decimal, parse_int

logger = logging.getLogger("camarim.shell")

MenuEntry = Tuple[str, Callable[[], None]]


class EndOfInput(Exception):
    """Input stream exhausted."""
    pass


class Shell:
    """Menu-driven front end. Streams are injectable for scripted sessions."""

    def __init__(
        self,
        context: BackstageContext,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.ctx = context
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    # ══════════════════════════════════════════════════════════
    # I/O HELPERS
    # ══════════════════════════════════════════════════════════

    def _say(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EndOfInput()
        return line.rstrip("\n")

    def _ask_int(self, prompt: str) -> int:
        while True:
            try:
                return parse_int(self._ask(prompt))
            except CamarimError as exc:
                self._say(f"[ERROR] {exc}")

    def _ask_decimal(self, prompt: str):
        while True:
            try:
                return parse_decimal(self._ask(prompt))
            except CamarimError as exc:
                self._say(f"[ERROR] {exc}")

    def _attempt(self, action: Callable[[], object], success: str) -> None:
        try:
            action()
        except CamarimError as exc:
            logger.info(f"Operation rejected: {exc}")
            self._say(f"[ERROR] {exc}")
        else:
            self._say(f"[OK] {success}")

    def _show_all(self, records: List, empty: str) -> None:
        if not records:
            self._say(empty)
            return
        for record in records:
            self._say(record.display(self.ctx.settings))

    def _menu(self, title: str, entries: Dict[str, MenuEntry]) -> None:
        while True:
            self._say(f"\n=== {title} ===")
            for key, (label, _) in entries.items():
                self._say(f"{key}. {label}")
            self._say("0. Back")
            choice = self._ask("Option: ").strip()
            if choice == "0":
                return
            entry = entries.get(choice)
            if entry is None:
                self._say("Invalid option.")
                continue
            logger.debug(f"{title}: option {choice}")
            entry[1]()

    # ══════════════════════════════════════════════════════════
    # MAIN LOOP
    # ══════════════════════════════════════════════════════════

    def run(self) -> None:
        entries = {
            "1": ("Item catalog", self.catalog_menu),
            "2": ("Stock", self.stock_menu),
            "3": ("Dressing rooms", self.dressing_room_menu),
            "4": ("Performers", self.performer_menu),
            "5": ("Orders", self.order_menu),
            "6": ("Shopping lists", self.shopping_list_menu),
        }
        try:
            while True:
                self._say("\n=== BACKSTAGE ===")
                for key, (label, _) in entries.items():
                    self._say(f"{key}. {label}")
                self._say("0. Quit")
                choice = self._ask("Option: ").strip()
                if choice == "0":
                    break
                entry = entries.get(choice)
                if entry is None:
                    self._say("Invalid option.")
                    continue
                entry[1]()
        except EndOfInput:
            logger.debug("Input closed, leaving shell")
        self._say("Goodbye.")

    # ══════════════════════════════════════════════════════════
    # CATALOG
    # ══════════════════════════════════════════════════════════

    def catalog_menu(self) -> None:
        self._menu("Item catalog", {
            "1": ("Show", self.show_catalog),
            "2": ("Register", self.register_item),
            "3": ("Remove", self.remove_item),
            "4": ("Update", self.update_item),
            "5": ("Find by name", self.find_item_by_name),
        })

    def show_catalog(self) -> None:
        self._show_all(self.ctx.catalog.list_all(), "No items in the catalog.")

    def register_item(self) -> None:
        name = self._ask("Item name: ")
        price = self._ask_decimal("Unit price: ")
        try:
            item_id = self.ctx.catalog.register(name, price)
        except CamarimError as exc:
            self._say(f"[ERROR] {exc}")
        else:
            self._say(f"[OK] Item registered with ID {item_id}")

    def remove_item(self) -> None:
        item_id = self._ask_int("Item ID: ")
        if self.ctx.catalog.remove(item_id):
            self._say("[OK] Item removed from the catalog")
        else:
            self._say("[ERROR] Item not found")

    def update_item(self) -> None:
        item_id = self._ask_int("Item ID: ")
        name = self._ask("New name: ")
        price = self._ask_decimal("New unit price: ")
        self._attempt(
            lambda: self.ctx.catalog.update(item_id, name, price), "Item updated"
        )

    def find_item_by_name(self) -> None:
        item = self.ctx.catalog.find_by_name(self._ask("Item name: "))
        self._say(item.display(self.ctx.settings) if item else "Item not found.")

    def _catalog_item(self):
        item = self.ctx.catalog.find_by_id(self._ask_int("Item ID (catalog): "))
        if item is None:
            self._say("[ERROR] Item not found in the catalog")
        return item

    # ══════════════════════════════════════════════════════════
    # STOCK
    # ══════════════════════════════════════════════════════════

    def stock_menu(self) -> None:
        self._menu("Stock", {
            "1": ("Show", self.show_stock),
            "2": ("Add item", self.add_stock),
            "3": ("Withdraw item", self.withdraw_stock),
            "4": ("Check availability", self.check_stock),
            "5": ("Quantity on hand", self.stock_quantity),
            "6": ("Set quantity", self.set_stock_quantity),
        })

    def show_stock(self) -> None:
        self._say(self.ctx.stock.display(self.ctx.settings))

    def add_stock(self) -> None:
        item = self._catalog_item()
        if item is None:
            return
        quantity = self._ask_int("Quantity: ")
        self._attempt(
            lambda: self.ctx.stock.upsert(item.id, item.name, quantity),
            "Stock updated",
        )

    def withdraw_stock(self) -> None:
        item_id = self._ask_int("Item ID: ")
        quantity = self._ask_int("Quantity to withdraw: ")
        self._attempt(
            lambda: self.ctx.stock.withdraw(item_id, quantity), "Stock withdrawn"
        )

    def check_stock(self) -> None:
        item_id = self._ask_int("Item ID: ")
        quantity = self._ask_int("Quantity needed: ")
        if self.ctx.stock.check_availability(item_id, quantity):
            self._say("Available.")
        else:
            self._say("Not available.")

    def stock_quantity(self) -> None:
        item_id = self._ask_int("Item ID: ")
        self._say(f"Quantity on hand: {self.ctx.stock.quantity_of(item_id)}")

    def set_stock_quantity(self) -> None:
        item_id = self._ask_int("Item ID: ")
        quantity = self._ask_int("New quantity: ")
        self._attempt(
            lambda: self.ctx.stock.set_quantity(item_id, quantity),
            "Quantity updated",
        )

    # ══════════════════════════════════════════════════════════
    # DRESSING ROOMS
    # ══════════════════════════════════════════════════════════

    def dressing_room_menu(self) -> None:
        self._menu("Dressing rooms", {
            "1": ("Show", self.show_dressing_rooms),
            "2": ("Create", self.create_dressing_room),
            "3": ("Remove", self.remove_dressing_room),
            "4": ("Add item", self.add_dressing_room_item),
            "5": ("Withdraw item", self.withdraw_dressing_room_item),
            "6": ("Update", self.update_dressing_room),
            "7": ("Find by performer", self.find_dressing_room_by_performer),
        })

    def _dressing_room(self):
        room = self.ctx.dressing_rooms.find_by_id(self._ask_int("Dressing room ID: "))
        if room is None:
            self._say("[ERROR] Dressing room not found")
        return room

    def show_dressing_rooms(self) -> None:
        self._show_all(
            self.ctx.dressing_rooms.list_all(), "No dressing rooms registered."
        )

    def create_dressing_room(self) -> None:
        name = self._ask("Dressing room name: ")
        performer_id = self._ask_int("Performer ID (0 for none): ")
        try:
            room_id = self.ctx.dressing_rooms.create(name, performer_id)
        except CamarimError as exc:
            self._say(f"[ERROR] {exc}")
        else:
            self._say(f"[OK] Dressing room created with ID {room_id}")

    def remove_dressing_room(self) -> None:
        if self.ctx.dressing_rooms.remove(self._ask_int("Dressing room ID: ")):
            self._say("[OK] Dressing room removed")
        else:
            self._say("[ERROR] Dressing room not found")

    def add_dressing_room_item(self) -> None:
        room = self._dressing_room()
        if room is None:
            return
        item = self._catalog_item()
        if item is None:
            return
        quantity = self._ask_int("Quantity: ")
        self._attempt(
            lambda: room.add_item(item.id, item.name, quantity),
            "Item added to the dressing room",
        )

    def withdraw_dressing_room_item(self) -> None:
        room = self._dressing_room()
        if room is None:
            return
        item_id = self._ask_int("Item ID: ")
        quantity = self._ask_int("Quantity to withdraw: ")
        self._attempt(
            lambda: room.withdraw_item(item_id, quantity),
            "Item withdrawn from the dressing room",
        )

    def update_dressing_room(self) -> None:
        room_id = self._ask_int("Dressing room ID: ")
        name = self._ask("New name: ")
        performer_id = self._ask_int("New performer ID: ")
        self._attempt(
            lambda: self.ctx.dressing_rooms.update(room_id, name, performer_id),
            "Dressing room updated",
        )

    def find_dressing_room_by_performer(self) -> None:
        room = self.ctx.dressing_rooms.find_by_performer_id(
            self._ask_int("Performer ID: ")
        )
        self._say(room.display(self.ctx.settings) if room else "No dressing room found.")

    # ══════════════════════════════════════════════════════════
    # PERFORMERS
    # ══════════════════════════════════════════════════════════

    def performer_menu(self) -> None:
        self._menu("Performers", {
            "1": ("Show", self.show_performers),
            "2": ("Create", self.create_performer),
            "3": ("Remove", self.remove_performer),
            "4": ("Update", self.update_performer),
            "5": ("Find by dressing room", self.find_performers_by_dressing_room),
        })

    def show_performers(self) -> None:
        performers = self.ctx.performers.list_all()
        if not performers:
            self._say("No performers registered.")
        for performer in performers:
            self._say(performer.display())

    def create_performer(self) -> None:
        name = self._ask("Performer name: ")
        room_id = self._ask_int("Dressing room ID (0 for none): ")
        try:
            performer_id = self.ctx.performers.create(name, room_id)
        except CamarimError as exc:
            self._say(f"[ERROR] {exc}")
        else:
            self._say(f"[OK] Performer created with ID {performer_id}")

    def remove_performer(self) -> None:
        if self.ctx.performers.remove(self._ask_int("Performer ID: ")):
            self._say("[OK] Performer removed")
        else:
            self._say("[ERROR] Performer not found")

    def update_performer(self) -> None:
        performer_id = self._ask_int("Performer ID: ")
        name = self._ask("New name: ")
        room_id = self._ask_int("New dressing room ID: ")
        self._attempt(
            lambda: self.ctx.performers.update(performer_id, name, room_id),
            "Performer updated",
        )

    def find_performers_by_dressing_room(self) -> None:
        performers = self.ctx.performers.find_all_by_dressing_room(
            self._ask_int("Dressing room ID: ")
        )
        if not performers:
            self._say("No performers in this dressing room.")
        for performer in performers:
            self._say(performer.display())

    # ══════════════════════════════════════════════════════════
    # ORDERS
    # ══════════════════════════════════════════════════════════

    def order_menu(self) -> None:
        self._menu("Orders", {
            "1": ("Show", self.show_orders),
            "2": ("Create", self.create_order),
            "3": ("Remove", self.remove_order),
            "4": ("Add item", self.add_order_line),
            "5": ("Remove item", self.remove_order_line),
            "6": ("Mark fulfilled", self.fulfil_order),
            "7": ("List pending", self.show_pending_orders),
            "8": ("Find by dressing room", self.find_orders_by_dressing_room),
        })

    def _order(self):
        order = self.ctx.orders.find_by_id(self._ask_int("Order ID: "))
        if order is None:
            self._say("[ERROR] Order not found")
        return order

    def show_orders(self) -> None:
        self._show_all(self.ctx.orders.list_all(), "No orders registered.")

    def create_order(self) -> None:
        room_id = self._ask_int("Dressing room ID: ")
        performer_name = self._ask("Performer name: ")
        try:
            order_id = self.ctx.orders.create(room_id, performer_name)
        except CamarimError as exc:
            self._say(f"[ERROR] {exc}")
        else:
            self._say(f"[OK] Order created with ID {order_id}")

    def remove_order(self) -> None:
        if self.ctx.orders.remove(self._ask_int("Order ID: ")):
            self._say("[OK] Order removed")
        else:
            self._say("[ERROR] Order not found")

    def add_order_line(self) -> None:
        order = self._order()
        if order is None:
            return
        item = self._catalog_item()
        if item is None:
            return
        quantity = self._ask_int("Quantity: ")
        self._attempt(
            lambda: order.add_line(item.id, item.name, quantity),
            "Item added to the order",
        )

    def remove_order_line(self) -> None:
        order = self._order()
        if order is None:
            return
        item_id = self._ask_int("Item ID: ")
        try:
            removed = order.remove_line(item_id)
        except CamarimError as exc:
            self._say(f"[ERROR] {exc}")
            return
        self._say("[OK] Item removed from the order" if removed else "[ERROR] Item not in the order")

    def fulfil_order(self) -> None:
        order_id = self._ask_int("Order ID: ")
        self._attempt(
            lambda: self.ctx.orders.mark_fulfilled(order_id), "Order marked as fulfilled"
        )

    def show_pending_orders(self) -> None:
        self._show_all(self.ctx.orders.list_pending(), "No pending orders.")

    def find_orders_by_dressing_room(self) -> None:
        orders = self.ctx.orders.find_by_dressing_room(self._ask_int("Dressing room ID: "))
        self._show_all(orders, "No orders for this dressing room.")

    # ══════════════════════════════════════════════════════════
    # SHOPPING LISTS
    # ══════════════════════════════════════════════════════════

    def shopping_list_menu(self) -> None:
        self._menu("Shopping lists", {
            "1": ("Show", self.show_shopping_lists),
            "2": ("Create", self.create_shopping_list),
            "3": ("Remove", self.remove_shopping_list),
            "4": ("Add item", self.add_shopping_item),
            "5": ("Remove item", self.remove_shopping_item),
            "6": ("Set item quantity", self.set_shopping_quantity),
            "7": ("Total", self.shopping_total),
            "8": ("Clear", self.clear_shopping_list),
        })

    def _shopping_list(self):
        shopping_list = self.ctx.shopping_lists.find_by_id(self._ask_int("List ID: "))
        if shopping_list is None:
            self._say("[ERROR] Shopping list not found")
        return shopping_list

    def show_shopping_lists(self) -> None:
        self._show_all(self.ctx.shopping_lists.list_all(), "No shopping lists registered.")

    def create_shopping_list(self) -> None:
        description = self._ask("Description: ")
        try:
            list_id = self.ctx.shopping_lists.create(description)
        except CamarimError as exc:
            self._say(f"[ERROR] {exc}")
        else:
            self._say(f"[OK] Shopping list created with ID {list_id}")

    def remove_shopping_list(self) -> None:
        if self.ctx.shopping_lists.remove(self._ask_int("List ID: ")):
            self._say("[OK] Shopping list removed")
        else:
            self._say("[ERROR] Shopping list not found")

    def add_shopping_item(self) -> None:
        shopping_list = self._shopping_list()
        if shopping_list is None:
            return
        item = self._catalog_item()
        if item is None:
            return
        quantity = self._ask_int("Quantity: ")
        self._attempt(
            lambda: shopping_list.add_item(item.id, item.name, quantity, item.price),
            "Item added to the list",
        )

    def remove_shopping_item(self) -> None:
        shopping_list = self._shopping_list()
        if shopping_list is None:
            return
        if shopping_list.remove_item(self._ask_int("Item ID: ")):
            self._say("[OK] Item removed from the list")
        else:
            self._say("[ERROR] Item not in the list")

    def set_shopping_quantity(self) -> None:
        shopping_list = self._shopping_list()
        if shopping_list is None:
            return
        item_id = self._ask_int("Item ID: ")
        quantity = self._ask_int("New quantity: ")
        self._attempt(
            lambda: shopping_list.set_quantity(item_id, quantity), "Quantity updated"
        )

    def shopping_total(self) -> None:
        shopping_list = self._shopping_list()
        if shopping_list is None:
            return
        self._say(f"Total: {self.ctx.settings.format_money(shopping_list.total())}")

    def clear_shopping_list(self) -> None:
        shopping_list = self._shopping_list()
        if shopping_list is None:
            return
        shopping_list.clear()
        self._say("[OK] Shopping list cleared")


# ══════════════════════════════════════════════════════════════
# ENTRY POINT
# ══════════════════════════════════════════════════════════════

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="camarim", description="Backstage inventory shell."
    )
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None)
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    if args.log_level:
        settings = replace(settings, log_level=args.log_level)
    configure_logging(settings)

    Shell(BackstageContext.create(settings)).run()
    return 0
