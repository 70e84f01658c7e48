"""
Camarim Managers — Dressing Rooms
===================================
A dressing room owns the ledger of items currently allocated to it.
Moving items in from the central stock is the caller's job: withdraw
from StockLedger, then add_item here.
"""

from __future__ import annotations

from typing import Optional

from camarim.config.settings import DEFAULT_SETTINGS, Settings
from camarim.errors import DressingRoomError
from camarim.managers.base import SequentialRegistry
from camarim.primitives.ledger import DressingRoomLedger
from camarim.validation import require_id, require_text


class DressingRoom:
    """
    Dressing room record.

    performer_id == 0 means no performer assigned. Name and performer
    are read-only; they change only through rename() / assign_performer().
    """

    def __init__(self, id: int, name: str, performer_id: int = 0):
        self.id = require_id(id, "Dressing room ID")
        self._name = require_text(name, "Dressing room name")
        self._performer_id = require_id(performer_id, "Performer ID")
        self.ledger = DressingRoomLedger()

    def __repr__(self) -> str:
        return (
            f"DressingRoom(id={self.id}, name={self._name!r}, "
            f"performer_id={self._performer_id})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def performer_id(self) -> int:
        return self._performer_id

    def rename(self, name: str) -> None:
        self._name = require_text(name, "Dressing room name")

    def assign_performer(self, performer_id: int) -> None:
        self._performer_id = require_id(performer_id, "Performer ID")

    def add_item(self, item_id: int, name: str, quantity: int) -> None:
        self.ledger.upsert(item_id, name, quantity)

    def withdraw_item(self, item_id: int, quantity: int) -> bool:
        return self.ledger.withdraw(item_id, quantity)

    def total_items(self) -> int:
        return self.ledger.total_quantity()

    def display(self, settings: Settings = DEFAULT_SETTINGS) -> str:
        lines = [
            "=== DRESSING ROOM ===",
            f"ID: {self.id}",
            f"Name: {self.name}",
            f"Performer ID: {self.performer_id}",
            f"Total items: {self.total_items()}",
            "",
            "Items:",
        ]
        lines.extend(self.ledger.render_lines(indent="  ", settings=settings))
        return "\n".join(lines)


class DressingRoomManager(SequentialRegistry[DressingRoom]):
    """Registry of dressing rooms."""

    area = "dressing_rooms"
    record_label = "Dressing room"
    not_found_error = DressingRoomError

    def create(self, name: str, performer_id: int = 0) -> int:
        require_text(name, "Dressing room name")
        require_id(performer_id, "Performer ID")
        return self._append(lambda new_id: DressingRoom(new_id, name, performer_id))

    def update(self, dressing_room_id: int, name: str, performer_id: int) -> bool:
        room = self._require(dressing_room_id)
        require_text(name, "Dressing room name")
        require_id(performer_id, "Performer ID")
        room.rename(name)
        room.assign_performer(performer_id)
        self._logger.info(f"Dressing room {dressing_room_id} updated")
        return True

    def find_by_performer_id(self, performer_id: int) -> Optional[DressingRoom]:
        for room in self._records:
            if room.performer_id == performer_id:
                return room
        return None
