"""
Camarim — Dressing Room Manager Tests
=======================================
Covers:
- Create / update / remove / lookups
- Per-room item ledger (add, withdraw, totals)
- Display text
"""

import pytest

from camarim.errors import DressingRoomError, ValidationError
from camarim.managers import DressingRoom, DressingRoomManager


@pytest.fixture
def rooms():
    return DressingRoomManager()


class TestDressingRoomRecord:
    def test_add_and_total(self):
        room = DressingRoom(1, "Room A")
        room.add_item(1, "Towel", 2)
        room.add_item(2, "Water", 6)
        room.add_item(1, "Towel", 1)
        assert room.ledger.quantity_of(1) == 3
        assert room.total_items() == 9

    def test_withdraw_to_zero_removes_line(self):
        room = DressingRoom(1, "Room A")
        room.add_item(1, "Towel", 2)
        assert room.withdraw_item(1, 2) is True
        assert 1 not in room.ledger

    def test_withdraw_more_than_held(self):
        room = DressingRoom(1, "Room A")
        room.add_item(1, "Towel", 2)
        with pytest.raises(DressingRoomError):
            room.withdraw_item(1, 5)
        assert room.ledger.quantity_of(1) == 2

    def test_add_zero_rejected(self):
        with pytest.raises(ValidationError):
            DressingRoom(1, "Room A").add_item(1, "Towel", 0)

    def test_display(self):
        room = DressingRoom(3, "Room C", 5)
        room.add_item(1, "Towel", 2)
        text = room.display()
        assert text.startswith("=== DRESSING ROOM ===")
        assert "Name: Room C" in text
        assert "Performer ID: 5" in text
        assert "Total items: 2" in text
        assert "Towel" in text

    def test_name_and_performer_are_read_only(self):
        room = DressingRoom(1, "Room A", 2)
        with pytest.raises(AttributeError):
            room.name = ""
        with pytest.raises(AttributeError):
            room.performer_id = -1
        assert room.name == "Room A"
        assert room.performer_id == 2

    def test_rename_and_assign_validate(self):
        room = DressingRoom(1, "Room A")
        with pytest.raises(ValidationError):
            room.rename("")
        with pytest.raises(ValidationError):
            room.assign_performer(-1)
        room.rename("Room B")
        room.assign_performer(4)
        assert (room.name, room.performer_id) == ("Room B", 4)

    def test_display_empty(self):
        assert "No items in this dressing room" in DressingRoom(1, "A").display()


class TestDressingRoomManager:
    def test_create(self, rooms):
        assert rooms.create("Room A") == 1
        assert rooms.create("Room B", 4) == 2
        assert rooms.find_by_id(2).performer_id == 4

    def test_create_empty_name(self, rooms):
        with pytest.raises(ValidationError):
            rooms.create("")

    def test_update(self, rooms):
        rooms.create("Room A")
        assert rooms.update(1, "Main room", 8) is True
        room = rooms.find_by_id(1)
        assert room.name == "Main room"
        assert room.performer_id == 8

    def test_update_unknown(self, rooms):
        with pytest.raises(DressingRoomError, match="Dressing room with ID 999 not found"):
            rooms.update(999, "X", 1)

    def test_update_invalid_leaves_room(self, rooms):
        rooms.create("Room A", 1)
        with pytest.raises(ValidationError):
            rooms.update(1, "Room B", -1)
        room = rooms.find_by_id(1)
        assert room.name == "Room A"
        assert room.performer_id == 1

    def test_update_keeps_items(self, rooms):
        rooms.create("Room A")
        rooms.find_by_id(1).add_item(1, "Towel", 2)
        rooms.update(1, "Room B", 0)
        assert rooms.find_by_id(1).ledger.quantity_of(1) == 2

    def test_find_by_performer_returns_first(self, rooms):
        rooms.create("Room A", 3)
        rooms.create("Room B", 3)
        assert rooms.find_by_performer_id(3).id == 1
        assert rooms.find_by_performer_id(9) is None

    def test_remove(self, rooms):
        rooms.create("Room A")
        assert rooms.remove(1) is True
        assert rooms.remove(1) is False

    def test_list_all_detached_from_ledgers(self, rooms):
        rooms.create("Room A")
        rooms.find_by_id(1).add_item(1, "Towel", 2)
        snapshot = rooms.list_all()
        snapshot[0].add_item(1, "Towel", 10)
        assert rooms.find_by_id(1).ledger.quantity_of(1) == 2
