"""
Camarim — Catalog and People Primitive Tests
==============================================
Covers:
- Item registration, unique names, monotonic ids
- Update conflicts and unknown ids
- Performer snapshots and display text
"""

from decimal import Decimal

import pytest

from camarim.errors import ItemError, ValidationError
from camarim.primitives.catalog import Item, ItemCatalog
from camarim.primitives.people import Performer, Person


class TestItem:
    def test_price_converted_to_decimal(self):
        item = Item(1, "Towel", "12.5")
        assert item.price == Decimal("12.5")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Item price cannot be negative"):
            Item(1, "Towel", -1)

    def test_display(self):
        assert Item(1, "Towel", Decimal("12.5")).display() == (
            "Item [ID: 1, Name: Towel, Price: R$ 12.50]"
        )

    def test_to_dict(self):
        assert Item(3, "Soap", Decimal("1.99")).to_dict() == {
            "id": 3, "name": "Soap", "price": "1.99",
        }


class TestItemCatalogRegister:
    def test_register_assigns_sequential_ids(self):
        catalog = ItemCatalog()
        assert catalog.register("Towel", Decimal("12.50")) == 1
        assert catalog.register("Soap", Decimal("3.00")) == 2
        assert catalog.item_count == 2

    def test_duplicate_name_rejected(self):
        catalog = ItemCatalog()
        catalog.register("Towel", 10)
        with pytest.raises(ItemError, match="already exists: Towel"):
            catalog.register("Towel", 11)
        assert catalog.item_count == 1

    def test_names_are_case_sensitive(self):
        catalog = ItemCatalog()
        catalog.register("Towel", 10)
        catalog.register("towel", 10)
        assert catalog.item_count == 2

    def test_empty_name_and_negative_price(self):
        catalog = ItemCatalog()
        with pytest.raises(ValidationError):
            catalog.register("", 1)
        with pytest.raises(ValidationError):
            catalog.register("Towel", Decimal("-0.01"))
        assert catalog.item_count == 0

    def test_ids_not_reused_after_removal(self):
        catalog = ItemCatalog()
        first = catalog.register("Towel", 1)
        catalog.remove(first)
        assert catalog.register("Soap", 1) == 2


class TestItemCatalogLookup:
    def test_find_by_id_and_name(self):
        catalog = ItemCatalog()
        item_id = catalog.register("Towel", 1)
        assert catalog.find_by_id(item_id).name == "Towel"
        assert catalog.find_by_name("Towel").id == item_id

    def test_absent_lookups_return_none(self):
        catalog = ItemCatalog()
        assert catalog.find_by_id(1) is None
        assert catalog.find_by_name("Ghost") is None

    def test_remove(self):
        catalog = ItemCatalog()
        item_id = catalog.register("Towel", 1)
        assert catalog.remove(item_id) is True
        assert catalog.remove(item_id) is False
        assert catalog.list_all() == []

    def test_list_all_is_a_copy(self):
        catalog = ItemCatalog()
        catalog.register("Towel", 1)
        snapshot = catalog.list_all()
        snapshot.clear()
        assert catalog.item_count == 1


class TestItemCatalogUpdate:
    def test_update_name_and_price(self):
        catalog = ItemCatalog()
        item_id = catalog.register("Towel", 1)
        assert catalog.update(item_id, "Bath towel", Decimal("15")) is True
        item = catalog.find_by_id(item_id)
        assert item.name == "Bath towel"
        assert item.price == Decimal("15")
        assert catalog.find_by_name("Towel") is None

    def test_update_keeping_own_name(self):
        catalog = ItemCatalog()
        item_id = catalog.register("Towel", 1)
        catalog.update(item_id, "Towel", 2)
        assert catalog.find_by_id(item_id).price == Decimal("2")

    def test_update_unknown_id(self):
        with pytest.raises(ItemError, match="Item with ID 9 not found"):
            ItemCatalog().update(9, "Towel", 1)

    def test_update_to_taken_name(self):
        catalog = ItemCatalog()
        catalog.register("Towel", 1)
        soap = catalog.register("Soap", 1)
        with pytest.raises(ItemError, match="Another item already has this name"):
            catalog.update(soap, "Towel", 1)
        assert catalog.find_by_id(soap).name == "Soap"

    def test_update_negative_price_leaves_item(self):
        catalog = ItemCatalog()
        item_id = catalog.register("Towel", 1)
        with pytest.raises(ValidationError):
            catalog.update(item_id, "Towel", -5)
        assert catalog.find_by_id(item_id).price == Decimal("1")


class TestPeople:
    def test_person_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Person(1, "Ana")

    def test_performer_defaults_to_no_room(self):
        performer = Performer(1, "Ana")
        assert performer.dressing_room_id == 0
        assert not performer.has_dressing_room

    def test_performer_display(self):
        assert Performer(2, "Bia", 3).display() == (
            "Performer [ID: 2, Name: Bia, Dressing room ID: 3]"
        )

    def test_performer_validation(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            Performer(1, "")
        with pytest.raises(ValidationError, match="Dressing room ID"):
            Performer(1, "Ana", -1)

    def test_performer_is_frozen(self):
        performer = Performer(1, "Ana")
        with pytest.raises(AttributeError):
            performer.name = "Bia"
