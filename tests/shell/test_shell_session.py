"""
Camarim — Scripted Shell Session Tests
========================================
Drives the menu with an in-memory input stream and inspects both the
printed output and the resulting context state.

Covers:
- Domain errors are printed and the session continues
- Invalid numbers are asked for again
- End of input ends the session cleanly
- main() entry point
"""

import io
import logging
from decimal import Decimal

from camarim import BackstageContext
from camarim.shell import Shell, main


def run_session(script, context=None):
    ctx = context or BackstageContext.create()
    out = io.StringIO()
    Shell(ctx, stdin=io.StringIO(script), stdout=out).run()
    return ctx, out.getvalue()


class TestMainLoop:
    def test_quit_immediately(self):
        _, output = run_session("0\n")
        assert "=== BACKSTAGE ===" in output
        assert output.rstrip().endswith("Goodbye.")

    def test_end_of_input_ends_session(self):
        _, output = run_session("")
        assert output.rstrip().endswith("Goodbye.")

    def test_invalid_option(self):
        _, output = run_session("9\n0\n")
        assert "Invalid option." in output


class TestCatalogMenu:
    def test_register_and_show(self):
        ctx, output = run_session("1\n2\nTowel\n12,50\n1\n0\n0\n")
        assert "[OK] Item registered with ID 1" in output
        assert "Item [ID: 1, Name: Towel, Price: R$ 12.50]" in output
        assert ctx.catalog.find_by_id(1).price == Decimal("12.50")

    def test_bad_price_is_asked_again(self):
        ctx, output = run_session("1\n2\nTowel\nabc\n5\n0\n0\n")
        assert "[ERROR] Validation error:" in output
        assert ctx.catalog.find_by_id(1).price == Decimal("5")

    def test_duplicate_name_reported(self):
        ctx, output = run_session("1\n2\nTowel\n1\n2\nTowel\n2\n0\n0\n")
        assert "[ERROR] Item error: An item with this name already exists: Towel" in output
        assert ctx.catalog.item_count == 1

    def test_huge_price_is_shown_and_session_continues(self):
        ctx, output = run_session("1\n2\nTowel\n1e30\n1\n0\n0\n")
        assert "Item [ID: 1, Name: Towel, Price: R$ 1E+30]" in output
        assert output.rstrip().endswith("Goodbye.")
        assert ctx.catalog.find_by_id(1).price == Decimal("1e30")

    def test_find_missing_item(self):
        _, output = run_session("1\n5\nGhost\n0\n0\n")
        assert "Item not found." in output


class TestStockMenu:
    def test_add_and_overdraw(self):
        ctx = BackstageContext.create()
        ctx.catalog.register("Towel", 10)
        script = (
            "2\n2\n1\n5\n"   # add 5 of item 1
            "3\n1\n8\n"      # withdraw 8
            "5\n1\n"         # quantity on hand
            "0\n0\n"
        )
        _, output = run_session(script, ctx)
        assert "[OK] Stock updated" in output
        assert "[ERROR] Stock error: Insufficient stock: Available: 5, requested: 8." in output
        assert "Quantity on hand: 5" in output
        assert ctx.stock.quantity_of(1) == 5

    def test_add_unknown_catalog_item(self):
        _, output = run_session("2\n2\n7\n0\n0\n")
        assert "[ERROR] Item not found in the catalog" in output


class TestOtherMenus:
    def test_performer_created(self):
        ctx, output = run_session("4\n2\nAna\n0\n0\n0\n")
        assert "[OK] Performer created with ID 1" in output
        assert ctx.performers.find_by_id(1).name == "Ana"

    def test_order_lifecycle(self):
        ctx = BackstageContext.create()
        ctx.catalog.register("Water", 2)
        script = (
            "5\n2\n1\nAna\n"    # create order for room 1
            "4\n1\n1\n6\n"      # add 6 water
            "6\n1\n"            # fulfil
            "4\n1\n1\n1\n"      # add after fulfilled
            "0\n0\n"
        )
        _, output = run_session(script, ctx)
        assert "[OK] Order created with ID 1" in output
        assert "[OK] Order marked as fulfilled" in output
        assert "[ERROR] Order error: Cannot add items to an order that is already fulfilled" in output
        assert ctx.orders.find_by_id(1).ledger.quantity_of(1) == 6

    def test_shopping_list_total(self):
        ctx = BackstageContext.create()
        ctx.catalog.register("Soap", Decimal("2.00"))
        script = (
            "6\n2\nWeekend\n"   # create list
            "4\n1\n1\n3\n"      # add 3 soap at catalog price
            "7\n1\n"            # total
            "0\n0\n"
        )
        _, output = run_session(script, ctx)
        assert "Total: R$ 6.00" in output

    def test_update_unknown_dressing_room(self):
        _, output = run_session("3\n6\n999\nX\n1\n0\n0\n")
        assert "[ERROR] Dressing room error: Dressing room with ID 999 not found" in output


class TestMain:
    def test_main_runs_and_returns_zero(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
        monkeypatch.delenv("CAMARIM_LOG_LEVEL", raising=False)
        logger = logging.getLogger("camarim")
        previous = logger.level
        try:
            assert main(["--log-level", "ERROR"]) == 0
            assert logger.level == logging.ERROR
        finally:
            logger.setLevel(previous)
        assert "Goodbye." in capsys.readouterr().out
