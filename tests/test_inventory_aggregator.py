"""Tests for InventoryAggregator."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from wordstock.errors import InvalidCode, InvalidPrice
from wordstock.inventory.aggregator import InventoryAggregator


@pytest.fixture
def inventory():
    return InventoryAggregator()


@pytest.fixture
def stocked(inventory):
    inventory.add_item("code-1", 3)
    inventory.add_item("code-2", 3.14)
    inventory.add_item("code-3", "5.67")
    return inventory


def test_total_value(stocked):
    assert stocked.total_value() == Decimal("11.81")
    assert stocked.total_value_cents() == 1181


def test_count_by_code(stocked):
    assert stocked.count_by_code() == {"code-1": 1, "code-2": 1, "code-3": 1}


def test_count_by_code_repeats(stocked):
    stocked.add_item(" code-1 ", "1.00")
    counts = stocked.count_by_code()
    assert counts["code-1"] == 2
    assert "code-4" not in counts


def test_empty_inventory(inventory):
    assert inventory.total_value() == 0
    assert inventory.total_value_cents() == 0
    assert inventory.count_by_code() == {}
    assert len(inventory) == 0


def test_add_item_returns_item(inventory):
    item = inventory.add_item("code-1", "2.50")
    assert item.code == "code-1"
    assert item.price_in_cents == 250
    assert inventory.items == (item,)


def test_add_item_invalid_code_leaves_state(stocked):
    with pytest.raises(InvalidCode):
        stocked.add_item("   ", 1)
    assert len(stocked) == 3


def test_add_item_invalid_price_leaves_state(stocked):
    with pytest.raises(InvalidPrice):
        stocked.add_item("code-9", "abc")
    with pytest.raises(InvalidPrice):
        stocked.add_item("code-9", -1)
    assert len(stocked) == 3
    assert stocked.total_value() == Decimal("11.81")


def test_load_from_rows_skips_missing_fields(inventory):
    rows = [
        {"UnitPrice": "1.00"},
        {"Code": "code-1", "UnitPrice": "2.50"},
    ]
    assert inventory.load_from_rows(rows) == 1
    assert len(inventory) == 1
    assert inventory.count_by_code() == {"code-1": 1}


def test_load_from_rows_none_is_missing(inventory):
    rows = [
        {"code": "code-1", "price": None},
        {"code": None, "price": "1"},
        {"code": "code-2", "price": "1"},
    ]
    assert inventory.load_from_rows(rows) == 1
    assert inventory.count_by_code() == {"code-2": 1}


def test_load_from_rows_objects(inventory):
    rows = [
        SimpleNamespace(code="code-1", unit_price=Decimal("1.10")),
        SimpleNamespace(code="code-2"),
        SimpleNamespace(code="code-3", price=2),
    ]
    assert inventory.load_from_rows(rows) == 2
    assert inventory.total_value() == Decimal("3.10")


def test_load_from_rows_field_name_variants(inventory):
    rows = [
        {"code": "a", "unitPrice": "1"},
        {"Code": "b", "Price": "1"},
    ]
    assert inventory.load_from_rows(rows) == 2


def test_load_from_rows_invalid_value_raises(inventory):
    """A present but malformed price is an error, not a skip."""
    rows = [
        {"code": "code-1", "price": "1.00"},
        {"code": "code-2", "price": "oops"},
    ]
    with pytest.raises(InvalidPrice):
        inventory.load_from_rows(rows)
    assert len(inventory) == 0


def test_load_from_rows_blank_code_raises(inventory):
    with pytest.raises(InvalidCode):
        inventory.load_from_rows([{"code": "  ", "price": "1"}])
    assert len(inventory) == 0


def test_load_from_rows_custom_fields(inventory):
    rows = [{"sku": "s-1", "cost": "4"}, {"Code": "c", "UnitPrice": "1"}]
    added = inventory.load_from_rows(rows, code_fields=("sku",), price_fields=("cost",))
    assert added == 1
    assert inventory.count_by_code() == {"s-1": 1}


def test_items_are_ordered_and_copied(stocked):
    codes = [item.code for item in stocked]
    assert codes == ["code-1", "code-2", "code-3"]

    listed = stocked.all()
    listed.clear()
    assert len(stocked) == 3


def test_add_item_huge_price_raises_invalid_price(stocked):
    with pytest.raises(InvalidPrice):
        stocked.add_item("big", "1e30")
    assert len(stocked) == 3


def test_large_items_total_exactly(inventory):
    inventory.add_item("a", "9" * 25)
    inventory.add_item("b", "9" * 25)
    assert inventory.total_value() == Decimal("1" + "9" * 24 + "8")


def test_load_from_rows_generator_is_atomic(inventory):
    """A bad row after good ones in a one-shot iterator adds nothing."""
    rows = (
        {"code": code, "price": price}
        for code, price in [("code-1", "1.00"), ("code-2", "2.00"), ("code-3", "bad")]
    )
    with pytest.raises(InvalidPrice):
        inventory.load_from_rows(rows)
    assert len(inventory) == 0
    assert inventory.total_value() == 0


def test_load_from_rows_generator(inventory):
    rows = ({"code": f"code-{i}", "price": i} for i in range(3))
    assert inventory.load_from_rows(rows) == 3
    assert inventory.total_value() == Decimal("3.00")
