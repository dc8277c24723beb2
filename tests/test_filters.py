from inventory_dashboard.models import InventoryItem
from inventory_dashboard.services.filters import filter_items, matches


def test_empty_term_keeps_items_with_searchable_fields_in_order(item_factory):
    items = [
        item_factory(id=1, item_name="Bolt"),
        InventoryItem(id=2, quantity=5),
        InventoryItem(id=3, supplier="Acme"),
        item_factory(id=4, item_name="Nut"),
    ]
    assert [i.id for i in filter_items(items, "")] == [1, 3, 4]


def test_match_is_case_insensitive_across_fields():
    items = [
        InventoryItem(id=1, item_name="Hex Bolt"),
        InventoryItem(id=2, sku="BOLT-9"),
        InventoryItem(id=3, category="bolts"),
        InventoryItem(id=4, supplier="BoltCo"),
        InventoryItem(id=5, item_name="Nut"),
    ]
    assert [i.id for i in filter_items(items, "bOlT")] == [1, 2, 3, 4]


def test_absent_fields_never_match():
    item = InventoryItem(id=1, item_name=None, sku=None, category=None, supplier=None)
    assert not matches(item, "")
    assert not matches(item, "none")


def test_empty_string_field_is_present():
    assert matches(InventoryItem(id=1, sku=""), "")


def test_filter_is_idempotent(fake_client):
    once = filter_items(fake_client.items, "n")
    assert filter_items(once, "n") == once
