import os
import sys

import pytest
import requests

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from inventory_dashboard.models import InventoryItem  # noqa: E402


class FakeApiClient:
    """In-memory stand-in for ``InventoryApiClient`` recording every call."""

    def __init__(self, items=None):
        self.items = list(items or [])
        self.calls = []
        self.fail_on = set()

    def list_items(self):
        self.calls.append(("list",))
        if "list" in self.fail_on:
            raise requests.ConnectionError("service unavailable")
        return list(self.items)

    def update_item(self, item):
        self.calls.append(("update", item.id))
        if "update" in self.fail_on:
            raise requests.HTTPError("500 Server Error")
        return item

    def delete_item(self, item_id):
        self.calls.append(("delete", item_id))
        if "delete" in self.fail_on:
            raise requests.HTTPError("404 Not Found")


@pytest.fixture
def item_factory():
    def create_item(**kwargs):
        defaults = {
            "id": 1,
            "item_name": "Item",
            "sku": "SKU1",
            "category": "Cat",
            "quantity": 10,
            "price": 1.5,
            "supplier": "Supplier",
        }
        defaults.update(kwargs)
        return InventoryItem(**defaults)

    return create_item


@pytest.fixture
def fake_client(item_factory):
    return FakeApiClient(
        [
            item_factory(id=1, item_name="Bolt", sku="B-1", quantity=2),
            item_factory(id=2, item_name="Nut", sku="N-1", quantity=10),
            item_factory(id=3, item_name="Washer", sku="W-1", quantity=None),
        ]
    )


@pytest.fixture
def make_client():
    return FakeApiClient
