"""Authoritative local copy of the inventory collection.

The collection is held as a tuple and only ever replaced: wholesale on load,
one element on update or delete. A failed remote call leaves the previous
snapshot untouched and records the failure in the shared ``ErrorState``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import requests

from inventory_dashboard.core.logging import get_logger
from inventory_dashboard.exceptions import (
    DeleteError,
    ErrorState,
    FetchError,
    InventoryError,
    UpdateError,
)
from inventory_dashboard.models import InventoryItem, ItemId
from inventory_dashboard.services.api_client import InventoryApiClient
from inventory_dashboard.services.filters import filter_items

logger = get_logger(__name__)

# Failures a remote call may raise: transport errors and undecodable bodies.
REMOTE_ERRORS = (requests.RequestException, ValueError)


class ItemStore:
    def __init__(self, client: InventoryApiClient, errors: ErrorState):
        self._client = client
        self._errors = errors
        self._items: Tuple[InventoryItem, ...] = ()

    # ─────────────────────────────────────────────────────────
    # READ ACCESS
    # ─────────────────────────────────────────────────────────
    @property
    def items(self) -> Tuple[InventoryItem, ...]:
        return self._items

    def all_items(self) -> List[InventoryItem]:
        """Return the full, unfiltered collection (chart source)."""
        return list(self._items)

    def filtered_items(self, search_term: str) -> List[InventoryItem]:
        """Return the items matching ``search_term`` (table and report source)."""
        return filter_items(self._items, search_term)

    def get(self, item_id: ItemId) -> Optional[InventoryItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def __len__(self) -> int:
        return len(self._items)

    # ─────────────────────────────────────────────────────────
    # REMOTE OPERATIONS
    # ─────────────────────────────────────────────────────────
    def load(self) -> Tuple[bool, str]:
        """Replace the collection with the service's current list."""
        try:
            items = self._client.list_items()
        except REMOTE_ERRORS as e:
            self._fail(FetchError("Error fetching inventory items", e))
            return False, "Error fetching inventory items"
        self._items = tuple(items)
        return True, f"Loaded {len(items)} inventory items."

    def update(self, item: InventoryItem) -> Tuple[bool, str]:
        """Replace ``item`` remotely, then in place locally."""
        try:
            stored = self._client.update_item(item)
        except REMOTE_ERRORS as e:
            self._fail(UpdateError("Error updating item", e))
            return False, "Error updating item"
        self._items = tuple(stored if existing.id == item.id else existing for existing in self._items)
        logger.info("Updated inventory item %s", item.id)
        return True, f"Item '{stored.item_name or item.id}' updated successfully."

    def remove(self, item_id: ItemId) -> Tuple[bool, str]:
        """Delete ``item_id`` remotely, then drop it locally.

        Callers must have obtained the user's confirmation first.
        """
        try:
            self._client.delete_item(item_id)
        except REMOTE_ERRORS as e:
            self._fail(DeleteError("Error deleting item", e))
            return False, "Error deleting item"
        self._items = tuple(item for item in self._items if item.id != item_id)
        logger.info("Deleted inventory item %s", item_id)
        return True, "Item deleted successfully."

    def _fail(self, error: InventoryError) -> None:
        logger.error("%s: %s", error.message, error.cause, exc_info=error.cause)
        self._errors.record(error)
