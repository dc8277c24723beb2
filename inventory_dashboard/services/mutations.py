"""Sequencing of remote writes and reconciliation of the local store.

Each update or delete for an item moves through ``IDLE -> IN_FLIGHT ->
COMMITTED | FAILED``. Only one request per item id is in flight at a time:
a second request for the same id waits for the first one to resolve before
it is dispatched.
"""

from __future__ import annotations

import enum
import threading
from typing import Any, Dict, Optional, Tuple

from inventory_dashboard.core.constants import LOW_STOCK_THRESHOLD
from inventory_dashboard.core.logging import get_logger
from inventory_dashboard.models import InventoryItem, ItemId
from inventory_dashboard.services.item_store import ItemStore

logger = get_logger(__name__)


class MutationState(enum.Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    COMMITTED = "committed"
    FAILED = "failed"


def is_low_stock(item: InventoryItem) -> bool:
    """Return ``True`` when quantity is present and below the threshold."""
    return item.quantity is not None and item.quantity < LOW_STOCK_THRESHOLD


class MutationCoordinator:
    def __init__(self, store: ItemStore):
        self._store = store
        self._guard = threading.Lock()
        self._locks: Dict[ItemId, threading.Lock] = {}
        self._states: Dict[ItemId, MutationState] = {}
        self.selected_item: Optional[InventoryItem] = None
        self.pending_delete: Optional[ItemId] = None

    # ─────────────────────────────────────────────────────────
    # STATE
    # ─────────────────────────────────────────────────────────
    def state_for(self, item_id: ItemId) -> MutationState:
        return self._states.get(item_id, MutationState.IDLE)

    def is_in_flight(self, item_id: ItemId) -> bool:
        return self.state_for(item_id) is MutationState.IN_FLIGHT

    def _lock_for(self, item_id: ItemId) -> threading.Lock:
        with self._guard:
            return self._locks.setdefault(item_id, threading.Lock())

    def _run(self, item_id: ItemId, operation, *args) -> Tuple[bool, str]:
        with self._lock_for(item_id):
            self._states[item_id] = MutationState.IN_FLIGHT
            success, message = operation(*args)
            self._states[item_id] = (
                MutationState.COMMITTED if success else MutationState.FAILED
            )
        return success, message

    # ─────────────────────────────────────────────────────────
    # UPDATE
    # ─────────────────────────────────────────────────────────
    def update(self, item: InventoryItem) -> Tuple[bool, str]:
        return self._run(item.id, self._store.update, item)

    def begin_edit(self, item_id: ItemId) -> Optional[InventoryItem]:
        """Stage the stored item with ``item_id`` for editing."""
        self.selected_item = self._store.get(item_id)
        if self.selected_item is None:
            logger.warning("Cannot edit unknown inventory item %s", item_id)
        return self.selected_item

    def stage_changes(self, **changes: Any) -> Optional[InventoryItem]:
        if self.selected_item is None:
            return None
        self.selected_item = self.selected_item.model_copy(update=changes)
        return self.selected_item

    def cancel_edit(self) -> None:
        self.selected_item = None

    def submit_edit(self) -> Tuple[bool, str]:
        """Send the staged item; the staging survives a failed update."""
        if self.selected_item is None:
            return False, "No item selected for editing."
        success, message = self.update(self.selected_item)
        if success:
            self.selected_item = None
        return success, message

    # ─────────────────────────────────────────────────────────
    # DELETE
    # ─────────────────────────────────────────────────────────
    def delete(self, item_id: ItemId, confirmed: bool = False) -> Tuple[bool, str]:
        """Delete ``item_id``; nothing is sent unless ``confirmed``."""
        if not confirmed:
            return False, "Deletion not confirmed."
        success, message = self._run(item_id, self._store.remove, item_id)
        if success:
            self._forget(item_id)
        return success, message

    def _forget(self, item_id: ItemId) -> None:
        with self._guard:
            self._locks.pop(item_id, None)
            self._states.pop(item_id, None)

    def request_delete(self, item_id: ItemId) -> None:
        self.pending_delete = item_id

    def cancel_delete(self) -> None:
        self.pending_delete = None

    def confirm_delete(self) -> Tuple[bool, str]:
        """Dispatch the pending delete; it stays pending if the call fails."""
        if self.pending_delete is None:
            return False, "No item pending deletion."
        item_id = self.pending_delete
        success, message = self.delete(item_id, confirmed=True)
        if success:
            self.pending_delete = None
            if self.selected_item is not None and self.selected_item.id == item_id:
                self.selected_item = None
        return success, message
