"""The inventory view controller.

One controller is created per dashboard session. It owns the Item Store, the
error slot, the mutation coordinator and the UI state the derived views depend
on, and hands these to its collaborators explicitly.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from inventory_dashboard.exceptions import ErrorState
from inventory_dashboard.models import InventoryItem
from inventory_dashboard.services.api_client import InventoryApiClient
from inventory_dashboard.services.chart_data import to_chart_data
from inventory_dashboard.services.item_store import ItemStore
from inventory_dashboard.services.mutations import MutationCoordinator, is_low_stock
from inventory_dashboard.services.report_builder import InventoryReport, build_report


class InventoryController:
    def __init__(self, client: InventoryApiClient):
        self.errors = ErrorState()
        self.store = ItemStore(client, self.errors)
        self.mutations = MutationCoordinator(self.store)
        self.search_term = ""
        self.show_chart = False
        self._activated = False

    @property
    def activated(self) -> bool:
        return self._activated

    def activate(self) -> Tuple[bool, str]:
        """Perform the initial load once per controller."""
        if self._activated:
            return True, "Already loaded."
        self._activated = True
        return self.store.load()

    def reload(self) -> Tuple[bool, str]:
        return self.store.load()

    def set_search_term(self, term: Optional[str]) -> None:
        self.search_term = term or ""

    def visible_items(self) -> List[InventoryItem]:
        return self.store.filtered_items(self.search_term)

    def low_stock_items(self) -> List[InventoryItem]:
        return [item for item in self.visible_items() if is_low_stock(item)]

    def chart_data(self) -> Dict[str, Any]:
        return to_chart_data(self.store.all_items())

    def build_report(self, generated_at: Optional[datetime] = None) -> InventoryReport:
        return build_report(self.visible_items(), generated_at)

    @property
    def error_message(self) -> Optional[str]:
        return self.errors.message

    def dismiss_error(self) -> None:
        self.errors.clear()
