"""Case-insensitive search over the inventory collection."""

from __future__ import annotations

from typing import Iterable, List

from inventory_dashboard.core.constants import SEARCH_FIELDS
from inventory_dashboard.models import InventoryItem


def matches(item: InventoryItem, search_term: str) -> bool:
    """Return ``True`` if any searchable field contains ``search_term``.

    Absent fields never match, so an empty term selects every item with at
    least one searchable field present.
    """
    needle = search_term.lower()
    for field in SEARCH_FIELDS:
        value = getattr(item, field)
        if value is not None and needle in value.lower():
            return True
    return False


def filter_items(items: Iterable[InventoryItem], search_term: str) -> List[InventoryItem]:
    """Return the items matching ``search_term`` in their original order."""
    return [item for item in items if matches(item, search_term)]
