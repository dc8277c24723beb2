"""Edit-form helpers that keep absent fields absent."""

from decimal import Decimal
from typing import Any, Dict, Optional

from inventory_dashboard.models import InventoryItem

TEXT_FIELDS = ("item_name", "sku", "category", "supplier")
INT_FIELDS = ("quantity", "reorder_level")


def price_input_value(price: Any) -> Optional[float]:
    """Return the number the price input starts at, or ``None`` for an empty input."""
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        return None
    return float(price)


def changed_fields(item: InventoryItem, form_values: Dict[str, Any]) -> Dict[str, Any]:
    """Return only the fields the user edited, ready for ``stage_changes``.

    Inputs start empty for absent values, so an untouched field compares equal
    to its starting value and is left out. A cleared text box sets the field
    to ``None``.
    """
    changes: Dict[str, Any] = {}
    for field in TEXT_FIELDS:
        if field not in form_values:
            continue
        current = getattr(item, field)
        text = (form_values[field] or "").strip()
        if text != (current or "").strip():
            changes[field] = text or None

    for field in INT_FIELDS:
        if field not in form_values:
            continue
        value = form_values[field]
        value = int(value) if value is not None else None
        if value != getattr(item, field):
            changes[field] = value

    if "price" in form_values:
        value = form_values["price"]
        if value != price_input_value(item.price):
            changes["price"] = float(value) if value is not None else None
    return changes
