"""Pydantic models for records exchanged with the remote inventory service."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

ItemId = Union[int, str]


class InventoryItem(BaseModel):
    """A single stock record.

    Attribute names are snake_case; the service speaks camelCase and keys
    records by ``_id``. Unknown fields are kept so that a full replace does
    not drop data the dashboard does not display.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: ItemId = Field(
        validation_alias=AliasChoices("_id", "id"), serialization_alias="_id"
    )
    item_name: Optional[str] = Field(default=None, alias="itemName")
    sku: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    # Kept as received; non-numeric values render as 0.00.
    price: Any = None
    supplier: Optional[str] = None
    reorder_level: Optional[int] = Field(default=None, ge=0, alias="reorderLevel")
    date_added: Optional[datetime] = Field(default=None, alias="dateAdded")

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for a full replace, omitting absent fields."""
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if isinstance(self.price, Decimal):
            # JSON mode would send Decimal as a string
            payload["price"] = float(self.price)
        return payload
