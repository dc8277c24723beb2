"""HTTP client for the remote inventory service."""

from __future__ import annotations

from typing import Any, List, Optional

import requests
from pydantic import TypeAdapter, ValidationError

from inventory_dashboard.core.logging import get_logger
from inventory_dashboard.models import InventoryItem, ItemId

logger = get_logger(__name__)

_ITEM_LIST = TypeAdapter(List[InventoryItem])


class InventoryApiClient:
    """Talk to ``/inventory`` on the remote service.

    Transport failures surface as :class:`requests.RequestException`; bodies
    that do not decode into items raise ``ValueError`` (pydantic's
    ``ValidationError`` is a subclass).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, item_id: ItemId | None = None) -> str:
        if item_id is None:
            return f"{self.base_url}/inventory"
        return f"{self.base_url}/inventory/{item_id}"

    def list_items(self) -> List[InventoryItem]:
        response = self.session.get(self._url(), timeout=self.timeout)
        response.raise_for_status()
        items = _ITEM_LIST.validate_python(response.json())
        logger.info("Fetched %d inventory items", len(items))
        return items

    def update_item(self, item: InventoryItem) -> InventoryItem:
        """Replace ``item`` on the service and return the stored record.

        The write has succeeded once the status is 2xx. A body that is not the
        stored record (empty, an acknowledgement, another id) leaves the
        submitted item as the result.
        """
        response = self.session.put(
            self._url(item.id), json=item.to_payload(), timeout=self.timeout
        )
        response.raise_for_status()
        body = _json_or_none(response)
        if not isinstance(body, dict):
            return item
        try:
            stored = InventoryItem.model_validate(body)
        except ValidationError:
            logger.warning(
                "PUT %s answered without an item record; keeping submitted item",
                response.url,
            )
            return item
        if str(stored.id) != str(item.id):
            logger.warning(
                "PUT for item %s answered with item %s; keeping submitted item",
                item.id,
                stored.id,
            )
            return item
        if stored.id != item.id:
            # Same record, id echoed as another JSON type
            stored = stored.model_copy(update={"id": item.id})
        return stored

    def delete_item(self, item_id: ItemId) -> None:
        response = self.session.delete(self._url(item_id), timeout=self.timeout)
        response.raise_for_status()


def _json_or_none(response: requests.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        logger.warning("Ignoring non-JSON response body from %s", response.url)
        return None
