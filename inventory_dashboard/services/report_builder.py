"""Tabular representation of the filtered collection for export.

The builder is independent of the rendering backend: it only projects items
into rows of display strings and fixes the metadata every page of the
rendered report shares (generation timestamp and file name).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, List, Optional

from inventory_dashboard.core.constants import (
    CURRENCY_SYMBOL,
    NOT_AVAILABLE,
    REPORT_DATE_FORMAT,
    REPORT_FILENAME_DATE_FORMAT,
    REPORT_FILENAME_PREFIX,
    REPORT_HEADERS,
    REPORT_TIMESTAMP_FORMAT,
    REPORT_TITLE,
    UNNAMED_ITEM,
)
from inventory_dashboard.models import InventoryItem


@dataclass
class InventoryReport:
    headers: List[str]
    rows: List[List[str]]
    generated_at: datetime
    title: str = REPORT_TITLE
    timestamp: str = field(init=False)
    filename: str = field(init=False)

    def __post_init__(self) -> None:
        self.timestamp = self.generated_at.strftime(REPORT_TIMESTAMP_FORMAT)
        self.filename = report_filename(self.generated_at)


def report_filename(generated_at: datetime) -> str:
    """Return ``Inventory_Report_<date>.pdf`` for the generation date."""
    return f"{REPORT_FILENAME_PREFIX}_{generated_at.strftime(REPORT_FILENAME_DATE_FORMAT)}.pdf"


def _text_or(value: Optional[str], fallback: str) -> str:
    return value if value is not None else fallback


def _int_or_na(value: Optional[int]) -> str:
    return str(value) if value is not None else NOT_AVAILABLE


def format_price(price: Any) -> str:
    """Return ``$x.xx``; absent or non-numeric prices render as ``$0.00``."""
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        return f"{CURRENCY_SYMBOL}0.00"
    return f"{CURRENCY_SYMBOL}{price:.2f}"


def format_date(value: Optional[datetime]) -> str:
    if value is None:
        return NOT_AVAILABLE
    if value.tzinfo is not None:
        # Calendar day as seen in the local timezone
        value = value.astimezone()
    return value.strftime(REPORT_DATE_FORMAT)


def format_row(item: InventoryItem) -> List[str]:
    """Project ``item`` into report columns, applying the fallbacks."""
    return [
        _text_or(item.item_name, UNNAMED_ITEM),
        _text_or(item.sku, NOT_AVAILABLE),
        _text_or(item.category, NOT_AVAILABLE),
        _int_or_na(item.quantity),
        format_price(item.price),
        _text_or(item.supplier, NOT_AVAILABLE),
        _int_or_na(item.reorder_level),
        format_date(item.date_added),
    ]


def build_report(
    items: Iterable[InventoryItem], generated_at: Optional[datetime] = None
) -> InventoryReport:
    """Return the report for ``items``.

    ``generated_at`` is taken once; every page footer uses the same value.
    """
    if generated_at is None:
        generated_at = datetime.now()
    return InventoryReport(
        headers=list(REPORT_HEADERS),
        rows=[format_row(item) for item in items],
        generated_at=generated_at,
    )
