from typing import Iterable

import pandas as pd

from inventory_dashboard.core.constants import REPORT_HEADERS
from inventory_dashboard.models import InventoryItem
from inventory_dashboard.services.mutations import is_low_stock
from inventory_dashboard.services.report_builder import format_row

LOW_STOCK_COLUMN = "Low Stock"


def build_table_frame(items: Iterable[InventoryItem]) -> pd.DataFrame:
    """Return display rows for ``items`` with a low-stock flag column.

    The frame is indexed by item id so the page can map a selected row back
    to its record.
    """
    items = list(items)
    df = pd.DataFrame(
        [format_row(item) for item in items],
        columns=REPORT_HEADERS,
        index=pd.Index([item.id for item in items], name="id"),
    )
    df[LOW_STOCK_COLUMN] = [is_low_stock(item) for item in items]
    return df
