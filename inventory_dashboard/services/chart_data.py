"""Label/value series for the stock quantity bar chart.

The chart always covers the full collection, never the search results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from inventory_dashboard.core.constants import (
    CHART_BORDER_COLOR,
    CHART_BORDER_WIDTH,
    CHART_DATASET_LABEL,
    CHART_FILL_COLOR,
    UNNAMED_ITEM,
)
from inventory_dashboard.models import InventoryItem


@dataclass
class ChartSeries:
    labels: List[str] = field(default_factory=list)
    values: List[int] = field(default_factory=list)


def to_series(items: Iterable[InventoryItem]) -> ChartSeries:
    series = ChartSeries()
    for item in items:
        series.labels.append(item.item_name if item.item_name is not None else UNNAMED_ITEM)
        series.values.append(item.quantity if item.quantity is not None else 0)
    return series


def to_chart_data(items: Iterable[InventoryItem]) -> Dict[str, Any]:
    """Return ``{labels, datasets}`` ready for the chart renderer."""
    series = to_series(items)
    return {
        "labels": series.labels,
        "datasets": [
            {
                "label": CHART_DATASET_LABEL,
                "data": series.values,
                "style": {
                    "background_color": CHART_FILL_COLOR,
                    "border_color": CHART_BORDER_COLOR,
                    "border_width": CHART_BORDER_WIDTH,
                },
            }
        ],
    }
