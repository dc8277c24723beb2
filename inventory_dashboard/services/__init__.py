"""Service layer for the inventory dashboard."""

from . import (
    api_client,
    chart_data,
    controller,
    filters,
    item_store,
    mutations,
    report_builder,
)
