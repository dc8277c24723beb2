from datetime import datetime, timezone
from decimal import Decimal

from inventory_dashboard.models import InventoryItem
from inventory_dashboard.services.report_builder import (
    build_report,
    format_price,
    format_row,
    report_filename,
)

GENERATED_AT = datetime(2024, 5, 17, 14, 30, 5)


def test_row_with_all_fields():
    added = datetime(2024, 1, 2, 9, 0)
    item = InventoryItem(
        id=1,
        item_name="X",
        sku="SKU1",
        category="Cat",
        quantity=2,
        price=3,
        supplier="Supplier",
        reorder_level=1500,
        date_added=added,
    )
    assert format_row(item) == [
        "X",
        "SKU1",
        "Cat",
        "2",
        "$3.00",
        "Supplier",
        "1500",
        added.strftime("%x"),
    ]


def test_row_fallbacks():
    assert format_row(InventoryItem(id=1)) == [
        "Unnamed Item",
        "N/A",
        "N/A",
        "N/A",
        "$0.00",
        "N/A",
        "N/A",
        "N/A",
    ]


def test_zero_quantity_is_not_missing():
    assert format_row(InventoryItem(id=1, quantity=0, reorder_level=0))[3] == "0"


def test_format_price():
    assert format_price(12.5) == "$12.50"
    assert format_price(Decimal("0.126")) == "$0.13"
    assert format_price(None) == "$0.00"
    assert format_price("12.50") == "$0.00"
    assert format_price(True) == "$0.00"


def test_report_metadata():
    report = build_report([InventoryItem(id=1, item_name="Bolt")], GENERATED_AT)
    assert report.headers[0] == "Item Name"
    assert report.headers[-1] == "Date Added"
    assert len(report.rows) == 1
    assert report.timestamp == "2024-05-17 14:30:05"
    assert report.filename == "Inventory_Report_2024-05-17.pdf"


def test_filename_depends_only_on_date():
    later = datetime(2024, 5, 17, 23, 59)
    assert report_filename(GENERATED_AT) == report_filename(later)
    assert build_report([], GENERATED_AT).filename == build_report(
        [InventoryItem(id=9, item_name="Other")], later
    ).filename


def test_aware_date_uses_local_calendar_day():
    added = datetime(2024, 1, 2, 23, 30, tzinfo=timezone.utc)
    row = format_row(InventoryItem(id=1, date_added=added))
    assert row[7] == added.astimezone().strftime("%x")
