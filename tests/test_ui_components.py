import plotly.graph_objects as go

from inventory_dashboard.models import InventoryItem
from inventory_dashboard.services.chart_data import to_chart_data
from inventory_dashboard.ui.charts import build_bar_figure
from inventory_dashboard.ui.helpers import read_recent_logs
from inventory_dashboard.ui.tables import LOW_STOCK_COLUMN, build_table_frame


def test_build_table_frame_flags_low_stock():
    items = [
        InventoryItem(id="a", item_name="Bolt", quantity=2),
        InventoryItem(id="b", item_name="Nut", quantity=10),
        InventoryItem(id="c"),
    ]
    df = build_table_frame(items)
    assert list(df.index) == ["a", "b", "c"]
    assert list(df[LOW_STOCK_COLUMN]) == [True, False, False]
    assert df.loc["c", "Item Name"] == "Unnamed Item"
    assert df.loc["c", "Quantity"] == "N/A"


def test_build_table_frame_empty():
    df = build_table_frame([])
    assert df.empty
    assert LOW_STOCK_COLUMN in df.columns


def test_build_bar_figure():
    data = to_chart_data(
        [InventoryItem(id=1, item_name="Bolt", quantity=2), InventoryItem(id=2)]
    )
    fig = build_bar_figure(data)
    assert isinstance(fig, go.Figure)
    bar = fig.data[0]
    assert list(bar.x) == ["Bolt", "Unnamed Item"]
    assert list(bar.y) == [2, 0]
    assert bar.name == "Quantity"


def test_read_recent_logs(tmp_path):
    log_file = tmp_path / "app.log"
    log_file.write_text("".join(f"line {i}\n" for i in range(10)))
    assert read_recent_logs(limit=2, log_file=log_file) == "line 8\nline 9\n"
    assert read_recent_logs(log_file=tmp_path / "missing.log") == ""
