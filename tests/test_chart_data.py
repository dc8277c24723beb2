from inventory_dashboard.models import InventoryItem
from inventory_dashboard.services.chart_data import to_chart_data, to_series


def test_series_uses_fallbacks():
    items = [
        InventoryItem(id=1, item_name="Bolt", quantity=2),
        InventoryItem(id=2, quantity=None),
        InventoryItem(id=3, item_name="Nut", quantity=0),
    ]
    series = to_series(items)
    assert series.labels == ["Bolt", "Unnamed Item", "Nut"]
    assert series.values == [2, 0, 0]


def test_series_length_matches_collection(fake_client):
    series = to_series(fake_client.items)
    assert len(series.labels) == len(series.values) == len(fake_client.items)


def test_chart_data_shape():
    data = to_chart_data([InventoryItem(id=1, item_name="Bolt", quantity=2)])
    assert data["labels"] == ["Bolt"]
    dataset = data["datasets"][0]
    assert dataset["label"] == "Quantity"
    assert dataset["data"] == [2]
    assert dataset["style"]["background_color"] == "rgba(54, 162, 235, 0.6)"
    assert dataset["style"]["border_width"] == 1
