# inventory_dashboard/core/constants.py

# ─────────────────────────────────────────────────────────
# DISPLAY FALLBACKS
# ─────────────────────────────────────────────────────────
UNNAMED_ITEM = "Unnamed Item"
NOT_AVAILABLE = "N/A"
CURRENCY_SYMBOL = "$"

# ─────────────────────────────────────────────────────────
# STOCK LEVELS
# ─────────────────────────────────────────────────────────
LOW_STOCK_THRESHOLD = 4
LOW_STOCK_MESSAGE = "Low stock! Please reorder."

# ─────────────────────────────────────────────────────────
# SEARCH
# ─────────────────────────────────────────────────────────
SEARCH_FIELDS = ("item_name", "sku", "category", "supplier")
SEARCH_PLACEHOLDER = "Search by item name, SKU, category, or supplier"

# ─────────────────────────────────────────────────────────
# REPORT
# ─────────────────────────────────────────────────────────
REPORT_TITLE = "Inventory Report"
REPORT_HEADERS = [
    "Item Name",
    "SKU",
    "Category",
    "Quantity",
    "Price",
    "Supplier",
    "Reorder Level",
    "Date Added",
]
REPORT_FILENAME_PREFIX = "Inventory_Report"
REPORT_DATE_FORMAT = "%x"  # locale calendar date
REPORT_FILENAME_DATE_FORMAT = "%Y-%m-%d"
REPORT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# ─────────────────────────────────────────────────────────
# CHART
# ─────────────────────────────────────────────────────────
CHART_DATASET_LABEL = "Quantity"
CHART_FILL_COLOR = "rgba(54, 162, 235, 0.6)"
CHART_BORDER_COLOR = "rgba(54, 162, 235, 1)"
CHART_BORDER_WIDTH = 1
