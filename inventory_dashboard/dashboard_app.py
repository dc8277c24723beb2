# inventory_dashboard/dashboard_app.py

import os
import sys
from pathlib import Path

# Ensure this file works even when executed using a relative path (e.g.
# `streamlit run inventory_dashboard/dashboard_app.py`).
_CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
_REPO_ROOT = os.path.abspath(os.path.join(_CURRENT_DIR, os.pardir))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

from inventory_dashboard.core.logging import LOG_FILE, configure_logging, flush_logs

# Configure logging before importing modules that use it
configure_logging()

from datetime import datetime

import streamlit as st

from inventory_dashboard.config import load_api_config
from inventory_dashboard.core.constants import LOW_STOCK_MESSAGE, SEARCH_PLACEHOLDER
from inventory_dashboard.report_pdf import render_report_pdf
from inventory_dashboard.services.api_client import InventoryApiClient
from inventory_dashboard.services.controller import InventoryController
from inventory_dashboard.ui.charts import build_bar_figure
from inventory_dashboard.ui.forms import changed_fields, price_input_value
from inventory_dashboard.ui.helpers import read_recent_logs, show_success, show_warning
from inventory_dashboard.ui.tables import LOW_STOCK_COLUMN, build_table_frame

TABLE_COLUMNS = (3, 1.5, 2, 2, 1, 2, 1, 1.5, 2)


def get_controller() -> InventoryController:
    """Return this session's controller, loading the inventory on first use."""
    if "ss_inventory_controller" not in st.session_state:
        config = load_api_config()
        client = InventoryApiClient(config["base_url"], config["timeout"])
        st.session_state.ss_inventory_controller = InventoryController(client)
    controller = st.session_state.ss_inventory_controller
    if not controller.activated:
        with st.spinner("Fetching inventory items..."):
            controller.activate()
    return controller


def render_sidebar_logs() -> None:
    if st.sidebar.button("Clear Logs"):
        flush_logs()
        st.toast("Logs cleared")
    with st.sidebar.expander("Recent Logs"):
        log_path = Path(LOG_FILE)
        if log_path.exists():
            preview = read_recent_logs()
            if preview:
                st.code(preview)
            else:
                st.write("Log file is empty.")
            st.download_button(
                "Download Logs",
                data=log_path.read_bytes(),
                file_name=log_path.name,
                mime="text/plain",
            )
        else:
            st.write("Log file not found.")


def render_error_banner(controller: InventoryController) -> None:
    message = controller.error_message
    if not message:
        return
    st.error(message)
    cols = st.columns((1, 1, 6))
    if cols[0].button("Dismiss", key="widget_inventory_error_dismiss_btn"):
        controller.dismiss_error()
        st.rerun()
    if cols[1].button("Reload", key="widget_inventory_error_reload_btn"):
        controller.dismiss_error()
        success, msg = controller.reload()
        if success:
            show_success(msg)
        st.rerun()


def render_edit_form(controller: InventoryController) -> None:
    item = controller.mutations.selected_item
    if item is None:
        return
    st.subheader(f"✏️ Update Item: {item.item_name or item.id}")
    with st.form("widget_inventory_edit_form"):
        col1, col2 = st.columns(2)
        with col1:
            item_name = st.text_input("Item Name", value=item.item_name or "")
            sku = st.text_input("SKU", value=item.sku or "")
            category = st.text_input("Category", value=item.category or "")
            supplier = st.text_input("Supplier", value=item.supplier or "")
        with col2:
            quantity = st.number_input(
                "Quantity", min_value=0, step=1, value=item.quantity, placeholder="N/A"
            )
            price = st.number_input(
                "Price",
                min_value=0.0,
                step=0.01,
                format="%.2f",
                value=price_input_value(item.price),
                placeholder="0.00",
            )
            reorder_level = st.number_input(
                "Reorder Level",
                min_value=0,
                step=1,
                value=item.reorder_level,
                placeholder="N/A",
            )
        save_col, cancel_col = st.columns(2)
        submitted = save_col.form_submit_button("💾 Save Changes")
        cancelled = cancel_col.form_submit_button("✖️ Cancel")

    if cancelled:
        controller.mutations.cancel_edit()
        st.rerun()
    if submitted:
        changes = changed_fields(
            item,
            {
                "item_name": item_name,
                "sku": sku,
                "category": category,
                "supplier": supplier,
                "quantity": quantity,
                "price": price,
                "reorder_level": reorder_level,
            },
        )
        controller.mutations.stage_changes(**changes)
        success, message = controller.mutations.submit_edit()
        if success:
            show_success(message)
        st.rerun()


def render_delete_prompt(controller: InventoryController) -> None:
    item_id = controller.mutations.pending_delete
    if item_id is None:
        return
    item = controller.store.get(item_id)
    name = item.item_name if item is not None and item.item_name else item_id
    st.warning(f"Are you sure you want to delete '{name}'?")
    cols = st.columns((1, 1, 6))
    if cols[0].button("Yes, delete", key="widget_inventory_delete_confirm_btn"):
        success, message = controller.mutations.confirm_delete()
        if success:
            show_success(message)
        st.rerun()
    if cols[1].button("Cancel", key="widget_inventory_delete_cancel_btn"):
        controller.mutations.cancel_delete()
        st.rerun()


def render_table(controller: InventoryController) -> None:
    table_df = build_table_frame(controller.visible_items())
    if table_df.empty:
        st.info(
            "No items found matching your search."
            if controller.search_term
            else "No inventory items found."
        )
        return

    header_cols = st.columns(TABLE_COLUMNS)
    for col, header in zip(header_cols, list(table_df.columns[:-1]) + ["Actions"]):
        col.markdown(f"**{header}**")
    st.divider()

    for item_id, row in table_df.iterrows():
        cols = st.columns(TABLE_COLUMNS)
        for col, value in zip(cols, row.iloc[:-1]):
            col.write(value)
        if row[LOW_STOCK_COLUMN]:
            cols[3].warning(LOW_STOCK_MESSAGE)
        busy = controller.mutations.is_in_flight(item_id)
        with cols[-1]:
            if st.button("Update", key=f"widget_inventory_update_btn_{item_id}", disabled=busy):
                controller.mutations.begin_edit(item_id)
                st.rerun()
            if st.button("Delete", key=f"widget_inventory_delete_btn_{item_id}", disabled=busy):
                controller.mutations.request_delete(item_id)
                st.rerun()


def render_report_download(controller: InventoryController) -> None:
    report = controller.build_report()
    if not report.rows:
        show_warning("No items to include in the report.")
        return
    st.download_button(
        "📄 Download PDF Report",
        data=render_report_pdf(report),
        file_name=report.filename,
        mime="application/pdf",
        key="widget_inventory_report_download_btn",
    )


def run_dashboard() -> None:
    st.set_page_config(page_title="Inventory Management", page_icon="📦", layout="wide")
    render_sidebar_logs()

    controller = get_controller()

    st.title("📦 Inventory Management")
    st.caption(f"Current Overview as of: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    render_error_banner(controller)

    st.text_input(
        "Search",
        key="ss_inventory_search_term",
        placeholder=SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
    )
    controller.set_search_term(st.session_state.ss_inventory_search_term)

    action_cols = st.columns((1, 1, 4))
    with action_cols[0]:
        controller.show_chart = st.toggle("Show chart", value=controller.show_chart)
    with action_cols[1]:
        if st.button("Generate PDF report", key="widget_inventory_report_btn"):
            render_report_download(controller)

    if controller.show_chart:
        st.plotly_chart(build_bar_figure(controller.chart_data()), use_container_width=True)

    render_delete_prompt(controller)
    render_edit_form(controller)
    st.divider()
    render_table(controller)


if __name__ == "__main__":
    run_dashboard()
