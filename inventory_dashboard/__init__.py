"""Inventory dashboard: a Streamlit front end for a remote stock service."""
