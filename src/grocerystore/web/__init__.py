"""Streamlit UI for GroceryStore."""
