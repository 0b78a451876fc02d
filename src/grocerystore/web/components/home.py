"""Home page component."""
import streamlit as st


def render_home() -> None:
    st.title("Welcome to Grocery Inventory Management")
    st.write("Manage your store inventory efficiently")
