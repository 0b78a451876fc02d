"""Navigation bar component."""
import streamlit as st

PAGE_HOME = "Home"
PAGE_INVENTORY = "Inventory List"
PAGE_FORM = "Add Product"
PAGES = [PAGE_HOME, PAGE_INVENTORY, PAGE_FORM]


def go_to(page: str) -> None:
    """Switch pages. Only safe from a widget callback."""
    st.session_state.page = page


def render_navbar() -> str:
    """
    Render the sidebar navigation.

    Returns:
        The selected page name
    """
    with st.sidebar:
        st.title("🛒 GroceryStore")
        page = st.radio(
            "Navigate",
            options=PAGES,
            key="page",
            label_visibility="collapsed"
        )
    return str(page)
