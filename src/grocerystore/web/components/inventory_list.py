"""Inventory list component for showing products and their actions."""
from typing import Any, Dict, List
import streamlit as st

from grocerystore.domain.types import Product
from grocerystore.services.inventory_store import InventoryStore
from .feedback import flash, render_feedback
from .inventory_form import reset_form
from .navbar import PAGE_FORM, go_to

COLUMNS = ["Product Name", "Category", "Quantity", "Selling Price"]


def format_number(value: float) -> str:
    """Whole numbers without decimals, anything else with two."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def format_price(value: float) -> str:
    return f"${format_number(value)}"


def inventory_rows(products: List[Product]) -> List[Dict[str, Any]]:
    """Display rows for the inventory table."""
    return [
        {
            "Product Name": p.product_name,
            "Category": p.category.value,
            "Quantity": format_number(p.quantity),
            "Selling Price": format_price(p.selling_price),
        }
        for p in products
    ]


def _start_edit(product_id: str) -> None:
    reset_form()
    st.session_state.edit_id = product_id
    go_to(PAGE_FORM)


def _ask_delete(product_id: str) -> None:
    st.session_state.pending_delete = product_id


def _confirm_delete(store: InventoryStore, product_id: str) -> None:
    st.session_state.pending_delete = None
    result = store.delete(product_id)
    if not result.success:
        st.session_state.list_error = result.error
    elif result.metadata.get("removed"):
        flash(f"Deleted {product_id}")


def _cancel_delete() -> None:
    st.session_state.pending_delete = None


def render_inventory_list(store: InventoryStore) -> None:
    """
    Render the inventory table with edit and delete actions.

    Args:
        store: Inventory store to display
    """
    st.header("Inventory List")

    error = st.session_state.pop('list_error', None)
    if error:
        render_feedback(error, type_="error")

    products = store.items
    if not products:
        st.info("No products in inventory")
        return

    widths = [3, 2, 1, 2, 1, 1]
    header = st.columns(widths)
    for col, title in zip(header, COLUMNS + ["Actions"]):
        col.markdown(f"**{title}**")

    pending = st.session_state.get('pending_delete')
    for idx, (product, row) in enumerate(zip(products, inventory_rows(products))):
        cols = st.columns(widths)
        for col, name in zip(cols, COLUMNS):
            col.write(row[name])

        cols[-2].button(
            "Edit",
            key=f"edit_{idx}_{product.product_id}",
            on_click=_start_edit,
            args=(product.product_id,)
        )
        cols[-1].button(
            "Delete",
            key=f"del_{idx}_{product.product_id}",
            on_click=_ask_delete,
            args=(product.product_id,)
        )

        if pending == product.product_id:
            st.warning("Are you sure you want to delete this item?")
            yes_col, no_col = st.columns(2)
            yes_col.button(
                "Yes, delete",
                key=f"confirm_{idx}_{product.product_id}",
                type="primary",
                on_click=_confirm_delete,
                args=(store, product.product_id)
            )
            no_col.button("Cancel", key=f"cancel_{idx}_{product.product_id}", on_click=_cancel_delete)
