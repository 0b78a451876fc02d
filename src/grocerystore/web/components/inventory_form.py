"""Add/edit product form component."""
from typing import Any, Dict, Optional
import streamlit as st

from grocerystore.domain.types import Category, Product
from grocerystore.services.base_service import Result
from grocerystore.services.inventory_store import InventoryStore
from .feedback import flash, render_feedback

FORM_FIELDS = ["productId", "category", "productName", "quantity", "mrp", "sellingPrice"]
CATEGORY_OPTIONS = [c.value for c in Category]


def empty_form() -> Dict[str, Any]:
    """Initial form values."""
    return {
        "productId": "",
        "category": Category.FRUITS.value,
        "productName": "",
        "quantity": None,
        "mrp": None,
        "sellingPrice": None,
    }


def form_from_product(product: Optional[Product]) -> Dict[str, Any]:
    """Form values for editing ``product``, or an empty form."""
    if product is None:
        return empty_form()
    return product.to_record()


def submit_product(
    store: InventoryStore,
    form_data: Dict[str, Any],
    editing: bool
) -> Result[Product]:
    """Send the form to the store as an update or an add."""
    if editing:
        return store.update(form_data)
    return store.add(form_data)


def reset_form(clear_edit: bool = True) -> None:
    """Drop the current widget values so the form re-renders fresh."""
    st.session_state.form_version = st.session_state.get('form_version', 0) + 1
    if clear_edit:
        st.session_state.edit_id = None


def _widget_key(field: str) -> str:
    return f"{field}_{st.session_state.get('form_version', 0)}"


def _read_form() -> Dict[str, Any]:
    return {field: st.session_state.get(_widget_key(field)) for field in FORM_FIELDS}


def _handle_submit(store: InventoryStore, editing: bool) -> None:
    result = submit_product(store, _read_form(), editing)
    if result.success:
        flash("Product updated" if editing else "Product added")
        reset_form()
    else:
        st.session_state.form_error = result


def render_inventory_form(store: InventoryStore) -> None:
    """
    Render the add/edit product form.

    Args:
        store: Inventory store receiving the submitted product
    """
    edit_id = st.session_state.get('edit_id')
    edit_item = store.get(edit_id) if edit_id else None
    editing = edit_item is not None
    values = form_from_product(edit_item)

    st.header("Edit Product" if editing else "Add New Product")

    with st.form("inventory_form"):
        st.text_input(
            "Product ID",
            value=values["productId"],
            key=_widget_key("productId"),
            disabled=editing
        )
        st.selectbox(
            "Category",
            options=CATEGORY_OPTIONS,
            index=CATEGORY_OPTIONS.index(values["category"]),
            key=_widget_key("category")
        )
        st.text_input(
            "Product Name",
            value=values["productName"],
            key=_widget_key("productName")
        )
        for field, label in (("quantity", "Quantity"), ("mrp", "MRP"), ("sellingPrice", "Selling Price")):
            st.number_input(
                label,
                value=values[field],
                min_value=0.0,
                step=1.0,
                key=_widget_key(field)
            )

        col1, col2 = st.columns(2)
        with col1:
            st.form_submit_button(
                "Update" if editing else "Submit",
                type="primary",
                on_click=_handle_submit,
                args=(store, editing)
            )
        with col2:
            st.form_submit_button("Reset", on_click=reset_form, args=(False,))

    error = st.session_state.pop('form_error', None)
    if error is not None:
        render_feedback(error.error, type_="error", suggestions=error.suggestions)
