"""Main Streamlit application for GroceryStore."""
import uuid
import streamlit as st

from grocerystore.config.settings import get_streamlit_settings
from grocerystore.services.inventory_store import InventoryStore
from grocerystore.storage import create_storage
from grocerystore.utils.logger import get_logger
from grocerystore.web.components import (
    render_navbar,
    render_home,
    render_inventory_list,
    render_inventory_form,
    render_flash
)
from grocerystore.web.components.navbar import PAGE_HOME, PAGE_INVENTORY

logger = get_logger(__name__)


@st.cache_resource
def get_store() -> InventoryStore:
    """Create the process-wide store and load persisted products."""
    store = InventoryStore(create_storage())
    store.load()
    logger.info("Inventory store ready", key=store.key, count=len(store))
    return store


def init_session_state() -> None:
    """Initialize session state variables."""
    if 'session_id' not in st.session_state:
        st.session_state.session_id = str(uuid.uuid4())
        logger.info("New session started", session_id=st.session_state.session_id)

    defaults = {
        'page': PAGE_HOME,
        'edit_id': None,
        'form_version': 0,
        'pending_delete': None,
        'flash_messages': [],
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def main() -> None:
    """Main application entry point."""
    ui = get_streamlit_settings()
    st.set_page_config(
        page_title=ui.PAGE_TITLE,
        page_icon=ui.PAGE_ICON,
        layout=ui.LAYOUT
    )

    try:
        init_session_state()
        store = get_store()

        page = render_navbar()
        render_flash()

        if page == PAGE_HOME:
            render_home()
        elif page == PAGE_INVENTORY:
            render_inventory_list(store)
        else:
            render_inventory_form(store)

    except Exception:
        logger.exception(
            "Unhandled error in main application",
            session_id=st.session_state.get('session_id', 'error')
        )
        st.error("Something went wrong. Please try again later.")


if __name__ == "__main__":
    main()
