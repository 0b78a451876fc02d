"""Feedback component for displaying user messages."""
from typing import Optional, List
import streamlit as st


def render_feedback(
    message: str,
    type_: str = "info",
    suggestions: Optional[List[str]] = None
) -> None:
    """
    Display a feedback message with optional suggestions.

    Args:
        message: The message to display
        type_: Type of message ('success', 'error', 'warning' or 'info')
        suggestions: Optional list of hints shown under the message
    """
    if type_ == "success":
        st.success(message)
    elif type_ == "error":
        st.error(message)
    elif type_ == "warning":
        st.warning(message)
    else:
        st.info(message)

    if suggestions:
        with st.expander("Suggestions"):
            for suggestion in suggestions:
                st.write(f"• {suggestion}")


def flash(message: str, type_: str = "success") -> None:
    """Queue a message to show on the next render."""
    if 'flash_messages' not in st.session_state:
        st.session_state.flash_messages = []
    st.session_state.flash_messages.append((type_, message))


def render_flash() -> None:
    """Show and clear queued messages."""
    for type_, message in st.session_state.get('flash_messages', []):
        render_feedback(message, type_=type_)
    st.session_state.flash_messages = []
