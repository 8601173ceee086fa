import streamlit as st

from frontend.streamlit.dashboard_state import DashboardState, FetchKind, button_label
from frontend.streamlit.utils import has_echo

MESSAGE_INPUT_KEY = "echo_message"


def render_echo_panel(state: DashboardState, on_send):
    """Render the message form and, when the last response is an echo, its result."""
    with st.container(border=True):
        st.subheader("💬 Send Message")

        with st.form("echo_form", border=False):
            st.text_input(
                "Message",
                key=MESSAGE_INPUT_KEY,
                placeholder="Enter a message...",
                disabled=state.loading,
                label_visibility="collapsed",
            )
            st.form_submit_button(
                button_label(FetchKind.ECHO, state.loading),
                disabled=state.loading,
                on_click=on_send,
            )

        payload = state.last_response
        if has_echo(payload):
            st.markdown(f"**Received:** {payload.get('received')}")
            st.markdown(f"**Echoed:** {payload.get('echoed')}")
