import streamlit as st
import sys
from pathlib import Path

# Add the root directory to Python path
root_dir = str(Path(__file__).parent.parent.parent)
if root_dir not in sys.path:
    sys.path.insert(0, root_dir)

from frontend.streamlit.api_client import BackendClient, perform_pending
from frontend.streamlit.dashboard_state import (
    DashboardState, FetchKind, MessageEdited, initial_state, reduce, request_fetch
)
from frontend.streamlit.panels.data_feed import render_data_panel
from frontend.streamlit.panels.echo import MESSAGE_INPUT_KEY, render_echo_panel
from frontend.streamlit.panels.status import render_status_panel

STATE_KEY = "dashboard_state"

# Page config
st.set_page_config(
    page_title="CloudSync Dashboard",
    page_icon="✨",
    layout="wide",
)

def get_state() -> DashboardState:
    # First run of a session: queue the status fetch
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = initial_state()
    return st.session_state[STATE_KEY]

def set_state(state: DashboardState):
    st.session_state[STATE_KEY] = state

def queue_fetch(kind: FetchKind):
    set_state(request_fetch(get_state(), kind))

def on_send():
    """Form submit: capture the typed text, then queue the echo if it is not blank."""
    state = reduce(get_state(), MessageEdited(st.session_state.get(MESSAGE_INPUT_KEY, "")))
    set_state(request_fetch(state, FetchKind.ECHO))

@st.cache_resource
def get_client() -> BackendClient:
    return BackendClient()

def main():
    """Main application entry point."""
    state = get_state()

    # Widget values can only be written before the widget is created
    if st.session_state.get(MESSAGE_INPUT_KEY) != state.message:
        st.session_state[MESSAGE_INPUT_KEY] = state.message

    st.title("✨ CloudSync Dashboard")
    st.caption("Real-time Service Monitoring & Communication")

    status_col, data_col, echo_col = st.columns(3)
    with status_col:
        render_status_panel(state, on_refresh=lambda: queue_fetch(FetchKind.STATUS))
    with data_col:
        render_data_panel(state, on_fetch=lambda: queue_fetch(FetchKind.DATA))
    with echo_col:
        render_echo_panel(state, on_send=on_send)

    if state.error:
        with st.container(border=True):
            st.markdown("### ⚠️ Error")
            st.error(state.error)

    st.divider()
    st.caption("© 2025 CloudSync. All rights reserved.")

    # The busy controls are on screen now; run the queued call and redraw
    if state.pending is not None:
        set_state(perform_pending(state, get_client()))
        st.rerun()

if __name__ == "__main__":
    main()
