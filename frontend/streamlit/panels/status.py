import streamlit as st

from frontend.streamlit.dashboard_state import DashboardState, FetchKind, button_label
from frontend.streamlit.utils import format_uptime


def render_status_panel(state: DashboardState, on_refresh):
    """Render the service status card."""
    with st.container(border=True):
        st.subheader("📊 Service Status")

        status = state.status
        if status:
            st.markdown(f"**Service:** {status.get('service')}")
            st.markdown(f"**Version:** {status.get('version')}")
            st.markdown(f"**Environment:** {status.get('environment')}")
            st.markdown(f"**Uptime:** {format_uptime(status.get('uptime', 0))}")
            st.success("✓ Connected")
        else:
            st.write("Loading status...")

        st.button(
            button_label(FetchKind.STATUS, state.loading),
            key="refresh_status",
            disabled=state.loading,
            type="primary",
            on_click=on_refresh,
        )
