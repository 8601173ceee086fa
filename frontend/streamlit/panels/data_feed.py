import streamlit as st

from frontend.streamlit.dashboard_state import DashboardState, FetchKind, button_label
from frontend.streamlit.utils import data_rows, format_timestamp


def render_data_panel(state: DashboardState, on_fetch):
    """Render the live data card from the shared last-response slot."""
    with st.container(border=True):
        st.subheader("📈 Live Data Feed")

        st.button(
            button_label(FetchKind.DATA, state.loading),
            key="fetch_data",
            disabled=state.loading,
            on_click=on_fetch,
        )

        payload = state.last_response
        if not payload:
            return

        st.markdown(f"**Message:** {payload.get('message', '')}")
        for item_id, name, description in data_rows(payload):
            with st.container(key=f"item-{item_id}"):
                st.markdown(f"**{name}**")
                st.write(description)
        st.caption(f"Timestamp: {format_timestamp(payload.get('timestamp'))}")
