"""
Tests for the dashboard state transitions.
"""

import pytest
from dataclasses import FrozenInstanceError
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from frontend.streamlit.dashboard_state import (
    DashboardState, FetchFailed, FetchKind, FetchStarted, FetchSucceeded,
    MessageEdited, button_label, initial_state, reduce, request_fetch
)

STATUS_PAYLOAD = {"service": "wobot-backend", "version": "1.0.0", "environment": "development", "uptime": 1.5}
DATA_PAYLOAD = {"message": "Data from backend API", "data": [{"id": 1, "name": "Item 1", "description": "First item"}]}
ECHO_PAYLOAD = {"received": "hi", "echoed": "hi", "timestamp": "2025-01-01T00:00:00.000Z"}


class TestInitialState:

    def test_status_fetch_is_queued_on_mount(self):
        state = initial_state()
        assert state.pending is FetchKind.STATUS
        assert state.loading is True
        assert state.status is None
        assert state.last_response is None
        assert state.error is None

    def test_state_is_immutable(self):
        state = DashboardState()
        with pytest.raises(FrozenInstanceError):
            state.loading = True


class TestFetchTransitions:

    def test_fetch_started_sets_shared_loading_flag(self):
        state = reduce(DashboardState(), FetchStarted(FetchKind.DATA))
        assert state.loading is True
        assert state.pending is FetchKind.DATA

    def test_status_success_fills_status_slot_only(self):
        state = DashboardState(last_response=DATA_PAYLOAD, loading=True, pending=FetchKind.STATUS)
        state = reduce(state, FetchSucceeded(FetchKind.STATUS, STATUS_PAYLOAD))
        assert state.status == STATUS_PAYLOAD
        assert state.last_response == DATA_PAYLOAD
        assert state.loading is False
        assert state.pending is None

    def test_data_replaces_echo_in_shared_slot(self):
        state = DashboardState(last_response=ECHO_PAYLOAD)
        state = reduce(state, FetchSucceeded(FetchKind.DATA, DATA_PAYLOAD))
        assert state.last_response == DATA_PAYLOAD

    def test_echo_replaces_data_and_clears_input(self):
        state = DashboardState(last_response=DATA_PAYLOAD, message="hi")
        state = reduce(state, FetchSucceeded(FetchKind.ECHO, ECHO_PAYLOAD))
        assert state.last_response == ECHO_PAYLOAD
        assert state.message == ""

    @pytest.mark.parametrize("kind,expected", [
        (FetchKind.STATUS, "Failed to fetch backend status"),
        (FetchKind.DATA, "Failed to fetch data from backend"),
        (FetchKind.ECHO, "Failed to send message to backend"),
    ])
    def test_failure_sets_fixed_message(self, kind, expected):
        state = reduce(DashboardState(loading=True, pending=kind), FetchFailed(kind, "boom"))
        assert state.error == expected
        assert state.errors[kind] == expected
        assert state.loading is False
        assert state.pending is None

    def test_failed_status_leaves_panels_untouched(self):
        state = DashboardState(status=STATUS_PAYLOAD, last_response=ECHO_PAYLOAD, message="draft")
        state = reduce(state, FetchFailed(FetchKind.STATUS))
        assert state.error == "Failed to fetch backend status"
        assert state.status == STATUS_PAYLOAD
        assert state.last_response == ECHO_PAYLOAD
        assert state.message == "draft"

    def test_failed_echo_keeps_input(self):
        state = DashboardState(message="hi")
        state = reduce(state, FetchFailed(FetchKind.ECHO))
        assert state.message == "hi"

    def test_success_of_any_kind_clears_errors(self):
        state = reduce(DashboardState(), FetchFailed(FetchKind.STATUS))
        state = reduce(state, FetchFailed(FetchKind.DATA))
        assert state.error == "Failed to fetch data from backend"
        state = reduce(state, FetchSucceeded(FetchKind.ECHO, ECHO_PAYLOAD))
        assert state.error is None
        assert dict(state.errors) == {}

    def test_message_edited(self):
        state = reduce(DashboardState(), MessageEdited("hello"))
        assert state.message == "hello"

    def test_unknown_event_is_rejected(self):
        with pytest.raises(TypeError):
            reduce(DashboardState(), object())


class TestRequestFetch:

    @pytest.mark.parametrize("message", ["", "   ", "\t\n"])
    def test_blank_echo_is_dropped(self, message):
        state = DashboardState(message=message, last_response=DATA_PAYLOAD)
        assert request_fetch(state, FetchKind.ECHO) is state

    def test_echo_keeps_untrimmed_message(self):
        state = request_fetch(DashboardState(message="  hi  "), FetchKind.ECHO)
        assert state.pending is FetchKind.ECHO
        assert state.message == "  hi  "

    def test_status_and_data_need_no_input(self):
        assert request_fetch(DashboardState(), FetchKind.STATUS).pending is FetchKind.STATUS
        assert request_fetch(DashboardState(), FetchKind.DATA).pending is FetchKind.DATA


class TestButtonLabels:

    def test_idle_labels(self):
        assert button_label(FetchKind.STATUS, False) == "Refresh Status"
        assert button_label(FetchKind.DATA, False) == "Fetch Data"
        assert button_label(FetchKind.ECHO, False) == "Send"

    def test_busy_labels(self):
        assert button_label(FetchKind.DATA, True) == "Loading..."
        assert button_label(FetchKind.ECHO, True) == "Sending..."
        assert button_label(FetchKind.STATUS, True) == "Refresh Status"
