"""
Dashboard state and its transitions.

The whole UI is driven by one immutable DashboardState. Every change goes
through reduce(state, event), which returns a new record. There is a single
loading flag for all fetch kinds, and data and echo results share one
"last response" slot, so fetching data replaces the echo view and the other
way round.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union


class FetchKind(Enum):
    STATUS = "status"
    DATA = "data"
    ECHO = "echo"


ERROR_MESSAGES = {
    FetchKind.STATUS: "Failed to fetch backend status",
    FetchKind.DATA: "Failed to fetch data from backend",
    FetchKind.ECHO: "Failed to send message to backend",
}

IDLE_LABELS = {
    FetchKind.STATUS: "Refresh Status",
    FetchKind.DATA: "Fetch Data",
    FetchKind.ECHO: "Send",
}

# Refresh Status keeps its label while busy
BUSY_LABELS = {
    FetchKind.STATUS: "Refresh Status",
    FetchKind.DATA: "Loading...",
    FetchKind.ECHO: "Sending...",
}


@dataclass(frozen=True)
class DashboardState:
    status: Optional[dict] = None
    last_response: Optional[dict] = None
    loading: bool = False
    errors: Mapping[FetchKind, str] = field(default_factory=lambda: MappingProxyType({}))
    last_error_kind: Optional[FetchKind] = None
    message: str = ""
    pending: Optional[FetchKind] = None

    @property
    def error(self) -> Optional[str]:
        """The most recent error message, if any."""
        if self.last_error_kind is None:
            return None
        return self.errors.get(self.last_error_kind)

    @property
    def can_send(self) -> bool:
        return bool(self.message.strip())


@dataclass(frozen=True)
class FetchStarted:
    kind: FetchKind


@dataclass(frozen=True)
class FetchSucceeded:
    kind: FetchKind
    payload: Any


@dataclass(frozen=True)
class FetchFailed:
    kind: FetchKind
    detail: str = ""


@dataclass(frozen=True)
class MessageEdited:
    text: str


Event = Union[FetchStarted, FetchSucceeded, FetchFailed, MessageEdited]


def reduce(state: DashboardState, event: Event) -> DashboardState:
    """Return the state that follows `event`."""
    if isinstance(event, FetchStarted):
        return replace(state, loading=True, pending=event.kind)

    if isinstance(event, FetchSucceeded):
        cleared = dict(
            loading=False,
            pending=None,
            errors=MappingProxyType({}),
            last_error_kind=None,
        )
        if event.kind is FetchKind.STATUS:
            return replace(state, status=event.payload, **cleared)
        if event.kind is FetchKind.ECHO:
            return replace(state, last_response=event.payload, message="", **cleared)
        return replace(state, last_response=event.payload, **cleared)

    if isinstance(event, FetchFailed):
        errors = dict(state.errors)
        errors[event.kind] = ERROR_MESSAGES[event.kind]
        return replace(
            state,
            loading=False,
            pending=None,
            errors=MappingProxyType(errors),
            last_error_kind=event.kind,
        )

    if isinstance(event, MessageEdited):
        return replace(state, message=event.text)

    raise TypeError(f"Unknown dashboard event: {event!r}")


def request_fetch(state: DashboardState, kind: FetchKind) -> DashboardState:
    """
    Queue a fetch of `kind` and mark the dashboard busy.

    An echo with a blank message is dropped and the state is returned as is.
    """
    if kind is FetchKind.ECHO and not state.can_send:
        return state
    return reduce(state, FetchStarted(kind))


def button_label(kind: FetchKind, loading: bool) -> str:
    return BUSY_LABELS[kind] if loading else IDLE_LABELS[kind]


def initial_state() -> DashboardState:
    """State on first mount: the status fetch is already queued."""
    return request_fetch(DashboardState(), FetchKind.STATUS)
