import time
from typing import Any, Optional

import requests

from frontend.streamlit.dashboard_state import (
    DashboardState, FetchFailed, FetchKind, FetchSucceeded, reduce
)
from shared.config_manager import get_config
from shared.logging_config import get_frontend_logger, log_api_call

# Create logger for frontend API calls
frontend_logger = get_frontend_logger()


class BackendClient:
    """Thin requests wrapper around the backend API."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        config = get_config()
        self.base_url = (base_url or config.backend_url).rstrip('/')
        self.timeout = timeout if timeout is not None else config.request_timeout
        self.session = session or requests.Session()

    def _call(self, method: str, endpoint: str, **kwargs) -> Any:
        """Send a request and return the decoded JSON body.

        Raises requests.RequestException on connection errors, timeouts,
        non-2xx responses and undecodable bodies.
        """
        full_url = f"{self.base_url}{endpoint}"
        start_time = time.time()

        frontend_logger.info(f"🚀 FRONTEND API CALL: {method} {full_url}")

        try:
            response = self.session.request(method, full_url, timeout=self.timeout, **kwargs)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            response_time = time.time() - start_time
            frontend_logger.error(f"❌ FRONTEND API ERROR: {method} {endpoint} - {response_time:.3f}s - {e}")
            raise
        except ValueError as e:
            response_time = time.time() - start_time
            frontend_logger.error(f"❌ FRONTEND API JSON ERROR: {method} {endpoint} - {response_time:.3f}s - Invalid JSON: {e}")
            raise requests.RequestException(f"Invalid JSON from {endpoint}: {e}") from e

        keys = list(data.keys())[:5] if isinstance(data, dict) else type(data).__name__
        log_api_call(frontend_logger, method, endpoint, status=response.status_code,
                     time=time.time() - start_time, data_info=keys)
        return data

    def get_status(self) -> dict:
        return self._call("GET", "/api/v1/status")

    def get_data(self) -> dict:
        return self._call("GET", "/api/v1/data")

    def send_echo(self, message: str) -> dict:
        return self._call("POST", "/api/v1/echo", json={"message": message})

    def fetch(self, kind: FetchKind, message: str = "") -> dict:
        if kind is FetchKind.STATUS:
            return self.get_status()
        if kind is FetchKind.DATA:
            return self.get_data()
        return self.send_echo(message)


def perform_pending(state: DashboardState, client: BackendClient) -> DashboardState:
    """Run the queued fetch, if any, and fold its outcome into the state."""
    kind = state.pending
    if kind is None:
        return state

    try:
        payload = client.fetch(kind, state.message)
    except requests.RequestException as e:
        frontend_logger.error(f"❌ {kind.value} fetch failed: {e}")
        return reduce(state, FetchFailed(kind, str(e)))

    return reduce(state, FetchSucceeded(kind, payload))
