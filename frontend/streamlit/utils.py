from datetime import datetime
from typing import List, Optional, Tuple

# Helpers shared by the dashboard panels. Kept free of Streamlit calls.

def format_uptime(uptime) -> str:
    """Seconds with two decimals, e.g. `12.34s`."""
    return f"{float(uptime):.2f}s"

def format_timestamp(timestamp: Optional[str]) -> str:
    """Render an ISO-8601 timestamp from the API in local time."""
    if not timestamp:
        return ""
    try:
        moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return str(timestamp)
    return moment.astimezone().strftime("%Y-%m-%d %H:%M:%S")

def data_rows(payload: Optional[dict]) -> List[Tuple[object, str, str]]:
    """(id, name, description) for every item in the order the API returned them."""
    if not payload or not isinstance(payload.get("data"), list):
        return []
    return [
        (item.get("id"), item.get("name", ""), item.get("description", ""))
        for item in payload["data"]
        if isinstance(item, dict)
    ]

def has_echo(payload: Optional[dict]) -> bool:
    return bool(payload) and "echoed" in payload
