# Shared wire schemas for the backend API and the dashboard
from datetime import datetime, timezone
from typing import Any, List, Optional
from pydantic import BaseModel

SERVICE_NAME = "wobot-backend"
SERVICE_VERSION = "1.0.0"

class Item(BaseModel):
    id: int
    name: str
    description: str

class HealthReport(BaseModel):
    status: str
    timestamp: str

class DataFeed(BaseModel):
    message: str
    data: List[Item]
    timestamp: str

class StatusReport(BaseModel):
    service: str = SERVICE_NAME
    version: str = SERVICE_VERSION
    environment: str
    uptime: float

class EchoMessage(BaseModel):
    received: Any = None
    echoed: Any = None
    timestamp: str

class ErrorResponse(BaseModel):
    error: str
    message: str

# Authored once, never mutated at runtime
ITEMS = (
    Item(id=1, name="Item 1", description="First item"),
    Item(id=2, name="Item 2", description="Second item"),
    Item(id=3, name="Item 3", description="Third item"),
)

def iso_timestamp(moment: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
