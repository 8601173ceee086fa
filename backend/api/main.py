from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
import json
import sys
import time
from pathlib import Path

# Add project root to path so `python backend/api/main.py` works
root_dir = Path(__file__).parent.parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from shared.config_manager import ConfigManager, get_config
from shared.logging_config import get_api_logger, log_api_call
from shared.schemas import (
    ITEMS, SERVICE_NAME, SERVICE_VERSION,
    DataFeed, EchoMessage, ErrorResponse, HealthReport, StatusReport,
    iso_timestamp,
)

# Monotonic reference point for /api/v1/status uptime
PROCESS_STARTED_AT = time.monotonic()

api_logger = get_api_logger()

router = APIRouter()

def process_uptime() -> float:
    """Seconds elapsed since the server process loaded this module."""
    return max(0.0, time.monotonic() - PROCESS_STARTED_AT)

def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())

@router.api_route("/health", methods=["GET", "HEAD"], response_model=HealthReport)
def health_check():
    return HealthReport(status="Backend API is healthy", timestamp=iso_timestamp())

@router.api_route("/api/v1/data", methods=["GET", "HEAD"], response_model=DataFeed)
def get_data():
    """Return the fixed item list."""
    return DataFeed(
        message="Data from backend API",
        data=list(ITEMS),
        timestamp=iso_timestamp(),
    )

@router.api_route("/api/v1/status", methods=["GET", "HEAD"], response_model=StatusReport)
def get_status(request: Request):
    """Report service identity, configured environment and process uptime."""
    config: ConfigManager = request.app.state.config
    return StatusReport(
        service=SERVICE_NAME,
        version=SERVICE_VERSION,
        environment=config.environment,
        uptime=process_uptime(),
    )

@router.post("/api/v1/echo", response_model=EchoMessage)
async def echo(request: Request):
    """
    Echo back the `message` field of a JSON body.

    The value is not type checked. Empty bodies, arrays, and bodies not sent
    as JSON echo null. Malformed JSON and bare scalars (`"hi"`, `5`, `null`)
    raise and are reported as a 500 by the request middleware.
    """
    payload = {}
    if "json" in request.headers.get("content-type", ""):
        body = await request.body()
        if body.strip():
            payload = json.loads(body)
            if not isinstance(payload, (dict, list)):
                raise ValueError(f"JSON body must be an object or array, got {type(payload).__name__}")

    message = payload.get("message") if isinstance(payload, dict) else None
    return EchoMessage(received=message, echoed=message, timestamp=iso_timestamp())

def create_app(config: Optional[ConfigManager] = None) -> FastAPI:
    """Build the API application bound to a configuration."""
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        api_logger.info(f"🚀 Backend API running on port {config.port} ({config.environment})")
        api_logger.info(f"Health check: http://localhost:{config.port}/health")
        yield
        api_logger.info("👋 Backend API shutting down")

    app = FastAPI(title="Wobot Backend API", version=SERVICE_VERSION, lifespan=lifespan)
    app.state.config = config

    # Middleware to log all API calls and turn unhandled faults into 500s
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        api_logger.info(f"📥 API CALL: {request.method} {request.url}")

        try:
            response = await call_next(request)
        except Exception as e:
            api_logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}: {e}")
            response = error_response(500, "Internal Server Error", str(e))

        log_api_call(api_logger, request.method, str(request.url),
                     status=response.status_code, time=time.time() - start_time)

        return response

    # Registered after the logging middleware so error responses carry CORS headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Unknown paths and known paths with the wrong method are both "not found"
        if exc.status_code in (404, 405):
            return error_response(404, "Not Found", f"Route {request.method} {request.url.path} not found")
        return error_response(exc.status_code, "HTTP Error", str(exc.detail))

    app.include_router(router)
    return app

app = create_app()

if __name__ == "__main__":
    from backend.run import main
    main()
