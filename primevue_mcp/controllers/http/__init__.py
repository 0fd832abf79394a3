"""
PrimeVue MCP HTTP Server

FastAPI app exposing the combined dataset as a read-only query API.
"""

import time
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from primevue_mcp import __version__
from primevue_mcp.configs import get_logger
from primevue_mcp.configs.constants import SERVICE_DESCRIPTION, SERVICE_NAME
from primevue_mcp.controllers.http.api import router as api_router
from primevue_mcp.exceptions import NotFoundError, PrimeVueMCPError

logger = get_logger("http")

ENDPOINTS = [
    "/mcp/components",
    "/mcp/component/:name",
    "/mcp/tokens",
    "/mcp/search",
    "/cache/stats",
    "/cache/clear",
]

SEARCH_USAGE_HINTS = {
    "usage": {
        "method": "GET",
        "url": "/mcp/search",
        "required_parameter": "q",
        "format": "/mcp/search?q=<search term>",
    },
    "examples": [
        "/mcp/search?q=button",
        "/mcp/search?q=click",
        "/mcp/search?q=primary.color",
    ],
    "what_it_searches": {
        "components": ["name", "title", "description", "prop names"],
        "tokens": ["key", "value"],
    },
}

# Track server startup time
_started = time.monotonic()


def get_uptime() -> float:
    """Seconds since the server module was loaded."""
    return time.monotonic() - _started


# Create FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description=SERVICE_DESCRIPTION,
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


# --- Exception Handlers ---


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render parameter validation failures as a structured 400."""
    errors = exc.errors()
    in_path = any(err.get("loc", ("query",))[0] == "path" for err in errors)

    body: dict[str, Any] = {
        "error": "Invalid path parameters" if in_path else "Invalid query parameters",
        "details": [
            {
                "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
                "message": err.get("msg", ""),
            }
            for err in errors
        ],
    }
    if request.url.path == "/mcp/search":
        body.update(SEARCH_USAGE_HINTS)

    logger.debug(f"Rejected request to {request.url.path}: {body['details']}")
    return JSONResponse(status_code=400, content=body)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"error": exc.message, "available": exc.available},
    )


@app.exception_handler(PrimeVueMCPError)
async def domain_error_handler(request: Request, exc: PrimeVueMCPError) -> JSONResponse:
    logger.error(f"Request to {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# --- Service Endpoints ---


@app.get("/health")
def health() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": get_uptime(),
    }


@app.get("/")
def root() -> dict[str, Any]:
    """Service name, version and endpoint list."""
    return {
        "name": SERVICE_NAME,
        "version": __version__,
        "description": SERVICE_DESCRIPTION,
        "endpoints": ENDPOINTS,
    }


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the FastAPI server."""
    import uvicorn
    from primevue_mcp.configs import get_full_config

    config = get_full_config()
    host = host or config["host"]
    port = port or config["port"]
    logger.info(f"PrimeVue MCP API running on http://{host}:{port}")
    logger.info("Dataset will be loaded on first request")
    uvicorn.run(app, host=host, port=port, log_level="warning")
