"""
Admin API Endpoints

HTTP endpoints for inspecting and clearing the query result cache.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter

from primevue_mcp.catalog import get_catalog
from primevue_mcp.configs import get_logger

logger = get_logger("http.api.admin")

router = APIRouter()


@router.get("/cache/stats")
def cache_stats() -> dict[str, Any]:
    """
    Get query cache statistics.

    Returns size and keys per namespace, the TTL in seconds, and the
    total entry count.
    """
    return get_catalog().cache_stats()


@router.post("/cache/clear")
def cache_clear() -> dict[str, Any]:
    """Drop every cached query result."""
    get_catalog().clear_cache()
    return {
        "message": "Cache cleared successfully",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
