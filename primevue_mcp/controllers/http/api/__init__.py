"""
HTTP API Endpoints

Component queries under /mcp and cache administration under /cache.
"""

from fastapi import APIRouter

from primevue_mcp.controllers.http.api.admin import router as admin_router
from primevue_mcp.controllers.http.api.components import router as components_router

__all__ = ["router"]

# Combined router
router = APIRouter()
router.include_router(components_router, prefix="/mcp", tags=["components"])
router.include_router(admin_router, tags=["admin"])
