"""
Catalog

Query layer over combined.json shared by the HTTP API and the MCP server.
"""

from primevue_mcp.catalog.cache import ResultCache
from primevue_mcp.catalog.service import (
    CatalogService,
    configure_catalog,
    get_catalog,
    load_dataset,
    reset_catalog,
)

__all__ = [
    "CatalogService",
    "ResultCache",
    "configure_catalog",
    "get_catalog",
    "load_dataset",
    "reset_catalog",
]
