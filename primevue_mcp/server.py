"""
PrimeVue MCP Server

Stdio MCP server exposing PrimeVue component metadata and design tokens
from the combined dataset.

Resources:
    primevue://component/<name>   one per component
    primevue://tokens             the global design token map

Environment variables:
    PRIMEVUE_MCP_DEBUG: Enable debug logging (default: false)
    PRIMEVUE_MCP_LOG_FILE: Also log to this file
    PRIMEVUE_MCP_DATA_PATH: Directory holding combined.json (default: ./data)
"""

import json
from typing import Any, Iterable

from mcp.server.fastmcp import FastMCP
from mcp.types import Resource

from primevue_mcp.catalog import get_catalog
from primevue_mcp.configs import get_logger, setup_logging
from primevue_mcp.configs.constants import MCP_SERVER_NAME, RESOURCE_SCHEME
from primevue_mcp.exceptions import ResourceNotFoundError
from primevue_mcp.tools import (
    get_component,
    list_components,
    search_components,
    search_tokens,
)

logger = get_logger("server")

COMPONENT_URI_PREFIX = f"{RESOURCE_SCHEME}://component/"
TOKENS_URI = f"{RESOURCE_SCHEME}://tokens"
JSON_MIME_TYPE = "application/json"


def component_resource(key: str, record: dict[str, Any]) -> Resource:
    """Describe one component as a listable resource."""
    return Resource(
        uri=f"{COMPONENT_URI_PREFIX}{key}",
        name=f"PrimeVue {record.get('title') or key}",
        description=record.get("description") or f"PrimeVue {key} component",
        mimeType=JSON_MIME_TYPE,
    )


class PrimeVueMCP(FastMCP):
    """
    FastMCP server whose resource list enumerates every component.

    Component resources are served through a URI template, which FastMCP
    does not list on its own, so list_resources adds one concrete entry
    per dataset component ahead of the static resources.
    """

    async def list_resources(self) -> list[Resource]:
        catalog = get_catalog()
        data = catalog.data
        components = [component_resource(key, data[key]) for key in catalog.component_names()]
        return components + await super().list_resources()

    async def read_resource(self, uri) -> Iterable[Any]:
        uri_str = str(uri)
        if uri_str != TOKENS_URI and not uri_str.startswith(COMPONENT_URI_PREFIX):
            raise ResourceNotFoundError(uri_str)
        return await super().read_resource(uri)


# --- Initialize MCP Server ---

mcp = PrimeVueMCP(MCP_SERVER_NAME)


# --- Register Resources ---


@mcp.resource(
    f"{COMPONENT_URI_PREFIX}{{name}}",
    description="PrimeVue component metadata",
    mime_type=JSON_MIME_TYPE,
)
def read_component(name: str) -> str:
    """Component record by name (case-insensitive)."""
    return json.dumps(get_catalog().get_component(name), indent=2, ensure_ascii=False)


@mcp.resource(
    TOKENS_URI,
    name="PrimeVue Design Tokens",
    description="Global design tokens for PrimeVue components",
    mime_type=JSON_MIME_TYPE,
)
def read_tokens() -> str:
    return json.dumps(get_catalog().tokens()["tokens"], indent=2, ensure_ascii=False)


# --- Register Tools ---

mcp.tool()(search_components)
mcp.tool()(get_component)
mcp.tool()(search_tokens)
mcp.tool()(list_components)


# --- Entry Point ---


def main():
    """Main entry point for the MCP server."""
    setup_logging()
    logger.info("Starting PrimeVue MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
