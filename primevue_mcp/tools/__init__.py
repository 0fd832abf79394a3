"""
MCP Tools

Tool functions registered on the stdio server.
"""

from primevue_mcp.tools.components import (
    get_component,
    list_components,
    search_components,
    search_tokens,
)

__all__ = [
    "get_component",
    "list_components",
    "search_components",
    "search_tokens",
]
