"""
Component Tools

MCP tools for searching and reading PrimeVue component metadata.
Every tool returns one JSON text payload.
"""

import json
from typing import Any

from primevue_mcp import __version__
from primevue_mcp.catalog import get_catalog
from primevue_mcp.configs import get_logger
from primevue_mcp.exceptions import ComponentNotFoundError, InvalidArgumentError, ToolError

logger = get_logger("tools.components")

# Cap on names quoted in a not-found message
MAX_SUGGESTIONS = 10


def _dump(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _drop_none(record: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in record.items() if value is not None}


def search_components(query: str = "") -> str:
    """
    Search PrimeVue components by name, title, or description.

    Args:
        query: Search term (case-insensitive substring). Empty lists everything.

    Returns:
        JSON with query, count and component summaries
    """
    logger.info(f"search_components: query='{query}'")
    results = [
        _drop_none({
            "name": summary["name"],
            "title": summary.get("title"),
            "description": summary.get("description"),
            "hasProps": summary["hasProps"],
            "hasExamples": summary["hasExamples"],
        })
        for summary in get_catalog().list_components(query or None)
    ]
    return _dump({"query": query, "count": len(results), "results": results})


def get_component(name: str) -> str:
    """
    Get detailed information about a specific component.

    Args:
        name: Component name (case-insensitive, e.g. "button" or "DataTable")

    Returns:
        JSON component record with props, emits, slots, examples and logic
    """
    if not name:
        raise InvalidArgumentError("Component name is required")

    logger.info(f"get_component: name='{name}'")
    try:
        record = get_catalog().get_component(name)
    except ComponentNotFoundError as e:
        available = ", ".join(e.available[:MAX_SUGGESTIONS])
        raise ToolError(f"{e.message}. Available: {available}") from e
    return _dump(record)


def search_tokens(query: str = "") -> str:
    """
    Search PrimeVue design tokens.

    Args:
        query: Search term matched against token names and values

    Returns:
        JSON with query, count and the matching token map
    """
    logger.info(f"search_tokens: query='{query}'")
    result = get_catalog().tokens(query or None)
    return _dump({"query": query, "count": result["count"], "tokens": result["tokens"]})


def list_components() -> str:
    """
    List all available components.

    Returns:
        JSON with dataset statistics and every component's name, title and description
    """
    catalog = get_catalog()
    data = catalog.data
    names = catalog.component_names()
    token_count = catalog.token_count()

    return _dump({
        "name": "PrimeVue MCP",
        "version": __version__,
        "stats": {
            "components": len(names),
            "tokens": token_count,
            "total": len(names) + token_count,
        },
        "components": [
            _drop_none({
                "name": name,
                "title": data[name].get("title"),
                "description": data[name].get("description"),
            })
            for name in names
        ],
    })
