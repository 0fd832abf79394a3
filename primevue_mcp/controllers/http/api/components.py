"""
Component API Endpoints

Read-only HTTP endpoints over the combined dataset: component listing,
component and section lookup, design tokens, and global search.
"""

from typing import Any, Optional

from fastapi import APIRouter, Path, Query

from primevue_mcp.catalog import get_catalog
from primevue_mcp.catalog.models import ComponentSummary, ErrorResponse, SearchResponse, TokensResponse
from primevue_mcp.configs import get_logger

logger = get_logger("http.api.components")

router = APIRouter()


@router.get(
    "/components",
    response_model=list[ComponentSummary],
    response_model_exclude_none=True,
)
def list_components(
    q: Optional[str] = Query(default=None, description="Search term for filtering components"),
) -> list[dict[str, Any]]:
    """
    List all components, optionally filtered.

    Args:
        q: Case-insensitive substring over name, title and description
    """
    logger.debug(f"List components: q={q!r}")
    return get_catalog().list_components(q)


@router.get(
    "/component/{name}",
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def get_component(
    name: str = Path(..., min_length=1, description="Component name"),
    section: Optional[str] = Query(default=None, description="Specific section of the component to retrieve"),
) -> Any:
    """
    Get one component record, or a single section of it.

    Lookup is case-insensitive. Unknown components and sections produce
    a 404 carrying the available alternatives.
    """
    logger.debug(f"Get component: name={name!r}, section={section!r}")
    catalog = get_catalog()
    if section:
        return catalog.get_section(name, section)
    return catalog.get_component(name)


@router.get("/tokens", response_model=TokensResponse)
def get_tokens(
    q: Optional[str] = Query(default=None, description="Search term for filtering tokens"),
) -> dict[str, Any]:
    """
    Get global design tokens.

    Args:
        q: Case-insensitive substring over token key or value
    """
    logger.debug(f"Get tokens: q={q!r}")
    return get_catalog().tokens(q)


@router.get(
    "/search",
    response_model=SearchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def search(
    q: str = Query(..., min_length=1, description="Search term (required)"),
) -> dict[str, Any]:
    """
    Search components and tokens.

    Component hits list which fields matched (name, title, description,
    prop:<name>); token hits are tagged ``token``.
    """
    logger.info(f"Search: q={q!r}")
    return get_catalog().search(q)
