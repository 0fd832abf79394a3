"""
Catalog Response Models

Pydantic shapes for the query API responses. Optional fields are
omitted from the JSON when unset.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel


class ComponentSummary(BaseModel):
    """List view of one component."""
    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    hasProps: bool
    hasExamples: bool
    sections: list[str] = []


class TokensResponse(BaseModel):
    count: int
    tokens: dict[str, Any]


class SearchResult(BaseModel):
    """A component or token hit, with the fields that matched."""
    type: Literal["component", "token"]
    name: str
    title: Optional[str] = None
    description: Optional[str] = None
    value: Optional[str] = None
    matches: list[str]


class SearchResponse(BaseModel):
    query: str
    count: int
    results: list[SearchResult]


class FieldError(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error body shared by 400, 404 and 500 responses."""
    error: str
    message: Optional[str] = None
    available: Optional[list[str]] = None
    details: Optional[list[FieldError]] = None
    usage: Optional[dict[str, str]] = None
    examples: Optional[list[str]] = None
    what_it_searches: Optional[dict[str, list[str]]] = None
    note: Optional[str] = None
