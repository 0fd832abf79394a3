"""
Dataset Queries

Pure read-only functions over the combined dataset, shared by the HTTP
API and the MCP tool server. All filtering is case-insensitive substring
containment: no tokenization, stemming or ranking.
"""

from typing import Any, Mapping, Optional

from primevue_mcp.configs.constants import STANDARD_SECTIONS, TOKENS_KEY
from primevue_mcp.exceptions import ComponentNotFoundError, SectionNotFoundError

Dataset = Mapping[str, Any]


def _contains(value: Any, term: str) -> bool:
    return isinstance(value, str) and term in value.lower()


def _is_section(value: Any) -> bool:
    return isinstance(value, (dict, list))


def component_names(data: Dataset) -> list[str]:
    """All component keys, excluding the reserved token key."""
    return [key for key in data.keys() if key != TOKENS_KEY]


def get_tokens(data: Dataset) -> dict[str, Any]:
    tokens = data.get(TOKENS_KEY)
    return dict(tokens) if isinstance(tokens, Mapping) else {}


def matches_component(key: str, component: Mapping[str, Any], term: str) -> bool:
    """True when the lowered term occurs in the key, title or description."""
    return (
        term in key.lower()
        or _contains(component.get("title"), term)
        or _contains(component.get("description"), term)
    )


def summarize_component(key: str, component: Mapping[str, Any]) -> dict[str, Any]:
    """
    Build the list view of one component.

    ``sections`` names the non-standard top-level fields holding
    objects or arrays (emits, slots, logic, ...).
    """
    examples = component.get("examples")
    summary = {
        "name": key,
        "title": component.get("title"),
        "description": component.get("description"),
        "hasProps": component.get("props") is not None,
        "hasExamples": bool(examples) and isinstance(examples, list),
        "sections": [
            field for field, value in component.items()
            if field not in STANDARD_SECTIONS and _is_section(value)
        ],
    }
    return summary


def list_components(data: Dataset, query: Optional[str] = None) -> list[dict[str, Any]]:
    """Summaries of every component, optionally filtered by a search term."""
    term = query.lower() if query else None
    summaries = []
    for key in component_names(data):
        component = data.get(key) or {}
        if term is not None and not matches_component(key, component, term):
            continue
        summaries.append(summarize_component(key, component))
    return summaries


def resolve_component_name(data: Dataset, name: str) -> Optional[str]:
    """
    Resolve a requested name to a dataset key.

    Tries the exact key first, then a case-insensitive match. The
    reserved token key never resolves.
    """
    if name != TOKENS_KEY and name in data:
        return name

    lowered = name.lower()
    if lowered != TOKENS_KEY and lowered in data:
        return lowered

    for key in component_names(data):
        if key.lower() == lowered:
            return key
    return None


def find_component(data: Dataset, name: str) -> dict[str, Any]:
    """
    Look up one component record.

    Raises:
        ComponentNotFoundError: listing every known component
    """
    key = resolve_component_name(data, name)
    if key is None:
        raise ComponentNotFoundError(name, component_names(data))
    return data[key]


def find_section(data: Dataset, name: str, section: str) -> Any:
    """
    Look up one named field of a component (section names are lowercased).

    Raises:
        ComponentNotFoundError: the component does not exist
        SectionNotFoundError: listing the component's object-valued fields
    """
    component = find_component(data, name)
    section_key = section.lower()
    value = component.get(section_key)
    if value is None:
        available = [field for field, v in component.items() if _is_section(v)]
        raise SectionNotFoundError(name, section, available)
    return value


def filter_tokens(data: Dataset, query: Optional[str] = None) -> dict[str, Any]:
    """Tokens whose key or value contains the term."""
    tokens = get_tokens(data)
    if not query:
        return tokens

    term = query.lower()
    return {
        key: value for key, value in tokens.items()
        if term in key.lower() or _contains(value, term)
    }


def search_dataset(data: Dataset, query: str) -> list[dict[str, Any]]:
    """
    Search components and tokens, recording which fields matched.

    Component matches are tagged ``name``, ``title``, ``description`` or
    ``prop:<name>``; token hits are tagged ``token``.
    """
    term = query.lower()
    results: list[dict[str, Any]] = []

    for key in component_names(data):
        component = data.get(key) or {}
        matches = []

        if term in key.lower():
            matches.append("name")
        if _contains(component.get("title"), term):
            matches.append("title")
        if _contains(component.get("description"), term):
            matches.append("description")

        props = component.get("props")
        if isinstance(props, Mapping):
            matches.extend(f"prop:{prop}" for prop in props if term in prop.lower())

        if matches:
            results.append({
                "type": "component",
                "name": key,
                "title": component.get("title"),
                "description": component.get("description"),
                "matches": matches,
            })

    for key, value in get_tokens(data).items():
        if term in key.lower() or _contains(value, term):
            results.append({
                "type": "token",
                "name": key,
                "value": value,
                "matches": ["token"],
            })

    return results
