"""
Dataset Merger

Combines the four extractor outputs into combined.json.

Override order is an explicit contract: each component record is built
from an ordered list of partial records merged left to right, with later
entries winning per top-level field:

1. documentation fields (docs.json)
2. signature fields (api.json)
3. ``{"logic": ...}`` (logic.json), only when present

The flat token map is attached under TOKENS_KEY when non-empty.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

from primevue_mcp.configs import TOKENS_KEY, get_logger
from primevue_mcp.pipeline.io import read_json_safe, write_json

logger = get_logger("pipeline.merge")


def merge_records(partials: list[Optional[Mapping[str, Any]]]) -> dict[str, Any]:
    """Shallow-merge partial records left to right; later fields win."""
    merged: dict[str, Any] = {}
    for partial in partials:
        if partial:
            merged.update(partial)
    return merged


def merge_datasets(
    api: Mapping[str, Any],
    docs: Mapping[str, Any],
    logic: Mapping[str, Any],
    tokens: Mapping[str, Any],
) -> dict[str, Any]:
    """
    Merge extractor outputs into one dataset.

    Component keys are the union of api, docs and logic keys in that
    first-seen order. Tokens never contribute component keys.
    """
    merged: dict[str, Any] = {}

    keys = list(dict.fromkeys([*api.keys(), *docs.keys(), *logic.keys()]))
    for key in keys:
        logic_record = logic.get(key)
        merged[key] = merge_records([
            docs.get(key),
            api.get(key),
            {"logic": logic_record} if logic_record is not None else None,
        ])

    if tokens:
        merged[TOKENS_KEY] = dict(tokens)

    return merged


def run_merge(paths: Mapping[str, Path]) -> dict[str, Any]:
    """
    Read the four stage outputs and write the combined dataset.

    Args:
        paths: Mapping with api, docs, logic, tokens and combined paths
    """
    logger.info("Merging extracted datasets")
    merged = merge_datasets(
        api=read_json_safe(paths["api"]),
        docs=read_json_safe(paths["docs"]),
        logic=read_json_safe(paths["logic"]),
        tokens=read_json_safe(paths["tokens"]),
    )
    write_json(paths["combined"], merged)

    component_count = len(merged) - (1 if TOKENS_KEY in merged else 0)
    logger.info(f"Combined dataset written to {paths['combined']} ({component_count} components)")
    return merged
