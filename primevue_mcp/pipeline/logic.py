"""
Logic Signal Extractor

Builds logic.json with best-effort regex heuristics over each component's
implementation source. This is deliberately not a parser: matches are
reported in order of first appearance, deduplicated, and only the
categories that matched are kept.

Categories:
- composables: ``useXxx`` identifiers
- vueImports: reactivity primitives from REACTIVITY_PRIMITIVES
- methods: ``name(...) {...}`` call-like tokens, minus ``setup``/``render``
- emits: first string argument of ``emit(...)`` / ``$emit(...)`` calls
"""

import re
from pathlib import Path
from typing import Optional

from primevue_mcp.configs import get_logger
from primevue_mcp.configs.constants import REACTIVITY_PRIMITIVES, RESERVED_METHOD_NAMES
from primevue_mcp.pipeline.io import read_text_safe, write_json
from primevue_mcp.pipeline.walker import iter_component_dirs

logger = get_logger("pipeline.logic")

COMPOSABLE_PATTERN = re.compile(r"use[A-Z]\w+")
REACTIVITY_PATTERN = re.compile(r"\b(" + "|".join(REACTIVITY_PRIMITIVES) + r")\b")
METHOD_PATTERN = re.compile(r"\b(\w+)\s*\([^)]*\)\s*\{[^}]*\}")
EMIT_PATTERN = re.compile(r"""\bemit\(\s*(?:'([^']+)'|"([^"]+)"|`([^`]+)`)""")


def _unique(values) -> list[str]:
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))


def extract_logic_from_source(content: str) -> dict[str, list[str]]:
    """
    Extract logic signals from raw component source.

    Returns:
        Mapping of category -> ordered unique matches; categories with
        no matches are omitted
    """
    logic: dict[str, list[str]] = {}

    composables = _unique(COMPOSABLE_PATTERN.findall(content))
    if composables:
        logic["composables"] = composables

    vue_imports = _unique(REACTIVITY_PATTERN.findall(content))
    if vue_imports:
        logic["vueImports"] = vue_imports

    methods = _unique(
        m.group(1) for m in METHOD_PATTERN.finditer(content)
        if m.group(1) not in RESERVED_METHOD_NAMES
    )
    if methods:
        logic["methods"] = methods

    emits = _unique(
        next(g for g in m.groups() if g is not None)
        for m in EMIT_PATTERN.finditer(content)
    )
    if emits:
        logic["emits"] = emits

    return logic


def read_logic_source(component_dir: Path) -> Optional[str]:
    """
    Read <dir>/<dir>.vue, falling back to <dir>/index.mjs.

    A candidate that is missing, unreadable or empty falls through to
    the next one.
    """
    candidates = [
        component_dir / f"{component_dir.name}.vue",
        component_dir / "index.mjs",
    ]
    for candidate in candidates:
        content = read_text_safe(candidate)
        if content:
            return content
    return None


def extract_logic(library_dir: str | Path) -> dict[str, dict[str, list[str]]]:
    """
    Extract logic signals for every component in the library.

    Components without an implementation file, or with no signals at
    all, are omitted.
    """
    result: dict[str, dict[str, list[str]]] = {}

    for component_dir in iter_component_dirs(library_dir):
        content = read_logic_source(component_dir)
        if content is None:
            logger.debug(f"No logic source for {component_dir.name}")
            continue

        extracted = extract_logic_from_source(content)
        if extracted:
            result[component_dir.name] = extracted

    return result


def run_logic_extraction(library_dir: str | Path, output_path: str | Path) -> dict[str, dict]:
    """Extract logic signals and write logic.json."""
    logger.info(f"Extracting internal logic from {library_dir}")
    logic = extract_logic(library_dir)
    write_json(output_path, logic)
    logger.info(f"Extracted logic for {len(logic)} components -> {output_path}")
    return logic
