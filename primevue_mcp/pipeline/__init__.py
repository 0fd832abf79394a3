"""
Extraction Pipeline

Stages (each writes one JSON file into the data directory):

- signatures: api.json (props, emits, slots from .d.ts files)
- docs: docs.json (title, description, examples from the docs site)
- logic: logic.json (composables, reactivity, methods, emits)
- tokens: tokens.json (design token lookups from theme packages)
- merge: combined.json
"""

from primevue_mcp.pipeline.docs import DocsFetcher, parse_component_page, run_docs_extraction
from primevue_mcp.pipeline.io import read_json_safe, write_json
from primevue_mcp.pipeline.logic import extract_logic, extract_logic_from_source, run_logic_extraction
from primevue_mcp.pipeline.merge import merge_datasets, merge_records, run_merge
from primevue_mcp.pipeline.signatures import (
    SignatureExtractor,
    get_pascal_case_name,
    run_signature_extraction,
)
from primevue_mcp.pipeline.tokens import extract_tokens, extract_tokens_from_source, run_token_extraction

__all__ = [
    "DocsFetcher",
    "SignatureExtractor",
    "extract_logic",
    "extract_logic_from_source",
    "extract_tokens",
    "extract_tokens_from_source",
    "get_pascal_case_name",
    "merge_datasets",
    "merge_records",
    "parse_component_page",
    "read_json_safe",
    "run_docs_extraction",
    "run_logic_extraction",
    "run_merge",
    "run_signature_extraction",
    "run_token_extraction",
    "write_json",
]
