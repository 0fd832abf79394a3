"""
Token Extractor

Builds tokens.json by collecting every ``dt('some.dotted.path')`` lookup in
the compiled theme packages. Tokens are library-global: each path becomes
a ``--p-some-dotted-path`` key whose value is the lookup call as written.
Later files overwrite earlier ones on collision.
"""

import re
from pathlib import Path
from typing import Iterable

from primevue_mcp.configs import get_logger
from primevue_mcp.pipeline.io import read_text_safe, write_json
from primevue_mcp.pipeline.walker import walk_script_files

logger = get_logger("pipeline.tokens")

TOKEN_CALL_PATTERN = re.compile(r"""\bdt\(['"`]([^'"`]+)['"`]\)""")

TOKEN_PREFIX = "--p-"


def token_key(path: str) -> str:
    """Convert a dotted token path to its CSS variable style key."""
    return TOKEN_PREFIX + path.replace(".", "-")


def extract_tokens_from_source(content: str) -> dict[str, str]:
    """
    Extract all dt() lookups from file text.

    Repeated paths collapse to one key holding the last matched call.
    """
    return {
        token_key(match.group(1)): match.group(0)
        for match in TOKEN_CALL_PATTERN.finditer(content)
    }


def extract_tokens(theme_dirs: Iterable[str | Path]) -> dict[str, str]:
    """
    Walk every theme root in order and merge their tokens.

    Missing roots are skipped with a warning.
    """
    tokens: dict[str, str] = {}
    files_scanned = 0

    for base_dir in theme_dirs:
        for file_path in walk_script_files(base_dir):
            content = read_text_safe(file_path)
            if not content:
                continue
            files_scanned += 1
            tokens.update(extract_tokens_from_source(content))

    logger.debug(f"Scanned {files_scanned} theme files")
    return tokens


def run_token_extraction(theme_dirs: Iterable[str | Path], output_path: str | Path) -> dict[str, str]:
    """Extract design tokens and write tokens.json."""
    theme_dirs = list(theme_dirs)
    logger.info(f"Extracting design tokens from {len(theme_dirs)} theme roots")
    tokens = extract_tokens(theme_dirs)
    write_json(output_path, tokens)
    logger.info(f"Extracted {len(tokens)} design tokens -> {output_path}")
    return tokens
