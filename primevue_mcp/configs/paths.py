"""
PrimeVue MCP Data Paths

Manages the data directory holding the extractor outputs and the
combined dataset.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path("data")

# Output file of each pipeline stage
API_FILE = "api.json"
DOCS_FILE = "docs.json"
LOGIC_FILE = "logic.json"
TOKENS_FILE = "tokens.json"
COMBINED_FILE = "combined.json"


def get_data_path() -> Path:
    """Get the data directory path.

    Uses PRIMEVUE_MCP_DATA_PATH when set, otherwise ./data relative
    to the working directory.
    """
    data_path = os.environ.get("PRIMEVUE_MCP_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser().resolve()
    return DEFAULT_DATA_PATH.resolve()


def ensure_data_dir() -> Path:
    """Create the data directory if missing and return it."""
    data_path = get_data_path()
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


def get_dataset_paths(data_path: Path | None = None) -> dict[str, Path]:
    """
    Resolve every pipeline file inside the data directory.

    Returns:
        Mapping of stage name (api, docs, logic, tokens, combined) to path
    """
    base = data_path if data_path is not None else get_data_path()
    return {
        "api": base / API_FILE,
        "docs": base / DOCS_FILE,
        "logic": base / LOGIC_FILE,
        "tokens": base / TOKENS_FILE,
        "combined": base / COMBINED_FILE,
    }
