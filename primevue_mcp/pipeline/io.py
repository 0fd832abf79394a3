"""
Dataset File I/O

Reading and writing the JSON files exchanged between pipeline stages.
"""

import json
from pathlib import Path
from typing import Any

from primevue_mcp.configs import get_logger

logger = get_logger("pipeline.io")


def read_json_safe(path: str | Path) -> dict[str, Any]:
    """
    Read a JSON object, returning an empty dict if missing or invalid.

    A missing file is expected (stage not run yet) and only logged at
    debug level; unreadable or malformed files are logged as warnings.
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"Input not found, treating as empty: {path}")
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read or parse {path.name}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path.name}: top level is not an object")
        return {}
    return data


def write_json(path: str | Path, data: Any) -> Path:
    """Write data as indented UTF-8 JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


def read_text_safe(path: str | Path) -> str | None:
    """Read a text file, returning None when it is missing or unreadable."""
    try:
        return Path(path).read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None
