"""
Library Walker

File system traversal over the installed component library and theme
packages.
"""

import os
from pathlib import Path
from typing import Generator, Iterable, Optional

from primevue_mcp.configs import get_logger

logger = get_logger("pipeline.walker")

# Compiled theme sources scanned for token lookups
SCRIPT_EXTENSIONS = {".js", ".mjs"}


def iter_component_dirs(library_dir: str | Path) -> Generator[Path, None, None]:
    """
    Yield each component directory of the library in name order.

    Every direct sub-directory is treated as a component; files at the
    library root are ignored.
    """
    root = Path(library_dir)
    if not root.is_dir():
        logger.warning(f"Library directory not found: {root}")
        return

    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            yield entry


def first_existing(candidates: Iterable[Path]) -> Optional[Path]:
    """Return the first candidate file that exists."""
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def walk_script_files(
    base_dir: str | Path,
    extensions: Optional[set[str]] = None,
) -> Generator[Path, None, None]:
    """
    Walk a directory tree yielding script files in a stable order.

    Each directory's own files are yielded (sorted by name) before its
    sub-directories are descended (also sorted). Source maps are skipped.

    Args:
        base_dir: Root directory to walk
        extensions: Lower-case extensions to include (default: .js, .mjs)

    Yields:
        Path objects for each matching file
    """
    exts = extensions or SCRIPT_EXTENSIONS
    root = Path(base_dir)
    if not root.is_dir():
        logger.warning(f"Theme directory not found, skipping: {root}")
        return

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()

        for filename in sorted(filenames):
            if ".map" in filename:
                continue
            if Path(filename).suffix.lower() not in exts:
                continue
            yield Path(dirpath) / filename
