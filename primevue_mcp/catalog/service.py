"""
Catalog Service

Thread-safe owner of the combined dataset and the query result cache.
The dataset is read from combined.json on first access and held for the
process lifetime; it is never reloaded when the file changes.
"""

import json
import time
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Optional

from primevue_mcp.catalog import queries
from primevue_mcp.catalog.cache import ResultCache
from primevue_mcp.configs import get_dataset_paths, get_full_config, get_logger
from primevue_mcp.configs.constants import CACHE_TTL_SECONDS
from primevue_mcp.exceptions import DatasetLoadError

logger = get_logger("catalog.service")


def load_dataset(path: Path) -> dict[str, Any]:
    """
    Read and decode combined.json.

    Raises:
        DatasetLoadError: file missing, unreadable, or not a JSON object
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DatasetLoadError("Combined dataset not found; run the build first", str(path)) from e
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetLoadError(f"Failed to load combined dataset: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise DatasetLoadError("Combined dataset must be a JSON object", str(path))
    return data


class CatalogService:
    """
    Read-only query surface over the combined dataset.

    Lazy load uses double-checked locking so concurrent first requests
    read the file once. Cached results are keyed ``<ns>:*`` when
    unfiltered and ``<ns>:q=<filter>`` otherwise.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.path = Path(path) if path else get_dataset_paths()["combined"]
        self.cache = ResultCache(ttl=CACHE_TTL_SECONDS if ttl is None else ttl, clock=clock)
        self._data: Optional[dict[str, Any]] = None
        self._lock = RLock()

    @property
    def data(self) -> dict[str, Any]:
        """Get the dataset, loading it on first access."""
        if self._data is None:
            with self._lock:
                if self._data is None:
                    data = load_dataset(self.path)
                    component_count = len(queries.component_names(data))
                    logger.info(f"Loaded {component_count} components from {self.path}")
                    self._data = data
        return self._data

    @property
    def loaded(self) -> bool:
        return self._data is not None

    def component_names(self) -> list[str]:
        return queries.component_names(self.data)

    def list_components(self, q: Optional[str] = None) -> list[dict[str, Any]]:
        key = f"components:q={q}" if q else "components:*"
        return self.cache.get_or_compute(
            "components", key, lambda: queries.list_components(self.data, q)
        )

    def get_component(self, name: str) -> dict[str, Any]:
        return queries.find_component(self.data, name)

    def get_section(self, name: str, section: str) -> Any:
        return queries.find_section(self.data, name, section)

    def tokens(self, q: Optional[str] = None) -> dict[str, Any]:
        """Filtered token map wrapped as ``{count, tokens}``."""
        def compute() -> dict[str, Any]:
            tokens = queries.filter_tokens(self.data, q)
            return {"count": len(tokens), "tokens": tokens}

        key = f"tokens:q={q}" if q else "tokens:*"
        return self.cache.get_or_compute("tokens", key, compute)

    def search(self, q: str) -> dict[str, Any]:
        """Global search wrapped as ``{query, count, results}``."""
        def compute() -> dict[str, Any]:
            results = queries.search_dataset(self.data, q)
            return {"query": q, "count": len(results), "results": results}

        return self.cache.get_or_compute("search", f"search:{q}", compute)

    def token_count(self) -> int:
        return len(queries.get_tokens(self.data))

    def cache_stats(self) -> dict[str, Any]:
        return self.cache.stats()

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Query cache cleared")


# --- Process-wide instance ---

_catalog: Optional[CatalogService] = None
_catalog_lock = RLock()


def get_catalog() -> CatalogService:
    """Get the shared catalog, creating it from runtime config on first use."""
    global _catalog
    if _catalog is None:
        with _catalog_lock:
            if _catalog is None:
                _catalog = CatalogService(ttl=get_full_config()["cache_ttl"])
    return _catalog


def configure_catalog(
    path: Optional[Path] = None,
    ttl: Optional[float] = None,
    clock: Callable[[], float] = time.monotonic,
) -> CatalogService:
    """Replace the shared catalog (used by the CLI and tests)."""
    global _catalog
    with _catalog_lock:
        _catalog = CatalogService(path=path, ttl=ttl, clock=clock)
    return _catalog


def reset_catalog() -> None:
    """Drop the shared catalog; the next access recreates it."""
    global _catalog
    with _catalog_lock:
        _catalog = None
