"""
Query Result Cache

Time-stamped memoization of query results, grouped by namespace
(components, tokens, search). Entries expire after a fixed TTL and are
recomputed on the next request. Writes are last-writer-wins; every value
is a pure function of its key, so concurrent recomputation is harmless.
"""

import time
from typing import Any, Callable, Iterable, TypeVar

from primevue_mcp.configs.constants import CACHE_TTL_SECONDS

T = TypeVar("T")

DEFAULT_NAMESPACES = ("components", "tokens", "search")


class ResultCache:
    """Per-namespace TTL cache of computed query results."""

    def __init__(
        self,
        ttl: float = CACHE_TTL_SECONDS,
        namespaces: Iterable[str] = DEFAULT_NAMESPACES,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, dict[str, tuple[float, Any]]] = {ns: {} for ns in namespaces}

    def _namespace(self, namespace: str) -> dict[str, tuple[float, Any]]:
        return self._entries.setdefault(namespace, {})

    def is_valid(self, namespace: str, key: str) -> bool:
        """True when the key is cached and younger than the TTL."""
        entry = self._namespace(namespace).get(key)
        if entry is None:
            return False
        return self._clock() - entry[0] < self.ttl

    def set(self, namespace: str, key: str, value: Any) -> None:
        self._namespace(namespace)[key] = (self._clock(), value)

    def get_or_compute(self, namespace: str, key: str, compute: Callable[[], T]) -> T:
        """Return the cached value, recomputing it when missing or expired."""
        if self.is_valid(namespace, key):
            return self._namespace(namespace)[key][1]

        value = compute()
        self.set(namespace, key, value)
        return value

    def stats(self) -> dict[str, Any]:
        """Entry counts and keys per namespace."""
        stats: dict[str, Any] = {
            ns: {"size": len(entries), "keys": list(entries.keys())}
            for ns, entries in self._entries.items()
        }
        stats["ttl"] = self.ttl
        stats["totalEntries"] = sum(len(entries) for entries in self._entries.values())
        return stats

    def clear(self) -> None:
        for entries in self._entries.values():
            entries.clear()
