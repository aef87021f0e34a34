"""Per-export-map cache of compiled path patterns."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from typing import Any, Mapping

from pkgexports.types import CacheStats, CompiledPattern
from pkgexports.utils.pattern import compile_patterns

logger = logging.getLogger(__name__)

__all__ = ["PatternCache", "DEFAULT_MAX_ENTRIES"]

DEFAULT_MAX_ENTRIES = 1024


class PatternCache:
    """Side-table mapping export map identity to its compiled patterns.

    Entries are keyed by ``id()`` of the export map and hold a strong
    reference to it, so a key cannot be reused by another object while its
    entry lives. The least recently used entry is evicted once
    ``max_entries`` is exceeded. Mutating a cached export map is not
    detected; call ``invalidate`` after doing so.

    Thread safety:
        Compilation runs outside the lock. Two threads missing on the same
        map may both compile it; the first to publish wins and both get
        equivalent patterns.
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries <= 0:
            raise ValueError(f"max_entries must be positive: {max_entries}")
        self._max_entries = max_entries
        self._entries: OrderedDict[int, tuple[Mapping[str, Any], tuple[CompiledPattern, ...]]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get_or_compile(
        self, exports: Mapping[str, Any], package_name: str | None = None
    ) -> tuple[CompiledPattern, ...]:
        """Return the compiled patterns of ``exports``, compiling on first use.

        Raises:
            InvalidPathPatternError: If a key of ``exports`` is not a path pattern.
        """
        key = id(exports)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry[0] is exports:
                self._entries.move_to_end(key)
                self._hits += 1
                return entry[1]
            self._misses += 1

        logger.debug("Compiling %d export patterns for '%s' package", len(exports), package_name)
        patterns = compile_patterns(exports, package_name)

        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry[0] is exports:
                return entry[1]
            self._entries[key] = (exports, patterns)
            while len(self._entries) > self._max_entries:
                self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug("Evicted least recently used export map from pattern cache")
        return patterns

    def invalidate(self, exports: Any) -> bool:
        """Drop the entry for ``exports``. Returns whether one was present."""
        with self._lock:
            entry = self._entries.get(id(exports))
            if entry is None or entry[0] is not exports:
                return False
            del self._entries[id(exports)]
            return True

    def clear(self) -> None:
        """Drop all entries and reset counters."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def __contains__(self, exports: object) -> bool:
        with self._lock:
            entry = self._entries.get(id(exports))
            return entry is not None and entry[0] is exports

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> CacheStats:
        """Snapshot of the cache counters."""
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
                max_entries=self._max_entries,
            )
