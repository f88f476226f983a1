"""In-memory diff cache with single-flight computation and LRU eviction."""

import threading
import time
from collections import OrderedDict
from collections.abc import Callable, Iterable
from concurrent.futures import Future
from dataclasses import replace

from ...utils.get_logger import get_logger
from ..config.CacheConfig import CacheConfig
from ..diff.DiffLine import DiffLine
from ..errors.CacheComputationFailed import CacheComputationFailed
from ..repo.RepoPath import RepoPath
from .CacheEntry import CacheEntry
from .CacheKey import CacheKey
from .CacheStats import CacheStats
from .estimate_size import estimate_size

logger = get_logger("cache")


class DiffCache:
    """Memoizes diff output by CacheKey.

    Concurrent requests for one key share a single computation; a failure
    reaches every caller and leaves nothing cached. Entries are charged by
    estimated byte size, evicted least-recently-used first once the budget is
    exceeded, and expire ``ttl_seconds`` after creation.

    Two locks are used: one for the in-flight table and one for the entry
    table and its LRU order. The in-flight lock may be held while taking the
    entry lock, never the reverse. Computations run with no lock held, so
    distinct keys never wait on each other.
    """

    def __init__(self, max_size_bytes: int, ttl_seconds: float, clock: Callable[[], float] = time.monotonic):
        """Initialize cache.

        Args:
            max_size_bytes: Total byte budget for cached output
            ttl_seconds: Lifetime of an entry, measured from creation
            clock: Monotonic time source (seconds)
        """
        if max_size_bytes <= 0:
            raise ValueError(f"max_size_bytes must be positive (found: {max_size_bytes})")
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive (found: {ttl_seconds})")

        self.max_size_bytes = max_size_bytes
        self.ttl_seconds = ttl_seconds
        self._clock = clock

        self._entries: OrderedDict[CacheKey, CacheEntry] = OrderedDict()
        self._size_bytes = 0
        self._generation = 0
        self._path_generations: dict[str, int] = {}
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0
        self._entries_lock = threading.Lock()

        self._inflight: dict[CacheKey, Future] = {}
        self._inflight_lock = threading.Lock()

    @classmethod
    def from_config(cls, config: CacheConfig) -> "DiffCache":
        return cls(max_size_bytes=config.max_size_bytes, ttl_seconds=config.ttl_seconds)

    def __len__(self) -> int:
        with self._entries_lock:
            return len(self._entries)

    def __contains__(self, key: CacheKey) -> bool:
        with self._entries_lock:
            entry = self._entries.get(key)
            return entry is not None and not self._expired(entry, self._clock())

    def get(self, key: CacheKey) -> list[DiffLine] | None:
        """Return cached output for ``key`` without computing."""
        lines = self._lookup(key)
        return None if lines is None else list(lines)

    def get_or_compute(self, key: CacheKey, compute_fn: Callable[[], Iterable[DiffLine]]) -> list[DiffLine]:
        """Return cached output for ``key``, computing it at most once concurrently.

        Args:
            key: Resolved cache key
            compute_fn: Produces the output on a miss

        Returns:
            The DiffLine sequence for ``key``

        Raises:
            CacheComputationFailed: If the shared computation raised; ``cause``
                holds the original error
        """
        lines = self._lookup(key)
        if lines is not None:
            return list(lines)

        with self._inflight_lock:
            future = self._inflight.get(key)
            leader = future is None
            if leader:
                # A leader may have finished between the lookup and taking the lock.
                lines = self._lookup(key, count=False)
                if lines is not None:
                    return list(lines)
                future = Future()
                self._inflight[key] = future
                generation = self._generation_of(key)

        if not leader:
            logger.debug("Joining in-flight computation for %s", key)
            return list(future.result())

        logger.debug("Computing %s", key)
        try:
            lines = tuple(compute_fn())
        except BaseException as exc:
            failure = CacheComputationFailed(key, exc)
            failure.__cause__ = exc
            with self._inflight_lock:
                self._inflight.pop(key, None)
            future.set_exception(failure)
            logger.warning("Computation failed for %s: %s", key, exc)
            if not isinstance(exc, Exception):
                raise
            raise failure from exc

        self._store(key, lines, generation)
        with self._inflight_lock:
            self._inflight.pop(key, None)
        future.set_result(lines)
        return list(lines)

    def invalidate(self, path: RepoPath | str) -> int:
        """Drop every entry for ``path``; returns the number removed."""
        target = str(path)
        with self._entries_lock:
            keys = [key for key in self._entries if str(key.path) == target]
            for key in keys:
                self._remove_locked(key)
            self._path_generations[target] = self._path_generations.get(target, 0) + 1
        logger.info("Invalidated %d cached diffs for %s", len(keys), target)
        return len(keys)

    def invalidate_all(self) -> int:
        """Drop every entry; returns the number removed."""
        with self._entries_lock:
            count = len(self._entries)
            self._entries.clear()
            self._size_bytes = 0
            self._path_generations.clear()
            self._generation += 1
        logger.info("Invalidated all cached diffs (%d entries)", count)
        return count

    def stats(self) -> CacheStats:
        with self._entries_lock:
            return CacheStats(
                entries=len(self._entries),
                size_bytes=self._size_bytes,
                max_size_bytes=self.max_size_bytes,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                expirations=self._expirations,
            )

    def _generation_of(self, key: CacheKey) -> tuple[int, int]:
        with self._entries_lock:
            return self._generation_of_locked(key)

    def _generation_of_locked(self, key: CacheKey) -> tuple[int, int]:
        # Invalidating one path only blocks in-flight results for that path.
        return self._generation, self._path_generations.get(str(key.path), 0)

    def _expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at >= self.ttl_seconds

    def _lookup(self, key: CacheKey, count: bool = True) -> tuple[DiffLine, ...] | None:
        now = self._clock()
        with self._entries_lock:
            entry = self._entries.get(key)
            if entry is not None and self._expired(entry, now):
                self._remove_locked(key)
                self._expirations += 1
                entry = None
            if entry is None:
                if count:
                    self._misses += 1
                return None
            self._entries[key] = replace(entry, last_access=now)
            self._entries.move_to_end(key)
            if count:
                self._hits += 1
            return entry.lines

    def _store(self, key: CacheKey, lines: tuple[DiffLine, ...], generation: tuple[int, int]) -> None:
        size = estimate_size(lines)
        now = self._clock()
        with self._entries_lock:
            if generation != self._generation_of_locked(key):
                logger.debug("Not caching %s: invalidated while computing", key)
                return
            if size > self.max_size_bytes:
                logger.debug("Not caching %s: %d bytes exceeds budget of %d", key, size, self.max_size_bytes)
                return
            if key in self._entries:
                self._remove_locked(key)
            self._entries[key] = CacheEntry(key=key, lines=lines, size_bytes=size, created_at=now, last_access=now)
            self._size_bytes += size
            self._evict_locked(now)

    def _evict_locked(self, now: float) -> None:
        for key in [key for key, entry in self._entries.items() if self._expired(entry, now)]:
            self._remove_locked(key)
            self._expirations += 1
        while self._size_bytes > self.max_size_bytes and self._entries:
            key, entry = self._entries.popitem(last=False)
            self._size_bytes -= entry.size_bytes
            self._evictions += 1
            logger.debug("Evicted %s (%d bytes)", key, entry.size_bytes)

    def _remove_locked(self, key: CacheKey) -> None:
        entry = self._entries.pop(key)
        self._size_bytes -= entry.size_bytes
