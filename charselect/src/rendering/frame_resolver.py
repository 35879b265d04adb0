"""
Frame Resolver - Builds and caches the frame pool of each character class.

Handles:
- Running the ordered resolution strategies against the asset store
- Memoizing pools per class (case-insensitive), empty results included
- Collapsing concurrent async resolutions of the same class into one
- Explicit cache invalidation
"""

import asyncio
import logging
from collections import OrderedDict
from typing import Dict, List, Optional, Sequence, Tuple

from common.src.sprites import AssetPaths, Frame, SheetSlicer
from ..assets.provider import AssetProvider
from ..logging_config import get_logger, log_with_context
from .resolution_strategies import (
    DEFAULT_STRATEGIES,
    ResolveRequest,
    ResolverStrategy,
    Slicer,
)

logger = get_logger("frame_resolver")

FramePool = Tuple[Frame, ...]

EMPTY_POOL: FramePool = ()


def pool_key(class_name: str) -> str:
    """Cache key of a class name."""
    return class_name.strip().lower()


# =============================================================================
# FRAME POOL CACHE
# =============================================================================

class FramePoolCache:
    """
    Per-class frame pools keyed case-insensitively.

    Pools are written once and read many times. With max_entries set, the
    least recently used class is evicted once the bound is exceeded.
    """

    def __init__(self, max_entries: Optional[int] = None):
        self.max_entries = max_entries
        self._pools: "OrderedDict[str, FramePool]" = OrderedDict()

    def get(self, class_name: str) -> Optional[FramePool]:
        key = pool_key(class_name)
        pool = self._pools.get(key)
        if pool is not None:
            self._pools.move_to_end(key)
        return pool

    def put(self, class_name: str, pool: FramePool) -> FramePool:
        key = pool_key(class_name)
        self._pools[key] = pool
        self._pools.move_to_end(key)
        if self.max_entries is not None:
            while len(self._pools) > self.max_entries:
                evicted, _ = self._pools.popitem(last=False)
                logger.debug("Evicted frame pool for %s", evicted)
        return pool

    def invalidate(self, class_name: Optional[str] = None) -> None:
        """Drop one class's pool, or every pool when class_name is None."""
        if class_name is None:
            self._pools.clear()
        else:
            self._pools.pop(pool_key(class_name), None)

    def __contains__(self, class_name: str) -> bool:
        return pool_key(class_name) in self._pools

    def __len__(self) -> int:
        return len(self._pools)


# =============================================================================
# ASSET RESOLVER
# =============================================================================

class AssetResolver:
    """
    Resolves a class name into its frame pool.

    The pool is the result of the first strategy that finds any frames. A
    class for which every strategy comes up empty is cached as an empty pool
    so the broad scans are not repeated on every selection.
    """

    def __init__(
        self,
        provider: AssetProvider,
        paths: Optional[AssetPaths] = None,
        slicer: Optional[Slicer] = None,
        strategies: Sequence[ResolverStrategy] = DEFAULT_STRATEGIES,
        cache: Optional[FramePoolCache] = None,
        query_timeout: Optional[float] = None,
    ):
        self.provider = provider
        self.paths = paths or AssetPaths()
        self.slicer = slicer or SheetSlicer()
        self.strategies: List[ResolverStrategy] = list(strategies)
        self.cache = cache if cache is not None else FramePoolCache()
        self.query_timeout = query_timeout

        # In-flight async resolutions (avoid duplicate scans)
        self._pending: Dict[str, "asyncio.Future[FramePool]"] = {}

    def resolve(self, class_name: str) -> FramePool:
        """
        Get the frame pool of a class, resolving it on first request.

        Args:
            class_name: Class name as shown in the UI (case-insensitive).

        Returns:
            The cached pool; the same tuple object on every call until the
            class is invalidated. Blank class names give an empty pool.
        """
        if not class_name or not class_name.strip():
            return EMPTY_POOL

        cached = self.cache.get(class_name)
        if cached is not None:
            return cached

        return self._store(class_name, self._run_strategies(class_name))

    async def resolve_async(self, class_name: str) -> FramePool:
        """
        Resolve a class off the event loop.

        Concurrent calls for the same class share one scan. When
        query_timeout is set and exceeded, the caller gets an empty pool
        while the scan keeps running; later calls join that scan, and its
        result is cached once it finishes.

        Args:
            class_name: Class name (case-insensitive).

        Returns:
            The class's frame pool.
        """
        if not class_name or not class_name.strip():
            return EMPTY_POOL

        cached = self.cache.get(class_name)
        if cached is not None:
            return cached

        key = pool_key(class_name)
        pending = self._pending.get(key)
        if pending is None:
            pending = asyncio.ensure_future(self._resolve_in_thread(class_name))
            self._pending[key] = pending
            pending.add_done_callback(lambda _done, key=key: self._pending.pop(key, None))

        try:
            return await asyncio.wait_for(asyncio.shield(pending), timeout=self.query_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Resolving frames for %s timed out after %.2fs", class_name, self.query_timeout
            )
            return EMPTY_POOL

    def invalidate(self, class_name: Optional[str] = None) -> None:
        """
        Clear cached pools.

        Args:
            class_name: Class to forget, or None to forget every class.
        """
        self.cache.invalidate(class_name)
        logger.debug("Invalidated frame pool cache for %s", class_name or "all classes")

    def is_cached(self, class_name: str) -> bool:
        return class_name in self.cache

    async def _resolve_in_thread(self, class_name: str) -> FramePool:
        frames = await asyncio.to_thread(self._run_strategies, class_name)

        # A synchronous resolve may have finished first
        cached = self.cache.get(class_name)
        if cached is not None:
            return cached
        return self._store(class_name, frames)

    def _run_strategies(self, class_name: str) -> List[Frame]:
        request = ResolveRequest(
            class_name=class_name.strip(),
            provider=self.provider,
            paths=self.paths,
            slicer=self.slicer,
        )
        for strategy in self.strategies:
            frames = strategy(request)
            if frames:
                log_with_context(
                    logger, logging.INFO, "Resolved frame pool",
                    class_name=class_name,
                    frames=len(frames),
                    strategy=getattr(strategy, "__name__", repr(strategy)),
                )
                return frames

        logger.info("No frames found for %s; caching empty pool", class_name)
        return []

    def _store(self, class_name: str, frames: List[Frame]) -> FramePool:
        return self.cache.put(class_name, tuple(frames))
