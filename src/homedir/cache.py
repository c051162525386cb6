"""
Process-wide caching for home directory lookups.

Home directory resolution is a pure environment read, so the result can be
memoized for the lifetime of the process. The cache is an explicit service
object rather than loose module globals so tests can build their own.

Architecture:
- CacheConfig: initial cache behavior
- HomeDirCache: lock-guarded memoization around a resolver callable
- get_default_cache(): the shared instance used by the module-level API

Invalidation is lazy: disabling the cache does not drop the stored value, it
only stops reads and writes. Pair a toggle with reset() when freshness
matters.

Usage:
    cache = HomeDirCache(config=CacheConfig(enabled=False))
    home = cache.dir()
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from ._home import detect_home_dir

logger = logging.getLogger(__name__)


@dataclass
class CacheConfig:
    """Configuration for home directory caching behavior."""
    enabled: bool = True  # Memoize the first successful lookup


class HomeDirCache:
    """
    Memoizes the home directory returned by a resolver.

    Failed lookups are never stored; the next call resolves again.
    """

    def __init__(
        self,
        config: Optional[CacheConfig] = None,
        resolver: Callable[[], str] = detect_home_dir,
    ):
        """
        Initialize the cache.

        Args:
            config: Optional cache configuration
            resolver: Callable returning the home directory or raising
                      NotFoundError (defaults to detect_home_dir)
        """
        self.config = config or CacheConfig()
        self.resolver = resolver
        self._lock = threading.Lock()
        self._enabled = self.config.enabled
        self._value: Optional[str] = None

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    @property
    def cached_value(self) -> Optional[str]:
        with self._lock:
            return self._value

    def set_enabled(self, enabled: bool) -> None:
        """Turn caching on or off. The stored value is kept either way."""
        with self._lock:
            self._enabled = bool(enabled)
        logger.debug(f"Home directory cache {'enabled' if enabled else 'disabled'}")

    def reset(self) -> None:
        """Drop the stored value so the next dir() call resolves again."""
        with self._lock:
            self._value = None
        logger.debug("Cleared home directory cache")

    def dir(self) -> str:
        """
        Return the home directory, resolving it on a cache miss.

        Returns:
            The cached value when caching is enabled and populated, otherwise
            a fresh resolver result

        Raises:
            NotFoundError: Propagated unchanged from the resolver
        """
        with self._lock:
            if self._enabled and self._value is not None:
                logger.debug(f"Home directory cache hit: {self._value}")
                return self._value

            try:
                value = self.resolver()
            except Exception as e:
                logger.debug(f"Home directory lookup failed: {e}")
                raise

            if self._enabled:
                self._value = value
                logger.debug(f"Cached home directory: {value}")
            return value


_default_cache = HomeDirCache()


def get_default_cache() -> HomeDirCache:
    """Return the process-wide cache used by the module-level API."""
    return _default_cache
