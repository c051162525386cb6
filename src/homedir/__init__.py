"""
homedir: Cross-platform home directory detection with a process-wide cache.

This package resolves the invoking user's home directory from the environment
using per-platform fallbacks (Unix-like, Plan 9, Windows), memoizes it, and
expands leading ``~`` segments in paths.
"""

__version__ = "0.1.0"

from ._home import PlatformFamily, detect_home_dir, platform_family
from .cache import CacheConfig, HomeDirCache, get_default_cache
from .core import cache_enabled, expand, get_home_dir, reset, set_cache_enable
from .exceptions import HomeDirError, NotFoundError, UnsupportedError

__all__ = [
    # Core
    "get_home_dir",
    "expand",
    "set_cache_enable",
    "cache_enabled",
    "reset",
    # Cache
    "CacheConfig",
    "HomeDirCache",
    "get_default_cache",
    # Platform resolution
    "PlatformFamily",
    "detect_home_dir",
    "platform_family",
    # Exceptions
    "HomeDirError",
    "NotFoundError",
    "UnsupportedError",
]
