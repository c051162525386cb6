"""
Module-level home directory API.

Thin functions bound to the process-wide HomeDirCache, plus tilde expansion.
Only the invoking user's home directory is supported: ``~`` and ``~/path``
expand, ``~user/path`` raises UnsupportedError.
"""

import logging
import os
from typing import Optional

from .cache import HomeDirCache, get_default_cache
from .exceptions import UnsupportedError

logger = logging.getLogger(__name__)

# Characters accepted right after the tilde on every platform
_TILDE_SEPARATORS = ("/", "\\")


def get_home_dir() -> str:
    """
    Return the invoking user's home directory.

    Served from the process-wide cache when it is enabled and populated.

    Raises:
        NotFoundError: If the environment holds no home directory
    """
    return get_default_cache().dir()


def set_cache_enable(enabled: bool) -> None:
    """Enable or disable the process-wide cache without clearing it."""
    get_default_cache().set_enabled(enabled)


def cache_enabled() -> bool:
    return get_default_cache().enabled


def reset() -> None:
    """Clear the process-wide cache."""
    get_default_cache().reset()


def expand(path: str, cache: Optional[HomeDirCache] = None) -> str:
    """
    Expand a leading ``~`` in *path* to the home directory.

    Args:
        path: Path that may start with ``~`` or ``~/``
        cache: Cache to resolve through (defaults to the process-wide one)

    Returns:
        The expanded path; paths without a leading tilde come back unchanged

    Raises:
        UnsupportedError: For ``~user`` style paths
        NotFoundError: If the home directory cannot be resolved

    Example:
        >>> expand("~/projects")
        '/home/alice/projects'
    """
    if not path or path[0] != "~":
        return path

    if len(path) > 1 and path[1] not in _TILDE_SEPARATORS:
        raise UnsupportedError(f"cannot expand user-specific home dir: {path!r}")

    home = (cache or get_default_cache()).dir()
    if len(path) == 1:
        return home

    rest = path[1:].lstrip(os.sep + (os.altsep or ""))
    expanded = os.path.normpath(os.path.join(home, rest))
    logger.debug(f"Expanded {path!r} to {expanded!r}")
    return expanded
