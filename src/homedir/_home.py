from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Mapping, Optional

from .exceptions import NotFoundError

logger = logging.getLogger(__name__)


class PlatformFamily(Enum):
    """Operating system groups sharing home directory conventions."""

    UNIX = "unix"
    PLAN9 = "plan9"
    WINDOWS = "windows"


def platform_family(os_name: Optional[str] = None) -> PlatformFamily:
    """
    Map an OS identifier to its platform family.

    Accepts ``sys.platform`` values (``win32``, ``linux``, ``darwin``, ...) as
    well as Go-style names (``windows``, ``plan9``). Anything that is neither
    Windows nor Plan 9 is treated as Unix-like.
    """
    name = (os_name if os_name is not None else sys.platform).lower()
    if name.startswith("win"):
        return PlatformFamily.WINDOWS
    if name.startswith("plan9"):
        return PlatformFamily.PLAN9
    return PlatformFamily.UNIX


def _getenv(env: Optional[Mapping[str, str]], key: str) -> str:
    # an unset variable reads the same as an empty one
    source = os.environ if env is None else env
    return source.get(key) or ""


def dir_unix(os_name: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> str:
    """
    Determine the home directory on Unix-like systems and Plan 9.

    Plan 9 keeps it in the lowercase ``home`` variable; everything else uses
    ``HOME``. There is no user-database fallback: an empty variable is an error.

    Raises:
        NotFoundError: If the variable is unset or empty
    """
    key = "home" if platform_family(os_name) is PlatformFamily.PLAN9 else "HOME"
    value = _getenv(env, key)
    if not value:
        raise NotFoundError(f"{key} environment variable is empty")
    logger.debug(f"Home directory from {key}: {value}")
    return value


def dir_windows(env: Optional[Mapping[str, str]] = None) -> str:
    """
    Determine the home directory on Windows.

    Order of attempts:
    1. ``HOME``
    2. ``USERPROFILE``
    3. ``HOMEDRIVE`` + ``HOMEPATH`` (plain concatenation, both must be set)

    Raises:
        NotFoundError: If none of the sources is populated
    """
    for key in ("HOME", "USERPROFILE"):
        value = _getenv(env, key)
        if value:
            logger.debug(f"Home directory from {key}: {value}")
            return value

    drive = _getenv(env, "HOMEDRIVE")
    path = _getenv(env, "HOMEPATH")
    if drive and path:
        logger.debug(f"Home directory from HOMEDRIVE+HOMEPATH: {drive + path}")
        return drive + path

    raise NotFoundError("HOME, USERPROFILE, HOMEDRIVE and HOMEPATH are all blank")


def detect_home_dir(os_name: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> str:
    """
    Resolve the invoking user's home directory, bypassing any cache.

    Args:
        os_name: OS identifier to dispatch on (defaults to ``sys.platform``)
        env: Environment mapping to read (defaults to ``os.environ``)

    Returns:
        The home directory as reported by the environment, unvalidated

    Raises:
        NotFoundError: If no platform-appropriate source is populated
    """
    if platform_family(os_name) is PlatformFamily.WINDOWS:
        return dir_windows(env)
    return dir_unix(os_name, env)
