"""Exceptions for homedir."""


class HomeDirError(Exception):
    """Base exception for home directory errors."""
    pass


class NotFoundError(HomeDirError):
    """Exception raised when no environment source yields a home directory."""
    pass


class UnsupportedError(HomeDirError):
    """Exception raised when expanding another user's home directory (``~user``)."""
    pass
