"""Exceptions raised by purehash."""

from typing import Optional


class HashError(Exception):
    """Base class for every error raised by the library."""


class InvalidParameterError(HashError, ValueError):
    """A parameter was rejected before any computation started."""


class EngineStateError(HashError, RuntimeError):
    """An engine was used out of its init -> update -> finalize order."""


class HashFileError(HashError, OSError):
    """A file could not be opened or read for hashing."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"cannot hash file {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
