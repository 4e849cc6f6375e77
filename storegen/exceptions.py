"""
Error types raised by the command dispatcher and backend loader.
"""

from typing import Optional


class StoregenError(Exception):
    """Base class for errors that abort a generation command."""


class InvalidOptionError(StoregenError):
    """An option value was rejected before any generation took place."""


class BackendLoadError(StoregenError):
    """The configured generator backend could not be resolved."""


class GeneratorError(StoregenError):
    """
    Structured error reported by a generator backend.

    Args:
        message: Human-readable description, surfaced to the user verbatim.
        code: Optional machine-readable error code supplied by the backend.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code

