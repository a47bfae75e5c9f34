"""Custom exception hierarchy for the OEIS lookup client."""

from __future__ import annotations


class OEISLookupError(RuntimeError):
    """Base class for every error raised by :mod:`oeis_lookup`."""


class ConfigError(OEISLookupError):
    """Raised when configuration files are missing or invalid."""


class DecodeError(OEISLookupError, ValueError):
    """Raised when a logical line does not follow the tagged-line grammar."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class TransportError(OEISLookupError):
    """Raised when the response text could not be obtained."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = ["ConfigError", "DecodeError", "OEISLookupError", "TransportError"]
