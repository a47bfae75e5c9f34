"""Utility helpers for the OEIS lookup client."""

from oeis_lookup.utils.errors import ConfigError, DecodeError, OEISLookupError, TransportError

__all__ = [
    "ConfigError",
    "DecodeError",
    "OEISLookupError",
    "TransportError",
]
