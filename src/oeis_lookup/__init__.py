"""Public interface for the OEIS lookup client."""
from __future__ import annotations

__version__ = "0.1.0"

from oeis_lookup.clients import OEISClient, TransportError
from oeis_lookup.config import Config, HTTPSettings, LoggingSettings, OEISSettings
from oeis_lookup.extend import extend
from oeis_lookup.lookup import (
    extend_sequence,
    get_sequence_by_id,
    lookup_oeis,
    lookup_sequence,
    lookup_sequence_by_id,
    search_sequence,
)
from oeis_lookup.models import Keyword, Language, Program, SequenceEntry
from oeis_lookup.parsing import parse_record, render_record
from oeis_lookup.utils import ConfigError, DecodeError, OEISLookupError

__all__ = [
    "Config",
    "ConfigError",
    "DecodeError",
    "HTTPSettings",
    "Keyword",
    "Language",
    "LoggingSettings",
    "OEISClient",
    "OEISLookupError",
    "OEISSettings",
    "Program",
    "SequenceEntry",
    "TransportError",
    "__version__",
    "extend",
    "extend_sequence",
    "get_sequence_by_id",
    "lookup_oeis",
    "lookup_sequence",
    "lookup_sequence_by_id",
    "parse_record",
    "render_record",
    "search_sequence",
]
