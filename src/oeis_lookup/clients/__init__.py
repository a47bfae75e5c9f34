"""HTTP clients for the sequence database."""

from oeis_lookup.clients.base import BaseApiClient, TransportError
from oeis_lookup.clients.oeis import OEISClient, id_query, search_query, sequence_query
from oeis_lookup.clients.session import get_shared_session, reset_shared_session

__all__ = [
    "BaseApiClient",
    "OEISClient",
    "TransportError",
    "get_shared_session",
    "id_query",
    "reset_shared_session",
    "search_query",
    "sequence_query",
]
