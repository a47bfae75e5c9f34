"""High level lookup helpers built on :class:`OEISClient`.

Every helper returns ``None`` (or the unchanged input for
:func:`extend_sequence`) when the database has no matching record, and lets
:class:`~oeis_lookup.utils.errors.TransportError` propagate when the database
could not be reached.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from oeis_lookup.clients.oeis import OEISClient
from oeis_lookup.extend import extend
from oeis_lookup.models import SequenceEntry

NOT_FOUND_MESSAGE = "Sequence not found."

_DIGIT_SPACE = re.compile(r"([0-9]) ")


def _client(client: OEISClient | None) -> OEISClient:
    return client if client is not None else OEISClient()


def lookup_sequence_by_id(identifier: str, *, client: OEISClient | None = None) -> SequenceEntry | None:
    """Look up a record by catalog number (A-number, M-number or N-number)."""

    return _client(client).lookup_by_id(identifier)


def get_sequence_by_id(identifier: str, *, client: OEISClient | None = None) -> list[int] | None:
    """Return only the terms of the record with catalog number ``identifier``."""

    entry = lookup_sequence_by_id(identifier, client=client)
    return None if entry is None else list(entry.values)


def lookup_sequence(values: Sequence[int], *, client: OEISClient | None = None) -> SequenceEntry | None:
    """Return the first record containing ``values`` as consecutive terms."""

    return _client(client).lookup_by_values(values)


def search_sequence(text: str, *, client: OEISClient | None = None) -> SequenceEntry | None:
    return _client(client).search(text)


def extend_sequence(values: Sequence[int], *, client: OEISClient | None = None) -> list[int]:
    """Extend ``values`` with the terms of the first matching record.

    ``values`` is always a prefix of the result. Terms of the record that come
    before the match are dropped, and ``values`` is returned unchanged when no
    record matches.
    """

    prefix = list(values)
    if not prefix:
        return []
    entry = lookup_sequence(prefix, client=client)
    if entry is None:
        return prefix
    return extend(prefix, entry.values)


def normalise_query(text: str) -> str:
    """Trim ``text`` and turn space separated numbers into a comma list."""

    return _DIGIT_SPACE.sub(r"\1,", text.strip())


def format_values(values: Sequence[int]) -> str:
    return "[" + ",".join(str(value) for value in values) + "]"


def lookup_oeis(text: str, *, client: OEISClient | None = None) -> list[str]:
    """Answer a free-form request with printable lines.

    Returns ``["Sequence not found."]`` or the description followed by the
    terms of the first match.
    """

    entry = search_sequence(normalise_query(text), client=client)
    if entry is None:
        return [NOT_FOUND_MESSAGE]
    return [entry.description, format_values(entry.values)]


__all__ = [
    "NOT_FOUND_MESSAGE",
    "extend_sequence",
    "format_values",
    "get_sequence_by_id",
    "lookup_oeis",
    "lookup_sequence",
    "lookup_sequence_by_id",
    "normalise_query",
    "search_sequence",
]
