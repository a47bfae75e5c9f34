"""Client for the OEIS text search endpoint."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import requests

from oeis_lookup.clients.base import BaseApiClient
from oeis_lookup.config import Config, HTTPSettings, OEISSettings
from oeis_lookup.models import SequenceEntry
from oeis_lookup.parsing.record import parse_record

TEXT_FORMAT = "text"


def id_query(identifier: str) -> str:
    """Query selecting a record by A-, M- or N-number."""

    return f"id:{identifier.strip()}"


def sequence_query(values: Iterable[int]) -> str:
    return ",".join(str(value) for value in values)


def search_query(text: str) -> str:
    return text.strip()


class OEISClient(BaseApiClient):
    """HTTP client for ``/search?fmt=text``."""

    def __init__(
        self,
        settings: OEISSettings | None = None,
        http: HTTPSettings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or OEISSettings()
        http = http or HTTPSettings()
        headers = {"User-Agent": http.user_agent, "Accept": "text/plain", **http.headers}
        super().__init__(
            str(self.settings.base_url),
            session=session,
            timeout=http.timeout,
            default_headers=headers,
        )

    @classmethod
    def from_config(cls, config: Config, **kwargs: Any) -> OEISClient:
        return cls(config.oeis, config.http, **kwargs)

    def fetch(self, query: str) -> str:
        """Return the raw response body for ``query``."""

        params = {"n": self.settings.results, "fmt": TEXT_FORMAT, "q": query}
        return self._request_text("GET", self.settings.search_path, params=params)

    def lookup(self, query: str) -> SequenceEntry | None:
        """Fetch and parse the first record matching ``query``."""

        entry = parse_record(self.fetch(query))
        if entry is None:
            self.logger.info("not_found", query=query)
        return entry

    def lookup_by_id(self, identifier: str) -> SequenceEntry | None:
        return self.lookup(id_query(identifier))

    def lookup_by_values(self, values: Iterable[int]) -> SequenceEntry | None:
        return self.lookup(sequence_query(values))

    def search(self, text: str) -> SequenceEntry | None:
        return self.lookup(search_query(text))


__all__ = ["OEISClient", "id_query", "search_query", "sequence_query"]
