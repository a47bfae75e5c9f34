"""Base utilities shared by the HTTP clients."""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any
from urllib.parse import urljoin

import requests
from requests import Response

from oeis_lookup.clients.session import get_shared_session
from oeis_lookup.logging_setup import get_logger
from oeis_lookup.utils.errors import TransportError


class BaseApiClient:
    """Single-shot text requests against one base URL.

    Every call issues exactly one request with a bounded timeout. Transport
    failures and unexpected status codes raise :class:`TransportError`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        session: requests.Session | None = None,
        timeout: float = 30.0,
        default_headers: MutableMapping[str, str] | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or get_shared_session()
        self.timeout = timeout
        self.default_headers = {**(default_headers or {})}
        self.logger = get_logger(self.__class__.__name__, base_url=self.base_url)

    def _make_url(self, path: str) -> str:
        if not path:
            return self.base_url
        if path.startswith(("http://", "https://")):
            return path
        normalized = path.lstrip("/")
        return urljoin(self.base_url + "/", f"./{normalized}")

    def _send(self, method: str, url: str, **kwargs: Any) -> Response:
        return self.session.request(method, url, timeout=self.timeout, **kwargs)

    def _request_text(
        self,
        method: str,
        path: str = "",
        *,
        expected_status: int = 200,
        headers: MutableMapping[str, str] | None = None,
        **kwargs: Any,
    ) -> str:
        url = self._make_url(path)
        request_headers = dict(self.default_headers)
        if headers:
            request_headers.update(headers)

        self.logger.info(
            "request",
            method=method,
            url=url,
            params=kwargs.get("params"),
            headers=request_headers or None,
        )

        try:
            response = self._send(method, url, headers=request_headers, **kwargs)
        except requests.exceptions.RequestException as exc:
            self.logger.error("transport_error", error=str(exc))
            raise TransportError(str(exc)) from exc

        if response.status_code != expected_status:
            self.logger.warning(
                "unexpected_status",
                status_code=response.status_code,
                expected_status=expected_status,
            )
            raise TransportError(
                f"unexpected status code {response.status_code}",
                status_code=response.status_code,
            )

        self.logger.info("response", status_code=response.status_code, length=len(response.content))
        # The database serves UTF-8 but does not always declare a charset.
        return response.content.decode("utf-8", errors="replace")


__all__ = ["BaseApiClient", "TransportError"]
