"""HTTP transport for the PassiveTotal API, built on httpx.

The API takes GET requests whose parameters travel as a JSON body rather
than a query string, so requests are built with ``client.request("GET", ...)``.
"""

from typing import Any, Protocol

import httpx
from loguru import logger

from passivetotal.errors import TransportError


class Transport(Protocol):
    """Anything that can perform one authenticated GET and return the raw reply."""

    def get(
        self,
        url: str,
        auth: tuple[str, str],
        timeout: float,
        params: dict[str, Any],
    ) -> tuple[int, bytes]:
        ...


class HttpxTransport:
    """Transport that opens a short-lived httpx.Client per request.

    Args:
        transport: Optional httpx transport to mount (e.g. httpx.MockTransport
            in tests). Defaults to httpx's standard network transport.
    """

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self._transport = transport

    def get(
        self,
        url: str,
        auth: tuple[str, str],
        timeout: float,
        params: dict[str, Any],
    ) -> tuple[int, bytes]:
        """Send a GET with basic auth and a JSON body.

        Args:
            url: Full endpoint URL.
            auth: (username, apikey) pair for HTTP Basic authentication.
            timeout: Request timeout in seconds.
            params: Parameters serialized as the JSON request body.

        Returns:
            Tuple of (status code, raw response body).

        Raises:
            TransportError: On connection, timeout, TLS or protocol failures.
        """
        try:
            with httpx.Client(
                timeout=timeout, transport=self._transport, follow_redirects=True
            ) as client:
                resp = client.request(
                    "GET",
                    url,
                    json=params,
                    auth=httpx.BasicAuth(*auth),
                    headers={"Accept": "application/json"},
                )
                return resp.status_code, resp.content
        except httpx.HTTPError as e:
            logger.warning("Request to {} failed: {}", url, e)
            raise TransportError(e) from e
