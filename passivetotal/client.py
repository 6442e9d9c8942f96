"""PassiveTotal v2 API client and request dispatcher.

Usage:

    pt = PassiveTotal.with_auth("username", "apikey")
    result = pt.passive_dns("www.passivetotal.org").send()
    if result.ok:
        print(result.value)

Every request builder is sent through :meth:`PassiveTotal.dispatch`, which
performs exactly one HTTP call and classifies the outcome into an ApiResult.
"""

import json
from typing import Any

from loguru import logger

from passivetotal.config import BASE_URL, DEFAULT_TIMEOUT_SECONDS, Settings
from passivetotal.endpoints import (
    AccountRequests,
    ActionsRequests,
    EnrichmentRequests,
    PassiveDnsRequest,
    SslRequests,
    WhoisRequests,
)
from passivetotal.errors import ClientError, ServerError, TransportError
from passivetotal.result import ApiResult
from passivetotal.transport import HttpxTransport, Transport


class PassiveTotal:
    """Authenticated access to the PassiveTotal v2 API.

    The client only holds credentials, a timeout and a transport; it is not
    modified after construction and can be shared between threads.

    Args:
        username: PassiveTotal account username.
        apikey: PassiveTotal API key.
        timeout: Request timeout in seconds.
        base_url: API root, without trailing slash.
        transport: Transport used to send requests. Defaults to HttpxTransport.
    """

    def __init__(
        self,
        username: str,
        apikey: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        base_url: str = BASE_URL,
        transport: Transport | None = None,
    ) -> None:
        self._username = username
        self._apikey = apikey
        self._timeout = float(timeout)
        self._base_url = base_url.rstrip("/")
        self._transport = transport or HttpxTransport()

    @classmethod
    def with_auth(cls, username: str, apikey: str) -> "PassiveTotal":
        """Create a client with the default 60 second timeout."""
        return cls(username, apikey)

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Transport | None = None
    ) -> "PassiveTotal":
        """Create a client from loaded Settings.

        Raises:
            ConfigError: If the settings have no username or apikey.
        """
        settings.require_credentials()
        return cls(
            settings.username,
            settings.apikey,
            timeout=settings.timeout,
            base_url=settings.base_url,
            transport=transport,
        )

    @property
    def username(self) -> str:
        return self._username

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return (
            f"PassiveTotal(username={self._username!r}, "
            f"timeout={self._timeout}, base_url={self._base_url!r})"
        )

    # --- Endpoint categories ---

    def account(self) -> AccountRequests:
        return AccountRequests(self)

    def actions(self) -> ActionsRequests:
        return ActionsRequests(self)

    def enrichment(self) -> EnrichmentRequests:
        return EnrichmentRequests(self)

    def passive_dns(self, query: str) -> PassiveDnsRequest:
        return PassiveDnsRequest(self, "dns.passive", {"query": query})

    def ssl(self) -> SslRequests:
        return SslRequests(self)

    def whois(self) -> WhoisRequests:
        return WhoisRequests(self)

    # --- Dispatch ---

    def dispatch(self, path: str, payload: dict[str, Any]) -> ApiResult:
        """Send one GET request and classify the response.

        Args:
            path: Endpoint path (e.g. "/whois/search").
            payload: Serialized parameters, sent as the JSON body.

        Returns:
            ApiResult with the decoded JSON body, or one of ClientError (4xx),
            ServerError (5xx) or TransportError (connection failure or an
            undecodable body).
        """
        url = f"{self._base_url}{path}"
        logger.debug("GET {} params={}", url, payload)

        try:
            status, body = self._transport.get(
                url,
                auth=(self._username, self._apikey),
                timeout=self._timeout,
                params=payload,
            )
        except TransportError as e:
            return ApiResult.failure(path, e)

        if 400 <= status < 500:
            logger.warning("PassiveTotal rejected {}: status {}", path, status)
            return ApiResult.failure(path, ClientError(status))
        if 500 <= status < 600:
            logger.warning("PassiveTotal server error on {}: status {}", path, status)
            return ApiResult.failure(path, ServerError(status))

        try:
            value = json.loads(body)
        except ValueError as e:
            logger.warning("Undecodable response body from {}: {}", path, e)
            return ApiResult.failure(path, TransportError(e))

        logger.debug("GET {} -> {}", url, status)
        return ApiResult.success(path, value)
