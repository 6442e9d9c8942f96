"""Action status endpoints for a domain, IP or artifact."""

from typing import TYPE_CHECKING

from passivetotal.endpoints.base import Request

if TYPE_CHECKING:
    from passivetotal.client import PassiveTotal


class ActionsRequests:
    """Entry point for /actions endpoints.

    All but ``tags`` take a domain or IPv4 query, validated at send time.
    Tags can be looked up for any artifact string.
    """

    def __init__(self, client: "PassiveTotal") -> None:
        self.client = client

    def _request(self, operation: str, query: str) -> Request:
        return Request(self.client, operation, {"query": query})

    def classification(self, query: str) -> Request:
        """Classification status (malicious, suspicious, ...) of a domain."""
        return self._request("actions.classification", query)

    def compromised(self, query: str) -> Request:
        """Whether a domain has ever been compromised."""
        return self._request("actions.compromised", query)

    def dynamic_dns(self, query: str) -> Request:
        """Whether a domain's records are updated through dynamic DNS."""
        return self._request("actions.dynamic_dns", query)

    def monitor(self, query: str) -> Request:
        """Whether a domain is monitored."""
        return self._request("actions.monitor", query)

    def sinkhole(self, query: str) -> Request:
        """Whether an IP address is a sinkhole."""
        return self._request("actions.sinkhole", query)

    def tags(self, query: str) -> Request:
        """Tags attached to an artifact."""
        return self._request("actions.tags", query)
