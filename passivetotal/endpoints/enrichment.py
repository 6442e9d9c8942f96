"""Enrichment endpoints: metadata, OSINT, malware and subdomains for a host."""

from typing import TYPE_CHECKING

from passivetotal.endpoints.base import Request

if TYPE_CHECKING:
    from passivetotal.client import PassiveTotal


class EnrichmentRequests:
    """Entry point for /enrichment endpoints. Queries must be a domain or IPv4."""

    def __init__(self, client: "PassiveTotal") -> None:
        self.client = client

    def data(self, query: str) -> Request:
        return Request(self.client, "enrichment.data", {"query": query})

    def osint(self, query: str) -> Request:
        return Request(self.client, "enrichment.osint", {"query": query})

    def malware(self, query: str) -> Request:
        return Request(self.client, "enrichment.malware", {"query": query})

    def subdomains(self, query: str) -> Request:
        return Request(self.client, "enrichment.subdomains", {"query": query})
