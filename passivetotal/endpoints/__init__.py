"""Request builders for each PassiveTotal endpoint category."""

from passivetotal.endpoints.account import (
    AccountRequests,
    OrganizationRequest,
    SourcesRequest,
    TeamstreamRequest,
)
from passivetotal.endpoints.actions import ActionsRequests
from passivetotal.endpoints.base import FieldSearchRequest, Request
from passivetotal.endpoints.enrichment import EnrichmentRequests
from passivetotal.endpoints.passive import PassiveDnsRequest
from passivetotal.endpoints.paths import ENDPOINTS, Endpoint
from passivetotal.endpoints.ssl import SslRequests, SslSearchRequest
from passivetotal.endpoints.whois import WhoisRequests, WhoisSearchRequest

__all__ = [
    "ENDPOINTS",
    "AccountRequests",
    "ActionsRequests",
    "Endpoint",
    "EnrichmentRequests",
    "FieldSearchRequest",
    "OrganizationRequest",
    "PassiveDnsRequest",
    "Request",
    "SourcesRequest",
    "SslRequests",
    "SslSearchRequest",
    "TeamstreamRequest",
    "WhoisRequests",
    "WhoisSearchRequest",
]
