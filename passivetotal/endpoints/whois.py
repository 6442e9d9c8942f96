"""WHOIS record lookups and searches."""

from typing import TYPE_CHECKING

from passivetotal.endpoints.base import FieldSearchRequest, Request
from passivetotal.fields import WhoisField

if TYPE_CHECKING:
    from passivetotal.client import PassiveTotal


class WhoisSearchRequest(FieldSearchRequest):
    """WHOIS search: keyword search, or a field search once a field is set."""

    field_type = WhoisField
    keyword_operation = "whois.search.keyword"
    field_operation = "whois.search.field"


class WhoisRequests:
    """Entry point for /whois endpoints."""

    def __init__(self, client: "PassiveTotal") -> None:
        self.client = client

    def info(self, query: str) -> Request:
        """WHOIS record for a domain or IPv4 address."""
        return Request(self.client, "whois.info", {"query": query})

    def search(self, query: str, field: WhoisField | str | None = None) -> WhoisSearchRequest:
        """Search WHOIS records by keyword, or by one field if given."""
        request = WhoisSearchRequest(self.client, WhoisSearchRequest.keyword_operation, {"query": query})
        return request.field(field) if field is not None else request
