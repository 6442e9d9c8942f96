"""SSL certificate lookups and searches."""

from typing import TYPE_CHECKING

from passivetotal.endpoints.base import FieldSearchRequest, Request
from passivetotal.fields import SslField

if TYPE_CHECKING:
    from passivetotal.client import PassiveTotal


class SslSearchRequest(FieldSearchRequest):
    """SSL certificate search: keyword search, or a field search once a field is set."""

    field_type = SslField
    keyword_operation = "ssl.search.keyword"
    field_operation = "ssl.search.field"


class SslRequests:
    """Entry point for /ssl-certificate endpoints.

    Certificate and history queries are a SHA1 hash or an IP address and
    are passed through unvalidated.
    """

    def __init__(self, client: "PassiveTotal") -> None:
        self.client = client

    def certificate(self, query: str) -> Request:
        """Certificate details by SHA1 hash."""
        return Request(self.client, "ssl.certificate", {"query": query})

    def history(self, query: str) -> Request:
        """Certificate history for a SHA1 hash or IP address."""
        return Request(self.client, "ssl.history", {"query": query})

    def search(self, query: str, field: SslField | str | None = None) -> SslSearchRequest:
        """Search certificates by keyword, or by one field if given."""
        request = SslSearchRequest(self.client, SslSearchRequest.keyword_operation, {"query": query})
        return request.field(field) if field is not None else request
