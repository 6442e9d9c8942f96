"""End-to-end request scenarios: build -> validate -> dispatch -> classify.

Uses a recording transport -- no real network calls.
"""

from datetime import datetime, timezone

from passivetotal.client import PassiveTotal
from passivetotal.config import BASE_URL
from passivetotal.errors import ClientError, InvalidDomain, ServerError
from passivetotal.fields import WhoisField
from passivetotal.validation import valid_domain


class TestEndToEndRequests:
    """Full request scenarios."""

    def test_url_query_normalized(self) -> None:
        assert valid_domain("https://www.example.com/path") == "www.example.com"

    def test_ipv6_rejected(self) -> None:
        result = PassiveTotal("u", "k").passive_dns("2001:db8::1").send()
        assert isinstance(result.error, InvalidDomain)

    def test_whois_organization_search(self, pt: PassiveTotal, transport) -> None:
        """WHOIS field search sends the query and field to /whois/search."""
        transport.reply(200, {"results": [{"domain": "passivetotal.org"}]})

        result = pt.whois().search("passivetotal").field(WhoisField.ORGANIZATION).send()

        assert result.unwrap() == {"results": [{"domain": "passivetotal.org"}]}
        sent = transport.last
        assert sent.url == f"{BASE_URL}/whois/search"
        assert sent.auth == ("analyst", "secret-key")
        assert sent.params == {"query": "passivetotal", "field": "organization"}

    def test_teamstream_datetime(self, pt: PassiveTotal, transport) -> None:
        pt.account().teamstream().datetime(
            datetime(2018, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        ).send()
        assert transport.last.params == {"dt": "2018-01-02 03:04:05"}

    def test_status_classification(self, pt: PassiveTotal, transport) -> None:
        transport.reply(404)
        not_found = pt.ssl().certificate("deadbeef").send()
        transport.reply(503)
        unavailable = pt.ssl().certificate("deadbeef").send()

        assert isinstance(not_found.error, ClientError)
        assert not_found.error.status == 404
        assert isinstance(unavailable.error, ServerError)
        assert unavailable.error.status == 503
