"""Endpoint table: operation identifier -> path and host-validated parameters.

Operations whose remote subject is "a domain or IP" list ``query`` in
``host_params`` so it is run through the host validator before dispatch.
Keyword searches, tag lookups and SSL certificate lookups (SHA1 or IP) take
arbitrary strings and are not validated.
"""

from dataclasses import dataclass

HOST_QUERY = ("query",)


@dataclass(frozen=True)
class Endpoint:
    """A fixed API endpoint.

    Attributes:
        name: Operation identifier (e.g. "whois.search.field").
        path: Path appended to the API base URL.
        host_params: Parameters that must be valid hosts.
    """

    name: str
    path: str
    host_params: tuple[str, ...] = ()


ENDPOINTS: dict[str, Endpoint] = {
    e.name: e
    for e in (
        # Account
        Endpoint("account.info", "/account"),
        Endpoint("account.history", "/account/history"),
        Endpoint("account.monitors", "/account/monitors"),
        Endpoint("account.organization", "/account/organization"),
        Endpoint("account.teamstream", "/account/organization/teamstream"),
        Endpoint("account.quota", "/account/quota"),
        Endpoint("account.sources", "/account/sources"),
        # Actions
        Endpoint("actions.classification", "/actions/classification", HOST_QUERY),
        Endpoint("actions.compromised", "/actions/ever-compromised", HOST_QUERY),
        Endpoint("actions.dynamic_dns", "/actions/dynamic-dns", HOST_QUERY),
        Endpoint("actions.monitor", "/actions/monitor", HOST_QUERY),
        Endpoint("actions.sinkhole", "/actions/sinkhole", HOST_QUERY),
        Endpoint("actions.tags", "/actions/tags"),
        # Enrichment
        Endpoint("enrichment.data", "/enrichment", HOST_QUERY),
        Endpoint("enrichment.osint", "/enrichment/osint", HOST_QUERY),
        Endpoint("enrichment.malware", "/enrichment/malware", HOST_QUERY),
        Endpoint("enrichment.subdomains", "/enrichment/subdomains", HOST_QUERY),
        # Passive DNS
        Endpoint("dns.passive", "/dns/passive", HOST_QUERY),
        Endpoint("dns.passive.unique", "/dns/passive/unique", HOST_QUERY),
        # SSL certificates
        Endpoint("ssl.certificate", "/ssl-certificate"),
        Endpoint("ssl.history", "/ssl-certificate/history"),
        Endpoint("ssl.search.field", "/ssl-certificate/search"),
        Endpoint("ssl.search.keyword", "/ssl-certificate/search/keyword"),
        # WHOIS
        Endpoint("whois.info", "/whois", HOST_QUERY),
        Endpoint("whois.search.field", "/whois/search"),
        Endpoint("whois.search.keyword", "/whois/search/keyword"),
    )
}
