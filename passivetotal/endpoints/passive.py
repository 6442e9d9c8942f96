"""Passive DNS lookups."""

from dataclasses import replace

from passivetotal.endpoints.base import Request


class PassiveDnsRequest(Request):
    """Passive DNS request for a domain or IPv4 query.

    ``unique()`` switches to the unique-resolutions endpoint. It selects the
    path only and adds nothing to the payload.
    """

    def unique(self, enabled: bool = True) -> "PassiveDnsRequest":
        return replace(self, operation="dns.passive.unique" if enabled else "dns.passive")

    @property
    def is_unique(self) -> bool:
        return self.operation == "dns.passive.unique"
