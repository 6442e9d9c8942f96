"""Account endpoints: details, history, monitors, organization, quota, sources."""

from typing import TYPE_CHECKING

from passivetotal.endpoints.base import Request, Timestamp, to_utc

if TYPE_CHECKING:
    from passivetotal.client import PassiveTotal


class SourcesRequest(Request):
    """Request for /account/sources."""

    def source(self, source: str | None) -> "SourcesRequest":
        return self._with(source=source)


class TeamstreamRequest(Request):
    """Request for the organization teamstream, with optional filters."""

    def source(self, source: str | None) -> "TeamstreamRequest":
        return self._with(source=source)

    def type(self, type_: str | None) -> "TeamstreamRequest":
        return self._with(type=type_)

    def focus(self, focus: str | None) -> "TeamstreamRequest":
        return self._with(focus=focus)

    def datetime(self, value: Timestamp | None) -> "TeamstreamRequest":
        """Only return teamstream activity at this point in time.

        Accepts a datetime (naive values are taken as UTC) or an ISO-8601
        string. Sent as ``dt`` in ``YYYY-MM-DD HH:MM:SS`` UTC.

        Raises:
            ValueError: If a string value is not valid ISO-8601.
        """
        return self._with(dt=None if value is None else to_utc(value))


class OrganizationRequest(Request):
    """Request for /account/organization; also leads to the teamstream."""

    def teamstream(self) -> TeamstreamRequest:
        return TeamstreamRequest(self.client, "account.teamstream")


class AccountRequests:
    """Entry point for account endpoints. None of them take a query."""

    def __init__(self, client: "PassiveTotal") -> None:
        self.client = client

    def info(self) -> Request:
        return Request(self.client, "account.info")

    def history(self) -> Request:
        return Request(self.client, "account.history")

    def monitors(self) -> Request:
        return Request(self.client, "account.monitors")

    def organization(self) -> OrganizationRequest:
        return OrganizationRequest(self.client, "account.organization")

    def teamstream(self) -> TeamstreamRequest:
        return self.organization().teamstream()

    def quota(self) -> Request:
        return Request(self.client, "account.quota")

    def sources(self) -> SourcesRequest:
        return SourcesRequest(self.client, "account.sources")
