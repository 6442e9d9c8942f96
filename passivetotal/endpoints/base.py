"""Generic request builder shared by every endpoint category.

A Request is an immutable value: the client it will be sent through, an
operation identifier from the endpoint table, and the parameters collected
so far. Setters return a new Request, so a configured request can be kept
and sent any number of times without being changed by later configuration.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from loguru import logger

from passivetotal.endpoints.paths import ENDPOINTS, Endpoint
from passivetotal.errors import InvalidDomain
from passivetotal.fields import SearchField
from passivetotal.result import ApiResult
from passivetotal.validation import valid_domain

if TYPE_CHECKING:
    from passivetotal.client import PassiveTotal

# Wire format for timestamp parameters: UTC, no timezone suffix
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Timestamp = datetime | str


def to_utc(value: Timestamp) -> datetime:
    """Convert a datetime or ISO-8601 string to an aware UTC datetime.

    Naive datetimes are taken to already be in UTC.

    Raises:
        ValueError: If a string value is not valid ISO-8601.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def serialize_value(value: Any) -> Any:
    """Convert a parameter value into its JSON wire representation."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return to_utc(value).strftime(TIMESTAMP_FORMAT)
    return value


@dataclass(frozen=True)
class Request:
    """A pending API request.

    Attributes:
        client: The PassiveTotal client the request is sent through.
        operation: Key into the endpoint table.
        params: Parameter name -> value. None means absent.
    """

    client: "PassiveTotal" = field(repr=False, compare=False)
    operation: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def endpoint(self) -> Endpoint:
        return ENDPOINTS[self.operation]

    @property
    def path(self) -> str:
        return self.endpoint.path

    def _with(self, **params: Any) -> Any:
        """Return a copy of this request with the given parameters set."""
        return replace(self, params={**self.params, **params})

    def payload(self) -> dict[str, Any]:
        """Serialize the present parameters; absent (None) ones are omitted."""
        return {
            key: serialize_value(value)
            for key, value in self.params.items()
            if value is not None
        }

    def prepare(self) -> tuple[str, dict[str, Any]]:
        """Validate host parameters and return the (path, payload) to send.

        Raises:
            InvalidDomain: If a host parameter is not a domain or IPv4 address.
        """
        payload = self.payload()
        for name in self.endpoint.host_params:
            if name in payload:
                payload[name] = valid_domain(payload[name])
        return self.path, payload

    def send(self) -> ApiResult:
        """Dispatch the request.

        Host validation failures are returned without any network activity.
        The request itself is not modified.

        Returns:
            ApiResult holding the decoded JSON response or the error.
        """
        try:
            path, payload = self.prepare()
        except InvalidDomain as e:
            logger.debug("Not sending {}: {}", self.operation, e)
            return ApiResult.failure(self.path, e)
        return self.client.dispatch(path, payload)


class FieldSearchRequest(Request):
    """A search that targets a keyword endpoint unless a field is set.

    Subclasses name the field enum and the two operations. The endpoint is
    chosen from the current parameters each time ``path`` is read.
    """

    field_type: ClassVar[type[SearchField]]
    keyword_operation: ClassVar[str]
    field_operation: ClassVar[str]

    @property
    def endpoint(self) -> Endpoint:
        if self.params.get("field") is None:
            return ENDPOINTS[self.keyword_operation]
        return ENDPOINTS[self.field_operation]

    def field(self, value: "SearchField | str | None") -> Any:
        """Restrict the search to one field (None returns to keyword search).

        Raises:
            FieldParseError: If a string value names no known field.
        """
        if value is None:
            return self._with(field=None)
        return self._with(field=self.field_type.parse(value))
