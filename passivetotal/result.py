"""Result type returned by every request dispatch."""

from dataclasses import dataclass, field
from typing import Any

from passivetotal.errors import PassiveTotalError


@dataclass(frozen=True)
class ApiResult:
    """Outcome of a single API request.

    Exactly one of ``value`` and ``error`` is meaningful: a successful
    dispatch carries the decoded JSON body in ``value`` and ``error`` is None.

    Attributes:
        path: Endpoint path the request targeted (e.g. "/whois/search").
        value: Decoded JSON response on success.
        error: The PassiveTotalError describing the failure, if any.
    """

    path: str
    value: Any = None
    error: PassiveTotalError | None = field(default=None)

    @classmethod
    def success(cls, path: str, value: Any) -> "ApiResult":
        return cls(path=path, value=value)

    @classmethod
    def failure(cls, path: str, error: PassiveTotalError) -> "ApiResult":
        return cls(path=path, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the response value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        return default if self.error is not None else self.value
