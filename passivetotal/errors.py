"""Error types raised or returned by the PassiveTotal client.

Every failure the client can produce is a PassiveTotalError subclass, so a
caller can catch one base type or inspect the concrete one. Request dispatch
does not raise these; it returns them inside an ApiResult.
"""


class PassiveTotalError(Exception):
    """Base class for all PassiveTotal client errors."""

    description = "PassiveTotal client error."


class ConfigError(PassiveTotalError):
    """Raised when client configuration is missing or unreadable."""

    description = "Configuration error. Check the config file and environment."


class InvalidDomain(PassiveTotalError):
    """The query is not a domain, an IPv4 address, or a URL wrapping one."""

    description = "Invalid domain given."

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"Invalid domain given: {query!r}")


class StatusError(PassiveTotalError):
    """The API answered with an error status code."""

    kind = "Status error"

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"{self.kind}: {status}")


class ClientError(StatusError):
    """The API rejected the request with a 4xx status."""

    kind = "Client error"
    description = "Client error. This is usually caused by a malformed request."


class ServerError(StatusError):
    """The API failed with a 5xx status."""

    kind = "Server error"
    description = "Server error. This is usually caused by an error on the PassiveTotal server."


class TransportError(PassiveTotalError):
    """Connection, timeout, TLS or decoding failure below the API layer.

    Attributes:
        cause: The underlying exception (usually an httpx.HTTPError).
    """

    description = "Transport error. The request could not be completed."

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Transport error: {cause}")
        self.__cause__ = cause


class FieldParseError(PassiveTotalError, ValueError):
    """A string did not name a known search field.

    Attributes:
        family: Name of the field enum that failed to parse ("SslField", "WhoisField").
        value: The offending input string.
    """

    def __init__(self, family: str, value: str) -> None:
        self.family = family
        self.value = value
        super().__init__(f"Error parsing {family} from {value!r}")

    @property
    def description(self) -> str:  # type: ignore[override]
        return f"{self.family}Parse error. Unable to parse given string into an {self.family}."
