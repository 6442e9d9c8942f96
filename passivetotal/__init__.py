"""PassiveTotal v2 API client.

Builds authenticated requests for the PassiveTotal threat-intelligence API,
validates domain/IP queries, and returns parsed JSON responses or typed errors.
"""

from passivetotal.client import PassiveTotal
from passivetotal.config import Settings, load_settings
from passivetotal.errors import (
    ClientError,
    ConfigError,
    FieldParseError,
    InvalidDomain,
    PassiveTotalError,
    ServerError,
    StatusError,
    TransportError,
)
from passivetotal.fields import SslField, WhoisField
from passivetotal.result import ApiResult
from passivetotal.validation import valid_domain

__version__ = "0.1.0"

__all__ = [
    "ApiResult",
    "ClientError",
    "ConfigError",
    "FieldParseError",
    "InvalidDomain",
    "PassiveTotal",
    "PassiveTotalError",
    "ServerError",
    "Settings",
    "SslField",
    "StatusError",
    "TransportError",
    "WhoisField",
    "load_settings",
    "valid_domain",
]
