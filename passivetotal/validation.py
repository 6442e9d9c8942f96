"""Host validation for queries sent to host-oriented endpoints.

The API accepts domain names and IPv4 addresses as query subjects. Users
often paste full URLs or defanged indicators, so the validator extracts and
normalizes the host from those before checking it. IPv6 is rejected: the
API does not support it.
"""

import ipaddress
import re
from urllib.parse import urlsplit

from loguru import logger

from passivetotal.errors import InvalidDomain

# One DNS label: 1-63 chars of alphanumerics, hyphen or underscore, no hyphen at either end
_LABEL = r"(?!-)[a-z0-9_-]{1,63}(?<!-)"

# A name whose last label is all digits is a malformed IPv4 address, not a domain
DOMAIN_PATTERN: re.Pattern[str] = re.compile(
    rf"^(?=.{{1,253}}$)(?:{_LABEL}\.)*(?![0-9]+$){_LABEL}$"
)

_DEFANGED_SCHEME = re.compile(r"^hxxp(s?)://", re.IGNORECASE)


def refang(query: str) -> str:
    """Strip whitespace and reverse common defanging ([.] -> ., hxxp:// -> http://)."""
    query = query.strip().replace("[.]", ".")
    return _DEFANGED_SCHEME.sub(r"http\1://", query)


def _host_from_url(query: str) -> str | None:
    """Return the host component if the query is a URL with a scheme and host."""
    try:
        parts = urlsplit(query)
        # Accessing hostname/port validates bracketed IPv6 and port syntax
        host = parts.hostname
        _ = parts.port
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return host or None


def _encode_domain(host: str) -> str | None:
    """IDNA-encode a domain name, returning None if it cannot be encoded."""
    host = host.rstrip(".").lower()
    if host.isascii():
        return host
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError:
        return None


def valid_host(host: str) -> str:
    """Classify a bare host and return its normalized form.

    Args:
        host: A domain name or IP literal, without scheme, port or path.

    Returns:
        The lowercased (IDNA-encoded) domain, or the canonical dotted-decimal
        form of an IPv4 address.

    Raises:
        InvalidDomain: If the host is an IPv6 address or not a valid domain.
    """
    bare = host[1:-1] if host.startswith("[") and host.endswith("]") else host
    try:
        ip = ipaddress.ip_address(bare)
    except ValueError:
        ip = None

    if isinstance(ip, ipaddress.IPv4Address):
        return str(ip)
    if isinstance(ip, ipaddress.IPv6Address):
        logger.debug("Rejecting IPv6 host: {}", host)
        raise InvalidDomain(host)

    domain = _encode_domain(host)
    if domain is None or not DOMAIN_PATTERN.match(domain):
        raise InvalidDomain(host)
    return domain


def valid_domain(query: str) -> str:
    """Parse a free-text query into a valid domain name or IPv4 address.

    The query is first tried as a URL (``https://www.example.com/path`` yields
    ``www.example.com``), then as a bare host.

    Args:
        query: Raw user input.

    Returns:
        The normalized host string.

    Raises:
        InvalidDomain: If no domain or IPv4 address can be extracted.
    """
    cleaned = refang(query)
    if not cleaned:
        raise InvalidDomain(query)

    host = _host_from_url(cleaned)
    if host is not None:
        return valid_host(host)

    try:
        return valid_host(cleaned)
    except InvalidDomain:
        raise InvalidDomain(query) from None
