"""Tests for host validation (domains, IPv4, URLs; IPv6 rejected)."""

import pytest

from passivetotal.errors import InvalidDomain
from passivetotal.validation import refang, valid_domain, valid_host


class TestValidDomain:
    """Tests for the valid_domain function."""

    # --- Domains ---
    @pytest.mark.parametrize(
        "domain",
        [
            "example.com",
            "www.passivetotal.org",
            "a-b.c-d.example.co.uk",
            "xn--bcher-kva.example",
            "_dmarc.example.com",
            "under_score.example.com",
            "localhost",
            "washxxp.com",
            "hxxpool.example.org",
        ],
    )
    def test_valid_domains_unchanged(self, domain: str) -> None:
        assert valid_domain(domain) == domain

    def test_lowercases_domain(self) -> None:
        assert valid_domain("WWW.Example.COM") == "www.example.com"

    def test_strips_whitespace(self) -> None:
        assert valid_domain("  example.com\n") == "example.com"

    def test_trailing_dot_removed(self) -> None:
        assert valid_domain("example.com.") == "example.com"

    def test_idna_encoded(self) -> None:
        assert valid_domain("bücher.example") == "xn--bcher-kva.example"

    def test_refangs_defanged_domain(self) -> None:
        assert valid_domain("evil[.]example[.]com") == "evil.example.com"

    # --- IPv4 ---
    @pytest.mark.parametrize("ip", ["10.0.0.1", "192.0.2.255", "8.8.8.8", "0.0.0.0"])
    def test_valid_ipv4_unchanged(self, ip: str) -> None:
        assert valid_domain(ip) == ip

    # --- IPv6 ---
    @pytest.mark.parametrize("ip", ["2001:db8::1", "::1", "fe80::1", "[2001:db8::1]"])
    def test_ipv6_rejected(self, ip: str) -> None:
        with pytest.raises(InvalidDomain):
            valid_domain(ip)

    def test_ipv6_in_url_rejected(self) -> None:
        with pytest.raises(InvalidDomain):
            valid_domain("http://[2001:db8::1]/index.html")

    # --- URLs ---
    def test_url_host_extracted(self) -> None:
        assert valid_domain("https://www.example.com/path") == "www.example.com"

    def test_url_with_port_and_credentials(self) -> None:
        assert valid_domain("http://user:pw@Example.com:8080/a?b=c") == "example.com"

    def test_url_with_ipv4_host(self) -> None:
        assert valid_domain("http://203.0.113.7/payload.exe") == "203.0.113.7"

    def test_defanged_url(self) -> None:
        assert valid_domain("hxxps://evil[.]com/bad") == "evil.com"

    def test_hxxp_inside_domain_left_alone(self) -> None:
        assert valid_domain("washxxp.com") == "washxxp.com"
        assert valid_domain("http://hxxpool.example.org/") == "hxxpool.example.org"

    # --- Garbage ---
    @pytest.mark.parametrize(
        "query",
        [
            "",
            "   ",
            "not a domain",
            "-bad.example.com",
            "bad-.example.com",
            "example.com:80",
            "example.com/path",
            "a..b.com",
            "999.999.999.999",
            "1.2.3",
            "http://",
            "a" * 64 + ".com",
        ],
    )
    def test_invalid_rejected(self, query: str) -> None:
        with pytest.raises(InvalidDomain):
            valid_domain(query)

    def test_error_carries_query(self) -> None:
        with pytest.raises(InvalidDomain) as exc_info:
            valid_domain("no spaces allowed.com")
        assert exc_info.value.query == "no spaces allowed.com"


class TestValidHost:
    """Tests for classifying an already-extracted host."""

    def test_domain(self) -> None:
        assert valid_host("Example.org") == "example.org"

    def test_ipv4(self) -> None:
        assert valid_host("192.168.1.1") == "192.168.1.1"

    def test_ipv6(self) -> None:
        with pytest.raises(InvalidDomain):
            valid_host("2001:db8::1")


class TestRefang:
    """Tests for the refang helper."""

    def test_brackets(self) -> None:
        assert refang("evil[.]com") == "evil.com"

    def test_hxxp(self) -> None:
        assert refang("hxxp://evil.com") == "http://evil.com"

    def test_clean_value_unchanged(self) -> None:
        assert refang("example.com") == "example.com"

    def test_only_scheme_refanged(self) -> None:
        assert refang("HXXPS://washxxp.com/hxxp") == "https://washxxp.com/hxxp"
