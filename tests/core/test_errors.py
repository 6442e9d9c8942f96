"""Tests for the error taxonomy."""

import httpx

from passivetotal.errors import (
    ClientError,
    FieldParseError,
    InvalidDomain,
    PassiveTotalError,
    ServerError,
    StatusError,
    TransportError,
)
from passivetotal.result import ApiResult


class TestErrors:
    """Tests for error messages, attributes and hierarchy."""

    def test_all_share_base(self) -> None:
        errors = [
            InvalidDomain("x"),
            ClientError(404),
            ServerError(503),
            TransportError(httpx.ConnectError("down")),
            FieldParseError("SslField", "md5"),
        ]
        assert all(isinstance(e, PassiveTotalError) for e in errors)

    def test_status_errors(self) -> None:
        assert isinstance(ClientError(404), StatusError)
        assert str(ClientError(404)) == "Client error: 404"
        assert str(ServerError(503)) == "Server error: 503"
        assert ServerError(503).status == 503

    def test_transport_error_keeps_cause(self) -> None:
        cause = httpx.ReadTimeout("timed out")
        err = TransportError(cause)
        assert err.cause is cause
        assert err.__cause__ is cause
        assert "timed out" in str(err)

    def test_field_parse_error(self) -> None:
        err = FieldParseError("WhoisField", "registrar")
        assert isinstance(err, ValueError)
        assert err.family == "WhoisField"
        assert err.value == "registrar"
        assert "WhoisField" in err.description

    def test_invalid_domain_description(self) -> None:
        assert InvalidDomain("x").description == "Invalid domain given."


class TestApiResult:
    """Tests for the ApiResult value type."""

    def test_success(self) -> None:
        result = ApiResult.success("/account", {"user": "x"})
        assert result.ok is True
        assert result.error is None
        assert result.unwrap() == {"user": "x"}

    def test_failure(self) -> None:
        result = ApiResult.failure("/account", ServerError(500))
        assert result.ok is False
        assert result.unwrap_or("fallback") == "fallback"
