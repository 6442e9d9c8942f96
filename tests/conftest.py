"""Shared pytest fixtures.

No test talks to the real API: requests go through a recording transport
that returns canned responses.
"""

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from passivetotal.client import PassiveTotal


@dataclass
class SentRequest:
    """One request captured by RecordingTransport."""

    url: str
    auth: tuple[str, str]
    timeout: float
    params: dict[str, Any]


@dataclass
class RecordingTransport:
    """Transport that records requests and replies with a fixed status and body."""

    status: int = 200
    body: bytes = b'{"results": []}'
    error: Exception | None = None
    sent: list[SentRequest] = field(default_factory=list)

    def reply(self, status: int, payload: Any = None) -> None:
        self.status = status
        self.body = b"" if payload is None else json.dumps(payload).encode()

    def get(
        self,
        url: str,
        auth: tuple[str, str],
        timeout: float,
        params: dict[str, Any],
    ) -> tuple[int, bytes]:
        self.sent.append(SentRequest(url=url, auth=auth, timeout=timeout, params=dict(params)))
        if self.error is not None:
            raise self.error
        return self.status, self.body

    @property
    def last(self) -> SentRequest:
        return self.sent[-1]


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def pt(transport: RecordingTransport) -> PassiveTotal:
    return PassiveTotal("analyst", "secret-key", timeout=30, transport=transport)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from a real $HOME/.passivetotal.toml and PASSIVETOTAL_* env."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("USERNAME", "APIKEY", "TIMEOUT", "BASE_URL", "DEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(f"PASSIVETOTAL_{name}", raising=False)
    return tmp_path
