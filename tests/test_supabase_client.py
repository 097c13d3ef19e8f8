from __future__ import annotations

from typing import Any

import pytest
import requests

from data.supabase_client import (
    SupabaseClient,
    SupabaseConfigError,
    SupabaseQueryError,
    SupabaseUnavailableError,
    get_supabase_client,
)


class _FakeResponse:
    def __init__(self, *, status_code: int, payload: Any = None, invalid_json: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("not json")
        return self._payload


class _FakeSession:
    def __init__(self, responses: list[_FakeResponse] | None = None, raise_error: Exception | None = None) -> None:
        self.responses = responses or []
        self.raise_error = raise_error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, params: dict[str, Any], headers: dict[str, str], timeout: int) -> _FakeResponse:
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.raise_error is not None:
            raise self.raise_error
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


def _client(session: _FakeSession) -> SupabaseClient:
    return SupabaseClient(base_url="https://example.supabase.co/", api_key="anon-key", timeout_seconds=3, session=session)


def test_fetch_latest_builds_ordered_single_row_query() -> None:
    session = _FakeSession([_FakeResponse(status_code=200, payload=[{"id": "1", "created_at": "2024-03-14"}])])

    row = _client(session).fetch_latest("loan_applications")

    assert row == {"id": "1", "created_at": "2024-03-14"}
    call = session.calls[0]
    assert call["url"] == "https://example.supabase.co/rest/v1/loan_applications"
    assert call["params"] == {"select": "*", "order": "created_at.desc", "limit": 1}
    assert call["headers"]["apikey"] == "anon-key"
    assert call["headers"]["Authorization"] == "Bearer anon-key"
    assert call["timeout"] == 3


def test_fetch_latest_returns_none_for_empty_table() -> None:
    session = _FakeSession([_FakeResponse(status_code=200, payload=[])])
    assert _client(session).fetch_latest("job_applications") is None


def test_transport_error_raises_unavailable() -> None:
    session = _FakeSession(raise_error=requests.ConnectionError("down"))
    with pytest.raises(SupabaseUnavailableError):
        _client(session).fetch_latest("loan_applications")


@pytest.mark.parametrize(
    ("response", "error"),
    [
        (_FakeResponse(status_code=503), SupabaseUnavailableError),
        (_FakeResponse(status_code=401, payload={"message": "bad key"}), SupabaseQueryError),
        (_FakeResponse(status_code=200, invalid_json=True), SupabaseUnavailableError),
        (_FakeResponse(status_code=200, payload={"id": "1"}), SupabaseUnavailableError),
    ],
)
def test_bad_responses(response: _FakeResponse, error: type[Exception]) -> None:
    with pytest.raises(error):
        _client(_FakeSession([response])).fetch_latest("loan_applications")


def test_missing_credentials_fail_before_any_request() -> None:
    session = _FakeSession()
    client = SupabaseClient(base_url=None, api_key=None, session=session)

    with pytest.raises(SupabaseConfigError):
        client.fetch_latest("loan_applications")
    assert session.calls == []


def test_get_supabase_client_uses_config(live_config) -> None:
    client = get_supabase_client(live_config)
    assert client.base_url == "https://example.supabase.co"
    assert client.api_key == "anon-key"
    assert client.timeout_seconds == 5


def test_context_manager_closes_session_on_error() -> None:
    session = _FakeSession([_FakeResponse(status_code=503)])

    with pytest.raises(SupabaseUnavailableError):
        with _client(session) as client:
            client.fetch_latest("job_applications")

    assert session.closed is True
