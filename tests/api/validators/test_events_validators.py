"""Testes do gatekeeper da rota de eventos."""

from __future__ import annotations

import pytest

from api.validators.events import build_cors_headers, check_method, require_event_fields
from config.settings import CorsSettings
from utils.errors import MethodNotAllowedError, ValidationFailedError


@pytest.mark.parametrize(
    ("method", "action"),
    [("OPTIONS", "preflight"), ("GET", "status"), ("POST", "create"), ("post", "create")],
)
def test_check_method_maps_accepted_methods(method: str, action: str) -> None:
    assert check_method(method) == action


@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE", "HEAD"])
def test_check_method_rejects_other_methods(method: str) -> None:
    with pytest.raises(MethodNotAllowedError) as exc_info:
        check_method(method)

    assert exc_info.value.status_code == 405
    assert str(exc_info.value) == "Use POST"


@pytest.mark.parametrize(
    "body",
    [
        None,
        [],
        "title",
        {},
        {"title": "x", "start": "2025-09-21T20:00:00Z"},
        {"title": "", "start": "2025-09-21T20:00:00Z", "end": "2025-09-21T21:00:00Z"},
        {"title": "x", "start": {}, "end": "2025-09-21T21:00:00Z"},
    ],
)
def test_require_event_fields_rejects_incomplete_body(body: object) -> None:
    with pytest.raises(ValidationFailedError) as exc_info:
        require_event_fields(body)

    assert exc_info.value.status_code == 400
    assert str(exc_info.value) == "Missing title/start/end"


def test_require_event_fields_returns_payload() -> None:
    body = {"title": "x", "start": "2025-09-21T20:00:00Z", "end": "2025-09-21T21:00:00Z"}

    assert require_event_fields(body) is body


def test_cors_headers_echo_allowed_origin() -> None:
    headers = build_cors_headers("http://localhost:3000", CorsSettings())

    assert headers == {
        "Access-Control-Allow-Origin": "http://localhost:3000",
        "Vary": "Origin",
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


@pytest.mark.parametrize("origin", ["https://evil.example", None, ""])
def test_cors_headers_omit_origin_when_not_allowed(origin: str | None) -> None:
    headers = build_cors_headers(origin, CorsSettings())

    assert "Access-Control-Allow-Origin" not in headers
    assert "Vary" not in headers
    assert headers["Access-Control-Allow-Methods"] == "GET, POST, OPTIONS"
    assert headers["Access-Control-Allow-Headers"] == "Content-Type"
