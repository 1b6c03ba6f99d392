"""Helpers internos de parsing para respostas e erros da Google Calendar API."""

from __future__ import annotations

import json
from typing import Any

from app.domain.calendar_event import CreatedEvent
from app.domain.upstream import UpstreamError

FALLBACK_ERROR_MESSAGE = "Internal error"
DEFAULT_ERROR_STATUS = 500


def map_upstream_error(exc: BaseException) -> UpstreamError:
    """Reduz qualquer falha do upstream a status e mensagem.

    Precedencia da mensagem: `error.message` do envelope JSON, mensagem
    propria da excecao, texto fixo. Precedencia do status: status HTTP
    carregado pela excecao, 500.
    """
    message = envelope_message(exc) or _own_message(exc) or FALLBACK_ERROR_MESSAGE
    return UpstreamError(status_code=http_status(exc) or DEFAULT_ERROR_STATUS, message=message)


def envelope_message(exc: BaseException) -> str | None:
    """Extrai `error.message` do corpo de erro da API, se houver."""
    data = _decode_content(_error_body(exc))
    if isinstance(data, list) and data:
        data = data[0]
    error = data.get("error") if isinstance(data, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    if isinstance(message, str) and message.strip():
        return message.strip()
    return None


def http_status(exc: BaseException) -> int | None:
    """Status HTTP de HttpError (`resp.status`) ou de erros estilo `response.status_code`."""
    status = getattr(exc, "status_code", None)
    for response in (getattr(exc, "resp", None), getattr(exc, "response", None)):
        if status is None and response is not None:
            status = getattr(response, "status", None) or getattr(response, "status_code", None)
    try:
        return int(status) if status else None
    except (TypeError, ValueError):
        return None


def map_created_event(payload: dict[str, Any]) -> CreatedEvent:
    return CreatedEvent(
        event_id=str(payload.get("id") or ""),
        html_link=str(payload.get("htmlLink") or ""),
    )


def count_items(payload: dict[str, Any]) -> int:
    items = payload.get("items") if isinstance(payload, dict) else None
    return len(items) if isinstance(items, list) else 0


def _decode_content(content: Any) -> Any:
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError:
            return None
    if not isinstance(content, str):
        return content if isinstance(content, dict) else None
    try:
        return json.loads(content)
    except ValueError:
        return None


def _own_message(exc: BaseException) -> str | None:
    reason = getattr(exc, "reason", None)
    if isinstance(reason, str) and reason.strip():
        return reason.strip()
    text = str(exc).strip()
    return text or None


def _error_body(exc: BaseException) -> Any:
    content = getattr(exc, "content", None)
    if content is not None:
        return content
    response = getattr(exc, "response", None)
    for attr in ("data", "content", "text"):
        body = getattr(response, attr, None) if response is not None else None
        if body is not None:
            return body
    return None
