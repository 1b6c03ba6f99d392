"""Gatekeeper de metodo HTTP e campos obrigatorios de POST /api/events."""

from __future__ import annotations

from typing import Any, Literal

from utils.errors import MethodNotAllowedError, ValidationFailedError

EventsAction = Literal["preflight", "status", "create"]

REQUIRED_EVENT_FIELDS = ("title", "start", "end")
MISSING_FIELDS_MESSAGE = "Missing title/start/end"

_ACTIONS: dict[str, EventsAction] = {
    "OPTIONS": "preflight",
    "GET": "status",
    "POST": "create",
}


def check_method(method: str) -> EventsAction:
    """Mapeia o metodo para a acao da rota.

    Raises:
        MethodNotAllowedError: Metodo fora de GET, POST e OPTIONS.
    """
    action = _ACTIONS.get(method.upper())
    if action is None:
        raise MethodNotAllowedError(method)
    return action


def require_event_fields(body: Any) -> dict[str, Any]:
    """Exige `title`, `start` e `end` nao vazios antes de qualquer IO.

    Corpo ausente ou que nao seja objeto JSON conta como vazio.
    """
    payload = body if isinstance(body, dict) else {}
    if any(not payload.get(field) for field in REQUIRED_EVENT_FIELDS):
        raise ValidationFailedError(MISSING_FIELDS_MESSAGE)
    return payload
