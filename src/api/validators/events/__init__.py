"""Validacoes de borda da rota de eventos (metodo, corpo, origem)."""

from api.validators.events.origin import build_cors_headers
from api.validators.events.request import (
    EventsAction,
    check_method,
    require_event_fields,
)

__all__ = [
    "EventsAction",
    "build_cors_headers",
    "check_method",
    "require_event_fields",
]
