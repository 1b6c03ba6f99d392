"""Formatter JSON dos logs do serviço."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem dos campos no JSON emitido
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2025-09-21 16:00:00,123",
            "level": "INFO",
            "logger": "api.routes.events.router",
            "message": "calendar_event_created",
            "correlation_id": "abc-123",
            "service": "calendar-events-proxy"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
