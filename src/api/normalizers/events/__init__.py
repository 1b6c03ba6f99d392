"""Normalizacao do corpo JSON de eventos para o modelo interno."""

from api.normalizers.events.normalizer import parse_event_request, read_json_body

__all__ = ["parse_event_request", "read_json_body"]
