"""Normalizers: conversão de corpos recebidos para modelos internos.

Estrutura:
- events/: corpo de POST /api/events → EventRequest
"""

from .events import parse_event_request, read_json_body

__all__ = [
    "parse_event_request",
    "read_json_body",
]
