"""Validators de borda: gatekeeper das rotas HTTP.

Estrutura:
- events/: método, campos obrigatórios e política de origem de /api/events
"""

from .events import build_cors_headers, check_method, require_event_fields

__all__ = [
    "build_cors_headers",
    "check_method",
    "require_event_fields",
]
