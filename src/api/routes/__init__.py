"""Rotas HTTP da API.

Estrutura:
- routes/events/: criação de eventos (POST) e sonda GET
- routes/calendar_check/: diagnóstico de acesso ao calendário
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
