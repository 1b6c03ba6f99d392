"""Agregador de rotas: registra todos os routers do serviço.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.calendar_check.router import router as calendar_check_router
from api.routes.events.router import router as events_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Rotas chamadas pelo frontend (caminhos completos em cada router)
    api_router.include_router(events_router, tags=["events"])
    api_router.include_router(calendar_check_router, tags=["calendar"])

    return api_router
