"""Politica de cross-origin da rota de eventos.

Origem fora da allow-list nao bloqueia o processamento: a resposta sai
sem Access-Control-Allow-Origin e o navegador impede a leitura.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from config.settings import CorsSettings


def build_cors_headers(origin: str | None, settings: CorsSettings) -> dict[str, str]:
    headers: dict[str, str] = {}
    if settings.is_allowed(origin):
        headers["Access-Control-Allow-Origin"] = str(origin)
        headers["Vary"] = "Origin"
    headers["Access-Control-Allow-Methods"] = ", ".join(settings.allowed_methods)
    headers["Access-Control-Allow-Headers"] = ", ".join(settings.allowed_headers)
    return headers
