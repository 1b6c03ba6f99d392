"""Politica de cross-origin das rotas chamadas pelo frontend.

A allow-list e fixa no codigo: nao existe variavel de ambiente para ela.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

ALLOWED_ORIGINS: frozenset[str] = frozenset(
    {
        "https://embedded-purdue.github.io",
        "http://localhost:3000",
    }
)


@dataclass(frozen=True)
class CorsSettings:
    """Configuracoes de CORS.

    Attributes:
        allowed_origins: Origens ecoadas em Access-Control-Allow-Origin
        allowed_methods: Metodos anunciados em toda resposta
        allowed_headers: Headers de request permitidos ao navegador
    """

    allowed_origins: frozenset[str] = ALLOWED_ORIGINS
    allowed_methods: tuple[str, ...] = ("GET", "POST", "OPTIONS")
    allowed_headers: tuple[str, ...] = ("Content-Type",)

    def is_allowed(self, origin: str | None) -> bool:
        """Retorna True se a origem pertence a allow-list."""
        return bool(origin) and origin in self.allowed_origins


@lru_cache(maxsize=1)
def get_cors_settings() -> CorsSettings:
    """Retorna instancia cacheada de CorsSettings."""
    return CorsSettings()
