"""Excecoes de dominio do proxy de eventos de calendario.

Cada excecao carrega o status HTTP com que deve ser respondida na borda
da rota; nenhuma delas atravessa o handler.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.upstream import UpstreamError


class EventProxyError(RuntimeError):
    """Base para falhas tratadas pelo proxy."""

    status_code: int = 500


class ConfigurationMissingError(EventProxyError):
    """Setting obrigatoria ausente no ambiente."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"Missing env: {env_name}")
        self.env_name = env_name


class ValidationFailedError(EventProxyError):
    """Corpo da requisicao invalido ou incompleto."""

    status_code = 400


class InputParseError(ValidationFailedError):
    """Data/hora informada nao pode ser interpretada."""

    def __init__(self, message: str = "Invalid time value") -> None:
        super().__init__(message)


class MethodNotAllowedError(EventProxyError):
    """Metodo HTTP fora do conjunto aceito pela rota."""

    status_code = 405

    def __init__(self, method: str, message: str = "Use POST") -> None:
        super().__init__(message)
        self.method = method


class UpstreamRequestError(EventProxyError):
    """Falha devolvida pelo servico de calendario remoto."""

    def __init__(self, error: UpstreamError) -> None:
        super().__init__(error.message)
        self.error = error
        self.status_code = error.status_code
