"""Contrato do servico de calendario remoto.

Cada metodo faz exatamente uma chamada ao upstream e devolve um
UpstreamResult; falhas nunca escapam como excecao.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.calendar_event import CreatedEvent
    from app.domain.upstream import UpstreamResult


@runtime_checkable
class CalendarServiceProtocol(Protocol):
    """Operacoes de calendario usadas pelos handlers."""

    @property
    def calendar_id(self) -> str:
        """Calendario alvo das operacoes."""
        ...

    async def insert_event(self, body: dict[str, Any]) -> UpstreamResult[CreatedEvent]:
        """Cria o evento e devolve id e link navegavel."""
        ...

    async def get_calendar(self) -> UpstreamResult[dict[str, Any]]:
        """Busca os metadados do calendario alvo."""
        ...

    async def list_events(self, *, max_results: int = 1) -> UpstreamResult[dict[str, Any]]:
        """Lista eventos do calendario alvo (instancias expandidas)."""
        ...
