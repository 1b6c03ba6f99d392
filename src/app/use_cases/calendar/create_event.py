"""Use case de criacao de evento no calendario remoto."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.infra.calendar.google_calendar_parsers import map_upstream_error
from app.services.event_payload_builder import build_event_payload
from config.settings import EVENTS_SCOPE
from utils.errors import EventProxyError, UpstreamRequestError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.domain.calendar_event import CreatedEvent, EventRequest
    from app.protocols.calendar_service import CalendarServiceProtocol
    from config.settings import CalendarSettings

    ClientFactory = Callable[[CalendarSettings, str], CalendarServiceProtocol]


class CreateCalendarEventUseCase:
    """Orquestra normalizacao, credenciais e a unica chamada de insercao.

    Toda validacao local acontece antes de qualquer credencial ser usada.
    """

    def __init__(self, settings: CalendarSettings, client_factory: ClientFactory) -> None:
        self._settings = settings
        self._client_factory = client_factory

    async def execute(self, request: EventRequest) -> CreatedEvent:
        payload = build_event_payload(
            request,
            default_timezone=self._settings.timezone,
            recurrence_policy=self._settings.recurrence_policy,
        )
        client = build_client(self._client_factory, self._settings, EVENTS_SCOPE)
        result = await client.insert_event(payload.to_request_body())
        return result.unwrap()


def build_client(
    client_factory: ClientFactory,
    settings: CalendarSettings,
    scope: str,
) -> CalendarServiceProtocol:
    """Cria o client; material de credencial recusado vira falha de upstream."""
    settings.require_calendar_id()
    settings.require_credentials()
    try:
        return client_factory(settings, scope)
    except EventProxyError:
        raise
    except Exception as exc:
        raise UpstreamRequestError(map_upstream_error(exc)) from exc
