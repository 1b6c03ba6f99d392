"""Client concreto de Google Calendar autenticado por service account."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from google.oauth2 import service_account
from googleapiclient.discovery import build

from app.domain.upstream import UpstreamResult
from app.infra.calendar.google_calendar_parsers import map_created_event, map_upstream_error
from app.observability import get_correlation_id
from app.protocols.calendar_service import CalendarServiceProtocol

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from app.domain.calendar_event import CreatedEvent
    from app.domain.upstream import UpstreamError
    from config.settings import ServiceAccountCredentials

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMPONENT = "google_calendar_client"
_TOKEN_URI = "https://oauth2.googleapis.com/token"


class GoogleCalendarClient(CalendarServiceProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google.

    Uma instancia por requisicao: o transporte httplib2 nao e thread-safe.
    """

    __slots__ = ("_calendar_id", "_service")

    def __init__(
        self,
        *,
        calendar_id: str,
        credentials: ServiceAccountCredentials,
        scopes: Sequence[str],
    ) -> None:
        google_credentials = service_account.Credentials.from_service_account_info(
            {
                "type": "service_account",
                "client_email": credentials.email,
                "private_key": credentials.private_key,
                "token_uri": _TOKEN_URI,
            },
            scopes=list(scopes),
        )
        self._calendar_id = calendar_id
        self._service = build("calendar", "v3", credentials=google_credentials, cache_discovery=False)

    @property
    def calendar_id(self) -> str:
        return self._calendar_id

    async def insert_event(self, body: dict[str, Any]) -> UpstreamResult[CreatedEvent]:
        return await self._call("insert_event", self._insert_event_sync, body, parse=map_created_event)

    async def get_calendar(self) -> UpstreamResult[dict[str, Any]]:
        return await self._call("get_calendar", self._get_calendar_sync)

    async def list_events(self, *, max_results: int = 1) -> UpstreamResult[dict[str, Any]]:
        return await self._call("list_events", self._list_events_sync, max_results)

    async def _call(
        self,
        action: str,
        func: Callable[..., dict[str, Any]],
        *args: Any,
        parse: Callable[[dict[str, Any]], T] | None = None,
    ) -> UpstreamResult[Any]:
        try:
            response = await asyncio.to_thread(func, *args)
        except Exception as exc:
            error = map_upstream_error(exc)
            self._log_error(action=action, error=error, exc=exc)
            return UpstreamResult.failure(error)
        return UpstreamResult.success(parse(response) if parse else response)

    def _insert_event_sync(self, body: dict[str, Any]) -> dict[str, Any]:
        return self._service.events().insert(calendarId=self._calendar_id, body=body).execute()

    def _get_calendar_sync(self) -> dict[str, Any]:
        return self._service.calendars().get(calendarId=self._calendar_id).execute()

    def _list_events_sync(self, max_results: int) -> dict[str, Any]:
        return (
            self._service.events()
            .list(calendarId=self._calendar_id, maxResults=max_results, singleEvents=True)
            .execute()
        )

    def _log_error(self, *, action: str, error: UpstreamError, exc: Exception) -> None:
        logger.error(
            "google_calendar_http_error",
            extra={
                "component": _COMPONENT,
                "action": action,
                "result": "error",
                "status_code": error.status_code,
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
