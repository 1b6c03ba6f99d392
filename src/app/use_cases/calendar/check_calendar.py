"""Use case de diagnostico: a service account enxerga e le o calendario?"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.calendar_event import CalendarHealth
from app.infra.calendar.google_calendar_parsers import count_items
from app.use_cases.calendar.create_event import build_client
from config.settings import CALENDAR_SCOPE

if TYPE_CHECKING:
    from app.use_cases.calendar.create_event import ClientFactory
    from config.settings import CalendarSettings


class CheckCalendarUseCase:
    """Le metadados do calendario e uma amostra de eventos."""

    def __init__(self, settings: CalendarSettings, client_factory: ClientFactory) -> None:
        self._settings = settings
        self._client_factory = client_factory

    async def execute(self) -> CalendarHealth:
        client = build_client(self._client_factory, self._settings, CALENDAR_SCOPE)
        calendar = (await client.get_calendar()).unwrap()
        listing = (await client.list_events(max_results=1)).unwrap()
        return CalendarHealth(
            calendar_id=client.calendar_id,
            calendar_summary=calendar.get("summary"),
            sample_event_count=count_items(listing),
        )
