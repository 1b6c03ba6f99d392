"""Montagem do corpo de `events.insert` a partir de um EventRequest."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.calendar_event import CalendarEventPayload
from app.services.datetime_normalizer import normalize_event_window
from app.services.recurrence_normalizer import build_recurrence

if TYPE_CHECKING:
    from app.domain.calendar_event import EventRequest
    from config.settings import RecurrencePolicy


def build_event_payload(
    request: EventRequest,
    *,
    default_timezone: str,
    recurrence_policy: RecurrencePolicy = "lenient",
) -> CalendarEventPayload:
    """Normaliza datas e recorrencia e devolve o payload canonico.

    Raises:
        ValidationFailedError: Datas invalidas ou, em modo strict, recorrencia invalida.
    """
    start, end = normalize_event_window(request.start, request.end, default_timezone)
    recurrence = build_recurrence(
        request.recurrence,
        request.ex_dates,
        start,
        policy=recurrence_policy,
    )
    return CalendarEventPayload(
        summary=request.title,
        description=request.description,
        location=request.location,
        start=start,
        end=end,
        recurrence=tuple(recurrence),
    )


__all__ = ["build_event_payload"]
