"""Modelos de dominio para criacao de eventos de calendario.

Todos os objetos vivem apenas durante uma requisicao: sao construidos a
partir do corpo recebido, usados para montar uma chamada ao upstream e
descartados quando a resposta sai.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class EventRequest(BaseModel):
    """Corpo aceito em POST /api/events.

    `start`/`end` chegam como DateSpec: string de instante ISO-8601 ou
    objeto com data/hora local e timezone (ou `date` para dia inteiro).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str = Field(..., min_length=1, description="Titulo do evento.")
    start: str | dict[str, Any] = Field(..., description="DateSpec de inicio.")
    end: str | dict[str, Any] = Field(..., description="DateSpec de fim.")
    location: str | None = Field(default=None, description="Local do evento.")
    description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("desc", "description"),
        description="Descricao livre do evento.",
    )
    recurrence: Any = Field(
        default=None,
        description="Uma ou mais linhas RRULE.",
    )
    ex_dates: Any = Field(
        default=None,
        validation_alias=AliasChoices("exDates", "exceptionDates"),
        description="Datas YYYY-MM-DD excluidas da recorrencia.",
    )


class EventDateTime(BaseModel):
    """Forma canonica de data/hora enviada ao upstream.

    Eventos com horario usam `date_time` + `time_zone`; eventos de dia
    inteiro usam apenas `date`.
    """

    model_config = ConfigDict(frozen=True)

    date_time: str | None = None
    time_zone: str | None = None
    date: str | None = None

    @property
    def is_all_day(self) -> bool:
        return self.date is not None

    def to_google(self) -> dict[str, str]:
        if self.date is not None:
            return {"date": self.date}
        return {"dateTime": str(self.date_time), "timeZone": str(self.time_zone)}


class CalendarEventPayload(BaseModel):
    """Evento ja normalizado, pronto para `events.insert`."""

    model_config = ConfigDict(frozen=True)

    summary: str
    start: EventDateTime
    end: EventDateTime
    description: str | None = None
    location: str | None = None
    recurrence: tuple[str, ...] = ()

    def to_request_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"summary": self.summary}
        if self.description is not None:
            body["description"] = self.description
        if self.location is not None:
            body["location"] = self.location
        body["start"] = self.start.to_google()
        body["end"] = self.end.to_google()
        # Lista vazia e omitida: o upstream nao recebe "recurrence": []
        if self.recurrence:
            body["recurrence"] = list(self.recurrence)
        return body


class CreatedEvent(BaseModel):
    """Evento criado no upstream, repassado sem alteracao ao cliente."""

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(..., description="Identificador do evento no calendario.")
    html_link: str = Field(..., description="URL navegavel do evento.")

    def to_response(self) -> dict[str, str]:
        return {"id": self.event_id, "htmlLink": self.html_link}


class CalendarHealth(BaseModel):
    """Resultado do diagnostico de acesso ao calendario."""

    model_config = ConfigDict(frozen=True)

    calendar_id: str
    calendar_summary: str | None = None
    sample_event_count: int = 0

    def to_response(self) -> dict[str, Any]:
        return {
            "ok": True,
            "calendarId": self.calendar_id,
            "calendarSummary": self.calendar_summary,
            "sampleEventCount": self.sample_event_count,
        }


__all__ = [
    "CalendarEventPayload",
    "CalendarHealth",
    "CreatedEvent",
    "EventDateTime",
    "EventRequest",
]
