"""Normalizacao de DateSpec para a forma canonica do upstream.

Formatos aceitos para `start`/`end`:
- string: instante ISO-8601. E convertido para UTC
  (`YYYY-MM-DDTHH:MM:SS.mmmZ`) e pareado com a timezone padrao.
- objeto `{dateTime|localDateTime, timeZone|timeZoneId}`: horario de parede.
  A string local segue literal, sem conversao para instante, para que o
  horario escolhido sobreviva a transicoes de horario de verao.
- objeto `{date}`: evento de dia inteiro.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.domain.calendar_event import EventDateTime
from utils.errors import InputParseError, ValidationFailedError

_LOCAL_DATETIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T(?P<time>\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})?$",
    re.IGNORECASE,
)
_CALENDAR_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_LOCAL_KEYS = ("dateTime", "localDateTime")
_ZONE_KEYS = ("timeZone", "timeZoneId")


def normalize_date_spec(value: Any, default_timezone: str) -> EventDateTime:
    """Converte qualquer DateSpec aceito em EventDateTime.

    Raises:
        InputParseError: Se o valor nao puder ser interpretado como data/hora.
    """
    if isinstance(value, EventDateTime):
        return value
    if isinstance(value, str):
        return normalize_instant(value, default_timezone)
    if isinstance(value, dict):
        if _first_present(value, _LOCAL_KEYS) is None and "date" in value:
            return normalize_all_day(value["date"])
        return normalize_local(value, default_timezone)
    raise InputParseError()


def normalize_instant(value: str, default_timezone: str) -> EventDateTime:
    """Interpreta a string como instante e pareia com a timezone padrao."""
    return EventDateTime(
        date_time=format_instant(parse_instant(value)),
        time_zone=default_timezone,
    )


def normalize_local(value: dict[str, Any], default_timezone: str) -> EventDateTime:
    """Mantem a data/hora local literal e resolve a timezone."""
    local = _first_present(value, _LOCAL_KEYS)
    if not isinstance(local, str) or not _LOCAL_DATETIME_RE.match(local.strip()):
        raise InputParseError()
    zone = _first_present(value, _ZONE_KEYS)
    if not isinstance(zone, str) or not zone.strip():
        zone = default_timezone
    return EventDateTime(date_time=local.strip(), time_zone=zone.strip())


def normalize_all_day(value: Any) -> EventDateTime:
    if not isinstance(value, str) or not _CALENDAR_DATE_RE.match(value.strip()):
        raise InputParseError()
    return EventDateTime(date=value.strip())


def normalize_event_window(
    start: Any,
    end: Any,
    default_timezone: str,
) -> tuple[EventDateTime, EventDateTime]:
    """Normaliza inicio e fim exigindo o mesmo tipo de evento nos dois."""
    start_time = normalize_date_spec(start, default_timezone)
    end_time = normalize_date_spec(end, default_timezone)
    if start_time.is_all_day != end_time.is_all_day:
        raise ValidationFailedError("start and end must both be timed or both all-day")
    return start_time, end_time


def parse_instant(value: str) -> datetime:
    """Converte string ISO-8601 em datetime UTC.

    Strings sem offset sao lidas como UTC, o relogio do runtime.
    """
    text = value.strip()
    if not text:
        raise InputParseError()
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00").replace("z", "+00:00"))
        return parsed.replace(tzinfo=UTC) if parsed.tzinfo is None else parsed.astimezone(UTC)
    except (OverflowError, ValueError) as exc:
        # Offsets nos limites de datetime saem do intervalo representavel
        raise InputParseError() from exc


def format_instant(value: datetime) -> str:
    """Formata instante como `YYYY-MM-DDTHH:MM:SS.mmmZ`."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def local_time_of_day(event_time: EventDateTime) -> str:
    """Retorna `HHMMSS` do horario de parede do evento na sua timezone.

    Strings locais usam o componente de hora literal; instantes com offset
    sao convertidos para a timezone do evento antes de extrair a hora.
    """
    if event_time.date_time is None:
        return "000000"
    match = _LOCAL_DATETIME_RE.match(event_time.date_time)
    if match is None:
        raise InputParseError()
    if match.group("offset"):
        zone = _resolve_zone(event_time.time_zone)
        try:
            return parse_instant(event_time.date_time).astimezone(zone).strftime("%H%M%S")
        except OverflowError as exc:
            raise InputParseError() from exc
    hh, mm, *rest = match.group("time").split(":")
    ss = rest[0].split(".")[0] if rest else "00"
    return f"{hh}{mm}{ss}"


def _resolve_zone(name: str | None) -> ZoneInfo:
    try:
        return ZoneInfo(name or "")
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InputParseError(f"Unknown time zone: {name}") from exc


def _first_present(value: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if value.get(key) is not None:
            return value[key]
    return None


__all__ = [
    "format_instant",
    "local_time_of_day",
    "normalize_all_day",
    "normalize_date_spec",
    "normalize_event_window",
    "normalize_instant",
    "normalize_local",
    "parse_instant",
]
