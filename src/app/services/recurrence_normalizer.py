"""Normalizacao de recorrencia (RRULE) e datas de excecao (EXDATE).

Regras:
- Apenas linhas iniciadas por `RRULE:` (case-insensitive) sao regras.
  O corpo perde todo espaco em branco, vai para maiusculas e precisa
  comecar com `FREQ=`.
- Datas de excecao `YYYY-MM-DD` viram uma unica linha EXDATE.
- Resultado final: regras (0..n) seguidas de no maximo uma EXDATE.

Politica `lenient` descarta entradas invalidas e registra o fallback;
`strict` rejeita a requisicao na primeira entrada invalida.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import TYPE_CHECKING, Any

from app.services.datetime_normalizer import local_time_of_day
from config.logging import log_fallback
from utils.errors import ValidationFailedError

if TYPE_CHECKING:
    from app.domain.calendar_event import EventDateTime
    from config.settings import RecurrencePolicy

logger = logging.getLogger(__name__)

_COMPONENT = "recurrence_normalizer"
_RRULE_PREFIX_RE = re.compile(r"^RRULE:", re.IGNORECASE)
_EXCEPTION_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class ExdateStrategy(str, Enum):
    """Codificacao da linha EXDATE, escolhida pelo tipo do evento."""

    # Evento com horario: ancorado na timezone do inicio
    TIMED = "timed"
    # Evento de dia inteiro: datas flutuantes VALUE=DATE
    ALL_DAY = "all_day"

    @classmethod
    def for_start(cls, start: EventDateTime) -> ExdateStrategy:
        return cls.ALL_DAY if start.is_all_day else cls.TIMED


def normalize_rrule(line: Any) -> str | None:
    """Retorna a regra canonica `RRULE:FREQ=...` ou None se invalida."""
    if not isinstance(line, str):
        return None
    candidate = line.strip()
    if not _RRULE_PREFIX_RE.match(candidate):
        return None
    body = "".join(candidate[len("RRULE:") :].split()).upper()
    if not body.startswith("FREQ="):
        return None
    return f"RRULE:{body}"


def normalize_rrules(recurrence: Any, *, policy: RecurrencePolicy = "lenient") -> list[str]:
    """Normaliza string, lista de strings ou ausencia em linhas RRULE."""
    rules: list[str] = []
    dropped = 0
    for line in _as_list(recurrence):
        rule = normalize_rrule(line)
        if rule is None:
            if policy == "strict":
                raise ValidationFailedError(f"Invalid recurrence rule: {line}")
            dropped += 1
            continue
        rules.append(rule)
    if dropped:
        log_fallback(logger, _COMPONENT, reason="invalid_rrule", dropped=dropped)
    return rules


def filter_exception_dates(ex_dates: Any, *, policy: RecurrencePolicy = "lenient") -> list[str]:
    """Mantem apenas datas no formato `YYYY-MM-DD`."""
    dates: list[str] = []
    dropped = 0
    for value in _as_list(ex_dates):
        if isinstance(value, str) and _EXCEPTION_DATE_RE.fullmatch(value):
            dates.append(value)
            continue
        if policy == "strict":
            raise ValidationFailedError(f"Invalid exception date: {value}")
        dropped += 1
    if dropped:
        log_fallback(logger, _COMPONENT, reason="invalid_exception_date", dropped=dropped)
    return dates


def build_timed_exdate_line(dates: list[str], start: EventDateTime) -> str | None:
    """`EXDATE;TZID=<zone>:YYYYMMDDTHHMMSS,...` com a hora de parede do inicio."""
    if not dates:
        return None
    time_of_day = local_time_of_day(start)
    stamps = ",".join(f"{date.replace('-', '')}T{time_of_day}" for date in dates)
    return f"EXDATE;TZID={start.time_zone}:{stamps}"


def build_all_day_exdate_line(dates: list[str]) -> str | None:
    """`EXDATE;VALUE=DATE:YYYYMMDD,...` para eventos de dia inteiro."""
    if not dates:
        return None
    return "EXDATE;VALUE=DATE:" + ",".join(date.replace("-", "") for date in dates)


def build_exdate_line(dates: list[str], start: EventDateTime) -> str | None:
    if ExdateStrategy.for_start(start) is ExdateStrategy.ALL_DAY:
        return build_all_day_exdate_line(dates)
    return build_timed_exdate_line(dates, start)


def build_recurrence(
    recurrence: Any,
    ex_dates: Any,
    start: EventDateTime,
    *,
    policy: RecurrencePolicy = "lenient",
) -> list[str]:
    """Monta o conjunto final de linhas de recorrencia do evento."""
    lines = normalize_rrules(recurrence, policy=policy)
    exdate = build_exdate_line(filter_exception_dates(ex_dates, policy=policy), start)
    if exdate is not None:
        lines.append(exdate)
    return lines


def _as_list(value: Any) -> list[Any]:
    items = list(value) if isinstance(value, (list, tuple)) else [value]
    # None e strings em branco equivalem a campo ausente
    return [item for item in items if item is not None and not _is_blank(item)]


def _is_blank(value: Any) -> bool:
    return isinstance(value, str) and not value.strip()


__all__ = [
    "ExdateStrategy",
    "build_all_day_exdate_line",
    "build_exdate_line",
    "build_recurrence",
    "build_timed_exdate_line",
    "filter_exception_dates",
    "normalize_rrule",
    "normalize_rrules",
]
