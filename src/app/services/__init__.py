"""Serviços de aplicação.

Normalização pura (sem IO direto) de datas, recorrência e payload.
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.datetime_normalizer import normalize_date_spec, normalize_event_window
from app.services.event_payload_builder import build_event_payload
from app.services.recurrence_normalizer import ExdateStrategy, build_recurrence

__all__ = [
    "ExdateStrategy",
    "build_event_payload",
    "build_recurrence",
    "normalize_date_spec",
    "normalize_event_window",
]
