"""Casos de uso de calendario."""

from app.use_cases.calendar.check_calendar import CheckCalendarUseCase
from app.use_cases.calendar.create_event import CreateCalendarEventUseCase

__all__ = ["CheckCalendarUseCase", "CreateCalendarEventUseCase"]
