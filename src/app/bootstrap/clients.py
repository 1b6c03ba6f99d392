"""Factory do client de calendario usado pelas rotas."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.infra.calendar.google_calendar_client import GoogleCalendarClient

if TYPE_CHECKING:
    from config.settings import CalendarSettings

logger = logging.getLogger(__name__)


def create_calendar_client(settings: CalendarSettings, scope: str) -> GoogleCalendarClient:
    """Cria GoogleCalendarClient para uma requisicao.

    Raises:
        ConfigurationMissingError: Calendario ou service account nao configurados.
    """
    calendar_id = settings.require_calendar_id()
    credentials = settings.require_credentials()
    client = GoogleCalendarClient(
        calendar_id=calendar_id,
        credentials=credentials,
        scopes=(scope,),
    )
    logger.debug("google_calendar_client_created", extra={"scope": scope})
    return client
