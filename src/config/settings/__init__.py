"""Agregador de settings do proxy de eventos.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Calendar settings
from config.settings.calendar import (
    CALENDAR_SCOPE,
    DEFAULT_TIMEZONE,
    EVENTS_SCOPE,
    CalendarSettings,
    RecurrencePolicy,
    ServiceAccountCredentials,
    get_calendar_settings,
    unescape_private_key,
)

# CORS settings
from config.settings.cors import ALLOWED_ORIGINS, CorsSettings, get_cors_settings

__all__ = [
    # Constants
    "ALLOWED_ORIGINS",
    "CALENDAR_SCOPE",
    "DEFAULT_SERVICE_NAME",
    "DEFAULT_TIMEZONE",
    "EVENTS_SCOPE",
    # Base
    "BaseSettings",
    # Calendar
    "CalendarSettings",
    # CORS
    "CorsSettings",
    "Environment",
    "RecurrencePolicy",
    "ServiceAccountCredentials",
    "get_base_settings",
    "get_calendar_settings",
    "get_cors_settings",
    "unescape_private_key",
]
