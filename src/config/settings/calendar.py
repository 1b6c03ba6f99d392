"""Settings de integracao com Google Calendar.

Centralizar a leitura de env aqui evita espalhar parse de configuracao
pelos handlers; as rotas so consultam a instancia cacheada.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from utils.errors import ConfigurationMissingError

DEFAULT_TIMEZONE = "America/Indiana/Indianapolis"
EVENTS_SCOPE = "https://www.googleapis.com/auth/calendar.events"
CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar"

RecurrencePolicy = Literal["lenient", "strict"]

# Ordem reflete a ordem em que as variaveis sao exigidas.
_REQUIRED_ENV = (
    ("CALENDAR_ID", "calendar_id"),
    ("GOOGLE_SA_EMAIL", "service_account_email"),
    ("GOOGLE_SA_PRIVATE_KEY", "service_account_private_key"),
)


@dataclass(frozen=True)
class ServiceAccountCredentials:
    """Identidade de servico ja validada e pronta para autenticar."""

    email: str
    private_key: str


@dataclass(frozen=True)
class CalendarSettings:
    """Configuracoes de calendar usadas pelos handlers de eventos.

    Attributes:
        calendar_id: ID do calendario alvo no Google Calendar
        service_account_email: Email da service account usada nas chamadas
        service_account_private_key: Chave PEM com quebras de linha restauradas
        timezone: Timezone padrao quando o cliente nao informa uma
        recurrence_policy: lenient descarta recorrencias invalidas; strict rejeita
    """

    calendar_id: str = ""
    service_account_email: str = ""
    service_account_private_key: str = ""
    timezone: str = DEFAULT_TIMEZONE
    recurrence_policy: RecurrencePolicy = "lenient"

    def require_calendar_id(self) -> str:
        """Retorna o calendario alvo ou falha antes de qualquer IO."""
        if not self.calendar_id:
            raise ConfigurationMissingError("CALENDAR_ID")
        return self.calendar_id

    def require_credentials(self) -> ServiceAccountCredentials:
        """Retorna a identidade de servico ou falha antes de qualquer IO."""
        if not self.service_account_email:
            raise ConfigurationMissingError("GOOGLE_SA_EMAIL")
        if not self.service_account_private_key:
            raise ConfigurationMissingError("GOOGLE_SA_PRIVATE_KEY")
        return ServiceAccountCredentials(
            email=self.service_account_email,
            private_key=self.service_account_private_key,
        )

    def validate(self) -> list[str]:
        """Valida configuracoes minimas de calendar.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors = [
            f"{env_name} nao configurado"
            for env_name, field_name in _REQUIRED_ENV
            if not getattr(self, field_name)
        ]
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"TIMEZONE invalida: {self.timezone}")
        return errors


def unescape_private_key(raw_key: str) -> str:
    """Restaura quebras de linha de chaves PEM armazenadas com `\\n` literal."""
    return raw_key.replace("\\n", "\n")


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _parse_recurrence_policy(value: str | None) -> RecurrencePolicy:
    if value and value.lower() == "strict":
        return "strict"
    return "lenient"


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        calendar_id=_read_optional_env("CALENDAR_ID") or "",
        service_account_email=_read_optional_env("GOOGLE_SA_EMAIL") or "",
        service_account_private_key=unescape_private_key(
            _read_optional_env("GOOGLE_SA_PRIVATE_KEY") or ""
        ),
        timezone=_read_optional_env("TIMEZONE") or DEFAULT_TIMEZONE,
        recurrence_policy=_parse_recurrence_policy(_read_optional_env("RECURRENCE_POLICY")),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = [
    "CALENDAR_SCOPE",
    "DEFAULT_TIMEZONE",
    "EVENTS_SCOPE",
    "CalendarSettings",
    "RecurrencePolicy",
    "ServiceAccountCredentials",
    "get_calendar_settings",
    "unescape_private_key",
]
