"""Filters de logging para injeção de contexto e redação.

Campos injetados em todo record:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço

Blocos PEM de chave privada são removidos da mensagem e dos args.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[REDACTED]"

_PRIVATE_KEY_RE = re.compile(
    r"-----BEGIN [A-Z ]*PRIVATE KEY-----.*?(?:-----END [A-Z ]*PRIVATE KEY-----|$)",
    re.DOTALL,
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Se correlation_id já foi passado via `extra`, o valor explícito vence.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class PrivateKeyRedactionFilter(logging.Filter):
    """Substitui material de chave privada na mensagem e nos args do record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = redact_private_keys(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(redact_private_keys(arg) for arg in record.args)
        elif isinstance(record.args, dict):
            record.args = {key: redact_private_keys(value) for key, value in record.args.items()}
        return True


def redact_private_keys(value: Any) -> Any:
    if isinstance(value, str) and "PRIVATE KEY" in value:
        return _PRIVATE_KEY_RE.sub(REDACTED, value)
    return value
