"""Converte o corpo JSON recebido em EventRequest."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.calendar_event import EventRequest
from utils.errors import ValidationFailedError

if TYPE_CHECKING:
    from starlette.requests import Request


async def read_json_body(request: Request) -> Any:
    """Le o corpo como JSON; corpo vazio ou invalido vira None."""
    raw_body = await request.body()
    if not raw_body:
        return None
    try:
        return json.loads(raw_body)
    except (UnicodeDecodeError, ValueError):
        return None


def parse_event_request(payload: dict[str, Any]) -> EventRequest:
    """Valida tipos do corpo ja aprovado pelo gatekeeper.

    Raises:
        ValidationFailedError: Campo com tipo incompativel.
    """
    try:
        return EventRequest.model_validate(payload)
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        raise ValidationFailedError(f"Invalid fields: {', '.join(fields)}") from exc
