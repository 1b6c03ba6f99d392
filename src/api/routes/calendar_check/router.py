"""Diagnostico de acesso da service account ao calendario.

GET /api/calcheck le os metadados do calendario e uma amostra de eventos.
Falhas saem como `{ok: false, error}` com o status do upstream.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.bootstrap.clients import create_calendar_client
from app.infra.calendar.google_calendar_parsers import FALLBACK_ERROR_MESSAGE
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.use_cases.calendar import CheckCalendarUseCase
from config.settings import get_calendar_settings
from utils.errors import EventProxyError

logger = logging.getLogger(__name__)

router = APIRouter()

_COMPONENT = "calendar_check_route"


@router.get("/api/calcheck")
async def check_calendar(request: Request) -> JSONResponse:
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    try:
        use_case = CheckCalendarUseCase(
            settings=get_calendar_settings(),
            client_factory=create_calendar_client,
        )
        health = await use_case.execute()
        return JSONResponse(health.to_response())
    except EventProxyError as exc:
        logger.error(
            "calendar_check_failed",
            extra={
                "component": _COMPONENT,
                "result": "error",
                "status_code": exc.status_code,
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
        return JSONResponse({"ok": False, "error": str(exc)}, status_code=exc.status_code)
    except Exception:
        logger.exception(
            "calendar_check_unexpected_error",
            extra={"component": _COMPONENT, "correlation_id": get_correlation_id()},
        )
        return JSONResponse(
            {"ok": False, "error": FALLBACK_ERROR_MESSAGE},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    finally:
        reset_correlation_id(token)
