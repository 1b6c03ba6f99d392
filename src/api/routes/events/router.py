"""Endpoint de criacao de eventos chamado pelo frontend.

Endpoints:
- OPTIONS /api/events: preflight, 204 sem corpo
- GET /api/events: sonda de vida, sem chamada ao upstream
- POST /api/events: cria o evento no calendario remoto

Fluxo do POST:
1. Gatekeeper: metodo, origem, campos obrigatorios
2. Normalizacao de datas e recorrencia
3. Uma chamada `events.insert`, sem retry

Erros saem como texto puro com o status mapeado.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.normalizers.events import parse_event_request, read_json_body
from api.validators.events import build_cors_headers, check_method, require_event_fields
from app.bootstrap.clients import create_calendar_client
from app.infra.calendar.google_calendar_parsers import FALLBACK_ERROR_MESSAGE
from app.observability import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.use_cases.calendar import CreateCalendarEventUseCase
from config.settings import get_calendar_settings, get_cors_settings
from utils.errors import EventProxyError, MethodNotAllowedError

logger = logging.getLogger(__name__)

router = APIRouter()

EVENTS_ROUTE = "/api/events"
EVENTS_ROUTE_VERSION = 3

_COMPONENT = "events_route"
_ACCEPTED_METHODS = ["GET", "POST", "OPTIONS", "PUT", "PATCH", "DELETE", "HEAD"]


@router.api_route(EVENTS_ROUTE, methods=_ACCEPTED_METHODS, response_model=None)
async def handle_events(request: Request) -> Response:
    """Ponto unico de tratamento: nenhuma falha atravessa este handler."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    cors_headers = build_cors_headers(request.headers.get("origin"), get_cors_settings())
    try:
        return await _dispatch(request, cors_headers)
    except EventProxyError as exc:
        _log_failure(exc)
        return PlainTextResponse(str(exc), status_code=exc.status_code, headers=cors_headers)
    except Exception:
        logger.exception(
            "calendar_event_unexpected_error",
            extra={"component": _COMPONENT, "correlation_id": get_correlation_id()},
        )
        return PlainTextResponse(
            FALLBACK_ERROR_MESSAGE,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=cors_headers,
        )
    finally:
        reset_correlation_id(token)


async def _dispatch(request: Request, cors_headers: dict[str, str]) -> Response:
    action = check_method(request.method)
    if action == "preflight":
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=cors_headers)
    if action == "status":
        return JSONResponse(
            {"ok": True, "route": EVENTS_ROUTE, "version": EVENTS_ROUTE_VERSION},
            headers=cors_headers,
        )

    payload = require_event_fields(await read_json_body(request))
    event_request = parse_event_request(payload)
    use_case = CreateCalendarEventUseCase(
        settings=get_calendar_settings(),
        client_factory=create_calendar_client,
    )
    created = await use_case.execute(event_request)

    logger.info(
        "calendar_event_created",
        extra={
            "component": _COMPONENT,
            "result": "ok",
            "recurring": bool(event_request.recurrence),
            "correlation_id": get_correlation_id(),
        },
    )
    return JSONResponse(created.to_response(), headers=cors_headers)


def _log_failure(exc: EventProxyError) -> None:
    extra = {
        "component": _COMPONENT,
        "result": "rejected" if exc.status_code < 500 else "error",
        "status_code": exc.status_code,
        "error_type": type(exc).__name__,
        "correlation_id": get_correlation_id(),
    }
    if exc.status_code < 500:
        logger.warning("calendar_event_request_rejected", extra=extra)
        return
    logger.error("calendar_event_create_failed", extra=extra)


async def method_not_allowed_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> Response:
    """Responde 405 em texto puro para metodos que nem chegam ao handler.

    O roteador rejeita metodos fora de `_ACCEPTED_METHODS` (TRACE, CONNECT,
    metodos customizados) antes de `handle_events`; demais erros HTTP
    seguem o tratamento padrao do FastAPI.
    """
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED or request.url.path != EVENTS_ROUTE:
        return await http_exception_handler(request, exc)
    rejection = MethodNotAllowedError(request.method)
    _log_failure(rejection)
    return PlainTextResponse(
        str(rejection),
        status_code=rejection.status_code,
        headers=build_cors_headers(request.headers.get("origin"), get_cors_settings()),
    )
