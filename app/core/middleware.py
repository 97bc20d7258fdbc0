"""
Middlewares de aplicación: request id, logging por petición y CORS.
"""
import logging
import re
import time
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings

REQUEST_ID_HEADER = "X-Request-Id"
# Ids entrantes aceptados tal cual; el resto se reemplaza por uno generado
_VALID_REQUEST_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _incoming_request_id(request: Request) -> str | None:
    rid = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
    return rid if _VALID_REQUEST_ID.match(rid) else None


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Propaga el id del cliente o genera uno; se devuelve siempre en la respuesta."""

    async def dispatch(self, request: Request, call_next):
        rid = _incoming_request_id(request) or uuid.uuid4().hex
        request.state.request_id = rid
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: FastAPI) -> None:
        super().__init__(app)
        self.log = logging.getLogger("users_proxy.request")

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            dt_ms = int((time.perf_counter() - start) * 1000)
            rid = getattr(request.state, "request_id", None)
            self.log.info(
                "method=%s path=%s status=%s latency_ms=%s request_id=%s",
                request.method, request.url.path, status, dt_ms, rid,
            )


def _cors_options() -> dict:
    # Solo lectura: el proxy expone únicamente GET
    if settings.cors_allow_any:
        # Orígenes dinámicos sin credenciales (requisito de CORS con comodín)
        return dict(
            allow_origins=[],
            allow_origin_regex=".*",
            allow_credentials=False,
            allow_methods=["GET", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=[REQUEST_ID_HEADER],
        )
    return dict(
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )


def add_middlewares(app: FastAPI) -> None:
    app.add_middleware(CORSMiddleware, **_cors_options())
    # Starlette ejecuta el último añadido primero: LoggingMiddleware envuelve a
    # RequestIdMiddleware y ve el request_id ya asignado al terminar.
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(LoggingMiddleware)
