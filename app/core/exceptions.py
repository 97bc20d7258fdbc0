"""
Global exception handlers for consistent API errors.

Every error leaves the API as ``{"statusCode": int, "message": str}`` plus
``request_id`` when the request carries one.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class UpstreamError(Exception):
    """Error ya traducido a un par (status, mensaje) visible para el cliente."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __repr__(self) -> str:
        return f"UpstreamError(status_code={self.status_code!r}, message={self.message!r})"


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _error_body(request: Request, status_code: int, message: str) -> Dict[str, Any]:
    body: Dict[str, Any] = {"statusCode": status_code, "message": message}
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("users_proxy.errors")

    @app.exception_handler(UpstreamError)
    async def _upstream_handler(request: Request, exc: UpstreamError):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(request, exc.status_code, exc.message),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        body = _error_body(request, exc.status_code, exc.detail or "HTTP error")
        return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        body = _error_body(request, 400, "Validation error")
        body["errors"] = jsonable_encoder(exc.errors())
        return JSONResponse(status_code=400, content=body)

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        rid = _req_id(request)
        log.exception("Unhandled error request_id=%s", rid)
        return JSONResponse(status_code=500, content=_error_body(request, 500, "Internal server error"))
