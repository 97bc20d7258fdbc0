"""Servicio de usuarios: passthrough hacia la API de ReqRes.

Normaliza los parámetros (defaults), hace una sola llamada GET a
`{base_url}/users` con la cabecera `x-api-key` y traduce los fallos a
`UpstreamError`:

- 4xx de upstream -> mismo status y mensaje de upstream.
- 5xx, otro status no-2xx, red caída o timeout -> 502.
- Cualquier otro error -> 500 con mensaje genérico.

Sin reintentos ni caché.
"""
import logging
from typing import Any, Dict, Optional

import httpx
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_502_BAD_GATEWAY,
)

from app.api.schemas.users import GetUsersQuery
from app.core.config import Settings
from app.core.exceptions import UpstreamError

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 6

UPSTREAM_FAILURE_MESSAGE = "Failed to fetch users from upstream API"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

_log = logging.getLogger("users_proxy.users")


def build_params(query: GetUsersQuery) -> Dict[str, int]:
    """Arma la query upstream; `delay` solo viaja si el cliente lo envió."""
    params = {
        "page": query.page or DEFAULT_PAGE,
        "per_page": query.per_page or DEFAULT_PER_PAGE,
    }
    if query.delay is not None:
        params["delay"] = query.delay
    return params


def _upstream_message(response: Optional[httpx.Response]) -> Optional[str]:
    """Extrae `message` (o `error`, formato habitual de ReqRes) del cuerpo JSON."""
    if response is None:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    msg = data.get("message") or data.get("error")
    return str(msg) if msg else None


class UsersService:
    """Cliente de dominio para el listado paginado de usuarios.

    Lee `reqres_base_url`, `reqres_api_key` y `reqres_timeout_seconds` una sola
    vez al construirse.
    """

    def __init__(self, client: httpx.AsyncClient, cfg: Settings) -> None:
        self._client = client
        self._users_url = cfg.reqres_users_url
        self._api_key = cfg.reqres_api_key
        self._timeout = cfg.reqres_timeout_seconds

    async def get_users(self, query: GetUsersQuery) -> Dict[str, Any]:
        params = build_params(query)
        # timeout base + delay pedido al upstream
        timeout = httpx.Timeout(self._timeout + (query.delay or 0))
        _log.info(
            "Fetching users from ReqRes API: %s",
            ", ".join(f"{k}={v}" for k, v in params.items()),
        )
        try:
            response = await self._client.get(
                self._users_url,
                params=params,
                headers={"x-api-key": self._api_key},
                timeout=timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e) from e
        except httpx.RequestError as e:
            raise self._transport_error(e) from e
        except Exception as e:
            _log.exception("Unexpected error while fetching users")
            raise UpstreamError(HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE) from e

        try:
            return response.json()
        except ValueError as e:
            _log.error("ReqRes API error: invalid JSON body (status: %s)", response.status_code)
            raise UpstreamError(HTTP_502_BAD_GATEWAY, "Invalid JSON from upstream API") from e

    def _status_error(self, e: httpx.HTTPStatusError) -> UpstreamError:
        status = e.response.status_code
        message = _upstream_message(e.response) or f"Request failed with status code {status}"
        _log.error("ReqRes API error: %s (status: %s)", message, status)
        if HTTP_400_BAD_REQUEST <= status < HTTP_500_INTERNAL_SERVER_ERROR:
            return UpstreamError(status, message)
        return UpstreamError(HTTP_502_BAD_GATEWAY, message)

    def _transport_error(self, e: httpx.RequestError) -> UpstreamError:
        message = str(e) or UPSTREAM_FAILURE_MESSAGE
        _log.error(
            "ReqRes API error: %s (status: %s, %s)",
            message, HTTP_502_BAD_GATEWAY, type(e).__name__,
        )
        return UpstreamError(HTTP_502_BAD_GATEWAY, message)
