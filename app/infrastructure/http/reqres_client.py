"""Cliente HTTP asíncrono para la API de ReqRes (directorio de usuarios).

Una instancia por aplicación: se crea en el arranque, se guarda en `app.state`
y se cierra al apagar. No guarda estado por petición, solo el pool de conexiones.
"""
import logging
from typing import Optional

import httpx

from app.core.config import Settings

_log = logging.getLogger("users_proxy.http")


def create_reqres_client(cfg: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Construye el `httpx.AsyncClient` con timeout y redirecciones configurados.

    `transport` permite inyectar un transporte alternativo (p. ej. `httpx.MockTransport` en tests).
    """
    _log.info(
        "Creando cliente ReqRes timeout=%ss max_redirects=%s",
        cfg.reqres_timeout_seconds,
        cfg.reqres_max_redirects,
    )
    return httpx.AsyncClient(
        timeout=httpx.Timeout(cfg.reqres_timeout_seconds),
        follow_redirects=True,
        max_redirects=cfg.reqres_max_redirects,
        transport=transport,
    )
