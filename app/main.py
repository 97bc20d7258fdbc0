"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
import logging

from fastapi import FastAPI

from app.core.config import settings
from app.api.router import api_router
from app.core.logging import setup_logging
from app.core.middleware import add_middlewares
from app.core.exceptions import register_exception_handlers
from app.infrastructure.http.reqres_client import create_reqres_client

_log = logging.getLogger("users_proxy.startup")

setup_logging(settings.log_level)
app = FastAPI(title=settings.app_name)

add_middlewares(app)
register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    app.state.reqres_client = create_reqres_client(settings)
    _log.info("ReqRes upstream: %s", settings.reqres_users_url)


@app.on_event("shutdown")
async def on_shutdown():
    client = getattr(app.state, "reqres_client", None)
    if client is not None:
        await client.aclose()


# Monta routers bajo el prefijo configurado
app.include_router(api_router, prefix=settings.api_prefix_normalized)
