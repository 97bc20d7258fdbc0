"""
Configuración de logging para la aplicación e integración con Uvicorn.
"""
import logging


def setup_logging(level: str = "INFO") -> None:
    lvl = getattr(logging, (level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "users_proxy"):
        logging.getLogger(name).setLevel(lvl)
    # httpx registra cada petición en INFO; basta con nuestro propio log
    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
