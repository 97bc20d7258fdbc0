"""
Dependencias reutilizables para routers (FastAPI Depends).

- Mantener esta capa delgada: sin lógica de negocio.
"""
import httpx
from fastapi import Request

from app.core.config import settings
from app.services.users_service import UsersService


def get_reqres_client(request: Request) -> httpx.AsyncClient:
    """Cliente HTTP compartido creado en el arranque de la app."""
    return request.app.state.reqres_client


def get_users_service(request: Request) -> UsersService:
    return UsersService(get_reqres_client(request), settings)
