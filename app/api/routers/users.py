"""
Endpoints para `/users`: listado paginado reenviado a ReqRes.

La API delega en `services/users_service.py`; los errores salen como
`UpstreamError` y los traduce el handler global.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_users_service
from app.api.schemas.users import ErrorOut, GetUsersQuery, PaginatedUsersResponse
from app.services.users_service import UsersService

router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=None,
    responses={
        200: {"model": PaginatedUsersResponse, "description": "Respuesta de ReqRes sin modificar"},
        400: {"model": ErrorOut, "description": "Parámetros inválidos"},
        404: {"model": ErrorOut, "description": "Error 4xx propagado desde ReqRes"},
        500: {"model": ErrorOut, "description": "Error inesperado"},
        502: {"model": ErrorOut, "description": "ReqRes caído o con error 5xx"},
    },
    summary="Listar usuarios",
    description="Obtiene una página de usuarios desde ReqRes (page, perPage y delay opcionales).",
)
async def get_users(
    page: Optional[int] = Query(default=None, ge=1),
    per_page: Optional[int] = Query(default=None, ge=1, le=100, alias="perPage"),
    delay: Optional[int] = Query(default=None, ge=0, le=60),
    service: UsersService = Depends(get_users_service),
) -> Dict[str, Any]:
    query = GetUsersQuery(page=page, per_page=per_page, delay=delay)
    return await service.get_users(query)
