"""
Esquemas Pydantic para `/users` (passthrough hacia ReqRes).

Reglas clave:
- Parámetros de entrada en camelCase (`perPage`), hacia upstream en snake_case (`per_page`).
- La respuesta upstream se reenvía sin modificar; estos modelos documentan su forma.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GetUsersQuery(BaseModel):
    """Parámetros de consulta ya validados; `None` significa "no enviado"."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    page: Optional[int] = Field(default=None, ge=1)
    per_page: Optional[int] = Field(default=None, ge=1, le=100, alias="perPage")
    delay: Optional[int] = Field(default=None, ge=0, le=60)  # segundos


class User(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    avatar: str


class Support(BaseModel):
    url: str
    text: str


class PaginatedUsersResponse(BaseModel):
    """Sobre de paginación tal como lo devuelve ReqRes."""
    model_config = ConfigDict(extra="allow")

    page: int
    per_page: int
    total: int
    total_pages: int
    data: List[User]
    support: Optional[Support] = None


class ErrorOut(BaseModel):
    statusCode: int
    message: str
    request_id: Optional[str] = None
