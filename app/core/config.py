"""Configuración central de la aplicación (Pydantic Settings).

- Carga variables desde .env en la raíz del proyecto.
- Agrupa ajustes por área: App, Logging, CORS, ReqRes (API upstream de usuarios).
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resuelve el .env ubicado en la raíz del proyecto (independiente del CWD)
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

DEFAULT_REQRES_BASE_URL = "https://reqres.in/api"
DEFAULT_REQRES_API_KEY = "reqres-free-v1"


class Settings(BaseSettings):
    """Conjunto de variables de configuración con valores por defecto razonables.

    Nota: los valores pueden sobreescribirse vía variables de entorno (.env).
    """
    # App
    app_name: str = "Users Proxy API"
    api_prefix: str = ""

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_any: bool = False  # Permite todos los orígenes (usa con cuidado)

    # ReqRes (directorio de usuarios upstream)
    reqres_base_url: str = DEFAULT_REQRES_BASE_URL
    reqres_api_key: str = DEFAULT_REQRES_API_KEY
    # Debe cubrir el `delay` artificial que pida el cliente
    reqres_timeout_seconds: float = 10.0
    reqres_max_redirects: int = 5

    @field_validator("reqres_base_url", mode="before")
    @classmethod
    def _base_url_or_default(cls, v):
        # Variable vacía -> valor por defecto; sin '/' final
        v = (v or "").strip() or DEFAULT_REQRES_BASE_URL
        return v.rstrip("/")

    @field_validator("reqres_api_key", mode="before")
    @classmethod
    def _api_key_or_default(cls, v):
        return (v or "").strip() or DEFAULT_REQRES_API_KEY

    # --- Utilidades derivadas / helpers ---
    @property
    def api_prefix_normalized(self) -> str:
        """Devuelve `api_prefix` con formato consistente.

        - Siempre inicia con '/'
        - Sin '/' final (excepto cuando es solo '/')
        - Si está vacío, devuelve ""
        """
        pref = (self.api_prefix or "").strip()
        if not pref:
            return ""
        if not pref.startswith('/'):
            pref = '/' + pref
        if len(pref) > 1 and pref.endswith('/'):
            pref = pref[:-1]
        return pref

    @property
    def reqres_users_url(self) -> str:
        return f"{self.reqres_base_url}/users"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # no fallar si hay variables no usadas
    )


settings = Settings()
