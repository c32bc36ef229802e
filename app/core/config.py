"""
Configuración de la app cargada desde variables de entorno (.env)

Todo lo que varía entre desarrollo/producción va aquí
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Origen de datos - directorio con _list.json, _packlist.json y un JSON por nivel
    data_url: str = "http://localhost:8080/data"
    request_timeout_seconds: float = 10.0  # Timeout por request al origen de datos

    # Puntuación
    pack_multiplier: float = 1.5  # Multiplicador aplicado a los niveles de un pack completado
    score_max: float = 250.0  # Puntos del nivel #1
    score_min: float = 15.0  # Puntos del último nivel de la lista

    # App
    app_env: str = "development"  # o "production"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - de dónde pueden venir los requests
    cors_origins: str = "http://localhost:3000"  # URLs separadas por coma
    cors_origin_regex: Optional[str] = None  # ej: "https://.*\.example\.com"; sin valor no se aplica

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora campos extras del .env que no estén en el modelo


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return Settings()
