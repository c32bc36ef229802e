"""
🔌 Data Source - cliente HTTP hacia el directorio de datos de la lista

El directorio contiene `_list.json`, `_packlist.json`, `_editors.json`,
`_supporters.json` y un `<path>.json` por nivel.
"""

import logging
from typing import Optional

import httpx

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class DataSource:
    """Singleton para el cliente HTTP compartido"""

    client: Optional[httpx.AsyncClient] = None

    @classmethod
    async def connect(cls):
        """Abre el cliente con la URL base y el timeout configurados"""
        if cls.client is None:
            settings = get_settings()
            cls.client = httpx.AsyncClient(
                base_url=settings.data_url.rstrip("/") + "/",
                timeout=settings.request_timeout_seconds,
            )
            logger.info(f"✅ Data source ready: {settings.data_url}")

    @classmethod
    async def disconnect(cls):
        """Cierra el cliente"""
        if cls.client is not None:
            await cls.client.aclose()
            cls.client = None
            logger.info("❌ Data source closed")

    @classmethod
    def get_client(cls) -> httpx.AsyncClient:
        if cls.client is None:
            raise RuntimeError("Data source not connected. Call DataSource.connect() first.")
        return cls.client


# ============================================
# 🎯 DEPENDENCY para FastAPI
# ============================================

async def get_data_client() -> httpx.AsyncClient:
    """FastAPI dependency para inyectar el cliente del origen de datos"""
    return DataSource.get_client()
