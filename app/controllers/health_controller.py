"""
Controlador de salud - Endpoint de comprobación del servicio
"""

from fastapi import APIRouter
from pydantic import BaseModel

from app.datasource import DataSource


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    data_source: str


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Endpoint de verificación de estado.

    Comprueba que la API esté en funcionamiento y que el cliente del origen de datos esté abierto.
    """
    data_source_status = "connected" if DataSource.client is not None else "disconnected"

    return HealthResponse(
        status="ok",
        data_source=data_source_status
    )
