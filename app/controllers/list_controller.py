"""
Controlador de la lista - Niveles ordenados por ranking
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.dependencies import DataClient
from app.models.leaderboard import LoadError
from app.models.level import Level
from app.services.list_service import ListService, ListUnavailableError


router = APIRouter(prefix="/list", tags=["list"])


class LevelSlotResponse(BaseModel):
    """Posición de la lista: el nivel, o el error si no se pudo cargar."""
    rank: int
    path: Optional[str] = None
    level: Optional[Level] = None
    error: Optional[LoadError] = None


class ListResponse(BaseModel):
    levels: list[LevelSlotResponse]
    errors: list[LoadError]


@router.get("", response_model=ListResponse)
async def get_list(client: DataClient):
    """
    Obtener la lista completa en orden de ranking.

    Un nivel que no se pudo cargar ocupa su posición con el error correspondiente.
    """
    list_service = ListService(client)

    try:
        slots = await list_service.get_list()
    except ListUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )

    levels = []
    for idx, (level, err) in enumerate(slots):
        levels.append(LevelSlotResponse(
            rank=idx + 1,
            path=level.path if level else (err.path if err else None),
            level=level,
            error=err
        ))

    return ListResponse(
        levels=levels,
        errors=[err for _, err in slots if err is not None]
    )
