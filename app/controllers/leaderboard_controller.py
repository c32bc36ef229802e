"""
Controlador de leaderboards - Endpoints de clasificación

El leaderboard se calcula en cada request a partir de la lista y los packs.
Los errores de carga de niveles se devuelven junto al resultado parcial.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from app.core.dependencies import AppSettings, DataClient
from app.models.leaderboard import LoadError, UserAggregate
from app.services.leaderboard_service import LeaderboardService, UserNotFoundError


router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


class LeaderboardEntryResponse(UserAggregate):
    """Entrada del leaderboard con su posición."""
    rank: int


class LeaderboardResponse(BaseModel):
    """Leaderboard con las entradas y los errores de carga."""
    entries: list[LeaderboardEntryResponse]
    errors: list[LoadError]


class UserPositionResponse(BaseModel):
    rank: int
    entry: LeaderboardEntryResponse


def _to_response(rank: int, entry: UserAggregate) -> LeaderboardEntryResponse:
    return LeaderboardEntryResponse(rank=rank, **entry.model_dump())


@router.get("", response_model=LeaderboardResponse)
async def get_leaderboard(
    client: DataClient,
    settings: AppSettings,
    limit: Optional[int] = Query(None, ge=1, description="Max number of entries")
):
    """
    Obtener el leaderboard completo.

    Si la lista no se puede cargar devuelve entries vacío y el error en errors.
    """
    leaderboard_service = LeaderboardService(client, settings)
    result = await leaderboard_service.get_leaderboard()

    entries = result.entries[:limit] if limit else result.entries

    return LeaderboardResponse(
        entries=[_to_response(idx + 1, e) for idx, e in enumerate(entries)],
        errors=result.errors
    )


@router.get("/user/{username}", response_model=UserPositionResponse)
async def get_user_position(
    username: str,
    client: DataClient,
    settings: AppSettings
):
    """
    Obtener la posición de un usuario (sin distinguir mayúsculas).
    """
    leaderboard_service = LeaderboardService(client, settings)

    try:
        result = await leaderboard_service.get_user_position(username)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return UserPositionResponse(
        rank=result["rank"],
        entry=_to_response(result["rank"], result["entry"])
    )
