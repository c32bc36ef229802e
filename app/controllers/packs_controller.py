"""
Controlador de packs - Grupos de niveles con bonus
"""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.dependencies import DataClient
from app.models.leaderboard import LoadError
from app.models.level import PackLevel
from app.models.pack import Pack
from app.services.list_service import ListService, ListUnavailableError, PackNotFoundError


router = APIRouter(prefix="/packs", tags=["packs"])


class PackLevelsResponse(BaseModel):
    """Pack con sus niveles cargados y los errores de carga."""
    pack: Pack
    levels: list[PackLevel]
    errors: list[LoadError]


@router.get("", response_model=list[Pack])
async def get_packs(client: DataClient):
    """
    Obtener todos los packs.
    """
    list_service = ListService(client)

    try:
        return await list_service.get_packs()
    except ListUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )


@router.get("/{name}/levels", response_model=PackLevelsResponse)
async def get_pack_levels(name: str, client: DataClient):
    """
    Obtener los niveles de un pack por nombre.
    """
    list_service = ListService(client)

    try:
        pack, levels, errors = await list_service.get_pack_levels(name)
    except PackNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except ListUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )

    return PackLevelsResponse(pack=pack, levels=levels, errors=errors)
