"""
Controlador de staff - Editores y supporters de la lista

Se devuelven tal cual vienen en _editors.json y _supporters.json.
"""

from fastapi import APIRouter, HTTPException, status

from app.core.dependencies import DataClient
from app.services.list_service import ListService, ListUnavailableError


router = APIRouter(tags=["staff"])


@router.get("/editors")
async def get_editors(client: DataClient):
    list_service = ListService(client)

    try:
        return await list_service.get_editors()
    except ListUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )


@router.get("/supporters")
async def get_supporters(client: DataClient):
    list_service = ListService(client)

    try:
        return await list_service.get_supporters()
    except ListUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )
