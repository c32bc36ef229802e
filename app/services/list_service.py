import logging
from typing import Any

import httpx

from app.models.leaderboard import LoadError
from app.models.level import PackLevel
from app.models.pack import Pack
from app.repositories.list_repository import ListRepository, LevelSlot, PackLevelSlot

logger = logging.getLogger(__name__)


class ListServiceError(Exception):
    pass


class ListUnavailableError(ListServiceError):
    """The list data (or one of its index files) could not be loaded."""
    pass


class PackNotFoundError(ListServiceError):
    pass


class ListService:
    def __init__(self, client: httpx.AsyncClient):
        self.list_repo = ListRepository(client)

    async def get_list(self) -> list[LevelSlot]:
        """Get the ranked list with one slot per level (level or error)."""
        levels = await self.list_repo.fetch_list()
        if levels is None:
            raise ListUnavailableError("Failed to load list")
        return levels

    async def get_packs(self) -> list[Pack]:
        packs = await self.list_repo.fetch_packs()
        if packs is None:
            raise ListUnavailableError("Failed to load packs")
        return packs

    async def get_pack(self, name: str) -> Pack:
        for pack in await self.get_packs():
            if pack.name == name:
                return pack

        logger.warning(f"Pack not found: {name}")
        raise PackNotFoundError(f"Pack {name} not found")

    async def get_pack_levels(self, name: str) -> tuple[Pack, list[PackLevel], list[LoadError]]:
        """
        Get the levels of a pack, split into loaded levels and load errors.

        Raises PackNotFoundError if no pack has that name.
        """
        pack = await self.get_pack(name)
        slots: list[PackLevelSlot] = await self.list_repo.fetch_pack_levels(pack)

        levels = [level for level, _ in slots if level is not None]
        errors = [err for _, err in slots if err is not None]
        return pack, levels, errors

    async def get_editors(self) -> Any:
        editors = await self.list_repo.fetch_editors()
        if editors is None:
            raise ListUnavailableError("Failed to load editors")
        return editors

    async def get_supporters(self) -> Any:
        supporters = await self.list_repo.fetch_supporters()
        if supporters is None:
            raise ListUnavailableError("Failed to load supporters")
        return supporters
