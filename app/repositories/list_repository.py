"""
ListRepository - HTTP access to the list data directory.

Nothing here raises for bad data: whole-file failures are logged and come
back as None, per-level failures come back as (None, LoadError) slots.
"""

import asyncio
import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from app.models.level import Level, PackLevel
from app.models.leaderboard import LoadError
from app.models.pack import Pack

logger = logging.getLogger(__name__)

LIST_FILE = "_list.json"
PACKLIST_FILE = "_packlist.json"
EDITORS_FILE = "_editors.json"
SUPPORTERS_FILE = "_supporters.json"

LevelSlot = tuple[Optional[Level], Optional[LoadError]]
PackLevelSlot = tuple[Optional[PackLevel], Optional[LoadError]]


class DataSourceError(Exception):
    """A file could not be fetched or decoded."""
    pass


class ListRepository:
    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def _get_json(self, filename: str) -> Any:
        try:
            response = await self.client.get(filename)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise DataSourceError(f"{filename}: {e}") from e

    async def _load_level(self, path: str) -> Level:
        data = await self._get_json(f"{path}.json")
        try:
            return Level.model_validate({**data, "path": path})
        except (ValidationError, TypeError) as e:
            raise DataSourceError(f"{path}.json: {e}") from e

    async def fetch_list(self) -> Optional[list[LevelSlot]]:
        """
        Get every level of the list, in rank order.

        Returns None if `_list.json` or `_packlist.json` can't be loaded.
        Levels are fetched concurrently; each one is annotated with the packs
        that contain it and its records sorted by percent (highest first).
        """
        try:
            paths = await self._get_json(LIST_FILE)
            if not isinstance(paths, list):
                raise DataSourceError(f"{LIST_FILE}: expected a list of paths")
            packs = [Pack.model_validate(p) for p in await self._get_json(PACKLIST_FILE)]
        except (DataSourceError, ValidationError, TypeError) as e:
            logger.error(f"❌ Failed to load {LIST_FILE} or {PACKLIST_FILE}: {e}")
            return None

        async def load(rank: int, path: str) -> LevelSlot:
            try:
                level = await self._load_level(path)
            except DataSourceError as e:
                logger.error(f"❌ Failed to load level #{rank + 1} ({path}.json): {e}")
                return None, LoadError(message=str(e), rank=rank + 1, path=path)

            level.packs = [pack for pack in packs if path in pack.levels]
            level.records = sorted(level.records, key=lambda r: r.percent, reverse=True)
            return level, None

        return list(await asyncio.gather(*(load(rank, path) for rank, path in enumerate(paths))))

    async def fetch_packs(self) -> Optional[list[Pack]]:
        try:
            return [Pack.model_validate(p) for p in await self._get_json(PACKLIST_FILE)]
        except (DataSourceError, ValidationError, TypeError) as e:
            logger.error(f"❌ Failed to load {PACKLIST_FILE}: {e}")
            return None

    async def fetch_pack_levels(self, pack: Pack) -> list[PackLevelSlot]:
        """Get the levels of a pack, in the pack's order."""

        async def load(index: int, path: str) -> PackLevelSlot:
            try:
                level = await self._load_level(path)
            except DataSourceError as e:
                logger.error(f"❌ Failed to load level #{index + 1} of pack {pack.name} ({path}): {e}")
                return None, LoadError(message=str(e), rank=index + 1, path=path)
            return PackLevel(path=path, level=level), None

        return list(await asyncio.gather(*(load(i, path) for i, path in enumerate(pack.levels))))

    async def fetch_editors(self) -> Optional[Any]:
        try:
            return await self._get_json(EDITORS_FILE)
        except DataSourceError as e:
            logger.error(f"❌ Failed to load {EDITORS_FILE}: {e}")
            return None

    async def fetch_supporters(self) -> Optional[Any]:
        try:
            return await self._get_json(SUPPORTERS_FILE)
        except DataSourceError as e:
            logger.error(f"❌ Failed to load {SUPPORTERS_FILE}: {e}")
            return None
