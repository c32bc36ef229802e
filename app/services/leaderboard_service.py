"""
LeaderboardService - Calculates the leaderboard from the list data.

The leaderboard is computed on every request from the level list and the
pack list; nothing is stored.

Scoring:
- Verifying a level and completing it (100%) give the level's rank score
- Progress (< 100%) also gives the full rank score; percent is informational
- Completing every level of a pack multiplies those levels' scores by the
  pack multiplier
"""

import logging
from functools import partial
from typing import Callable, Optional, Sequence

import httpx

from app.core.config import get_settings, Settings
from app.models.leaderboard import (
    LeaderboardResult,
    LoadError,
    ProgressEntry,
    ScoreEntry,
    UserAggregate,
)
from app.models.pack import Pack
from app.repositories.list_repository import ListRepository, LevelSlot
from app.services.score_service import compute_score_curve, round_score

logger = logging.getLogger(__name__)

DEFAULT_PACK_MULTIPLIER = 1.5
LIST_FAILED_MESSAGE = "Failed to load list"


class LeaderboardServiceError(Exception):
    """Base exception for leaderboard service errors."""
    pass


class UserNotFoundError(LeaderboardServiceError):
    """Raised when a user has no entry in the leaderboard."""
    pass


def _find_score(entries: Sequence[ScoreEntry], path: str) -> Optional[float]:
    """Score of the first entry for `path`, or None if the user has none."""
    for entry in entries:
        if entry.path == path:
            return entry.score
    return None


def aggregate_leaderboard(
    levels: Optional[Sequence[LevelSlot]],
    packs: Sequence[Pack],
    *,
    pack_multiplier: float = DEFAULT_PACK_MULTIPLIER,
    score_curve: Callable[[int], Sequence[float]] = compute_score_curve,
) -> tuple[list[UserAggregate], list[LoadError]]:
    """
    Build the leaderboard from the ranked level slots and the pack list.

    `levels` is None when the list itself couldn't be loaded. Failed slots
    still take up a rank, so the score of every other level is unchanged.

    Returns the users sorted by total (descending, ties in first-seen order)
    and the load errors found on the way.
    """
    if levels is None:
        return [], [LoadError(message=LIST_FAILED_MESSAGE)]

    score_lookup = score_curve(len(levels))
    errors: list[LoadError] = []

    # lowercased username -> aggregate; the aggregate keeps the first-seen casing
    users: dict[str, UserAggregate] = {}

    def user_for(name: str) -> UserAggregate:
        key = name.lower()
        if key not in users:
            users[key] = UserAggregate(user=name)
        return users[key]

    for rank, (level, err) in enumerate(levels):
        if err is not None or level is None:
            errors.append(err or LoadError(message=f"Unknown error at rank {rank + 1}", rank=rank + 1))
            continue

        score = score_lookup[rank]

        user_for(level.verifier).verified.append(ScoreEntry(
            rank=rank + 1,
            level=level.name,
            score=score,
            link=level.verification,
            path=level.path,
        ))

        for record in level.records:
            aggregate = user_for(record.user)
            if record.percent == 100:
                aggregate.completed.append(ScoreEntry(
                    rank=rank + 1,
                    level=level.name,
                    score=score,
                    link=record.link,
                    path=level.path,
                ))
            else:
                aggregate.progressed.append(ProgressEntry(
                    rank=rank + 1,
                    level=level.name,
                    percent=record.percent,
                    score=score,
                    link=record.link,
                    path=level.path,
                ))

    for aggregate in users.values():
        # Only full completions count towards packs
        cleared = aggregate.verified + aggregate.completed
        cleared_paths = {entry.path for entry in cleared}
        aggregate.packs = [
            pack for pack in packs
            if all(path in cleared_paths for path in pack.levels)
        ]

        pack_score = 0.0
        for pack in aggregate.packs:
            for path in pack.levels:
                level_score = _find_score(cleared, path)
                if level_score is not None:
                    pack_score += level_score

        total_without_bonus = sum(
            entry.score
            for entry in cleared + aggregate.progressed
        )
        total = total_without_bonus - pack_score + pack_score * pack_multiplier

        aggregate.total = round_score(total)
        aggregate.pack_bonus = round_score(total - total_without_bonus)

    # sorted() is stable, so equal totals keep first-seen order
    entries = sorted(users.values(), key=lambda x: x.total, reverse=True)
    return entries, errors


class LeaderboardService:
    def __init__(self, client: httpx.AsyncClient, settings: Optional[Settings] = None):
        self.list_repo = ListRepository(client)
        self.settings = settings or get_settings()

    async def get_leaderboard(self) -> LeaderboardResult:
        """
        Compute the full leaderboard.

        Never raises for data problems: a missing list comes back as an empty
        leaderboard with a single error.
        """
        levels = await self.list_repo.fetch_list()
        packs = await self.list_repo.fetch_packs() if levels is not None else None
        if packs is None:
            levels = None

        entries, errors = aggregate_leaderboard(
            levels,
            packs or [],
            pack_multiplier=self.settings.pack_multiplier,
            score_curve=partial(
                compute_score_curve,
                max_score=self.settings.score_max,
                min_score=self.settings.score_min,
            ),
        )

        if errors:
            logger.warning(f"⚠️ Leaderboard computed with {len(errors)} load error(s)")

        return LeaderboardResult(entries=entries, errors=errors)

    async def get_user_position(self, username: str) -> dict:
        """
        Get a user's rank in the leaderboard (case-insensitive).

        Returns dict with rank (1-indexed) and the entry.
        """
        result = await self.get_leaderboard()

        for idx, entry in enumerate(result.entries):
            if entry.user.lower() == username.lower():
                return {
                    "rank": idx + 1,
                    "entry": entry
                }

        raise UserNotFoundError(f"User {username} not found in leaderboard")
