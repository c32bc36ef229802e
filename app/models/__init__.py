from .pack import Pack
from .level import Level, Record, PackLevel
from .leaderboard import (
    LoadError,
    ScoreEntry,
    ProgressEntry,
    UserAggregate,
    LeaderboardResult,
)

__all__ = [
    "Pack",
    "Level",
    "Record",
    "PackLevel",
    "LoadError",
    "ScoreEntry",
    "ProgressEntry",
    "UserAggregate",
    "LeaderboardResult",
]
