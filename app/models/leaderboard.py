from typing import Optional
from pydantic import BaseModel

from app.models.pack import Pack


class LoadError(BaseModel):
    """Error al cargar la lista o un nivel concreto"""

    message: str
    rank: Optional[int] = None  # 1-indexed
    path: Optional[str] = None


class ScoreEntry(BaseModel):
    """Puntos que un nivel aporta a un usuario"""

    rank: int
    level: str
    score: float
    link: str
    path: str


class ProgressEntry(ScoreEntry):
    """Progreso parcial (percent < 100)"""

    percent: float


class UserAggregate(BaseModel):
    """Entrada en la tabla de clasificación (resultado agregado)"""

    user: str
    total: float = 0.0
    pack_bonus: float = 0.0

    verified: list[ScoreEntry] = []
    completed: list[ScoreEntry] = []
    progressed: list[ProgressEntry] = []
    packs: list[Pack] = []


class LeaderboardResult(BaseModel):
    entries: list[UserAggregate]
    errors: list[LoadError]
