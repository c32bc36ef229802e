from typing import Optional
from pydantic import BaseModel, Field

from app.models.pack import Pack


class Record(BaseModel):
    """Completion or progress of one user on a level"""

    user: str
    percent: float = Field(..., ge=0, le=100)  # 100 = completado
    link: str = ""

    hz: Optional[int] = None
    mobile: bool = False

    class Config:
        extra = "ignore"


class Level(BaseModel):
    """Nivel de la lista, tal y como viene en <path>.json"""

    path: str = ""  # se rellena al cargar, no viene en el JSON
    name: str
    verifier: str
    verification: str = ""
    records: list[Record] = []

    id: Optional[int] = None
    author: Optional[str] = None
    creators: list[str] = []
    percent_to_qualify: Optional[int] = Field(None, alias="percentToQualify")
    password: Optional[str] = None

    packs: list[Pack] = []  # packs que incluyen este nivel

    class Config:
        extra = "ignore"
        populate_by_name = True


class PackLevel(BaseModel):
    """Nivel resuelto dentro de un pack"""

    path: str
    level: Level
