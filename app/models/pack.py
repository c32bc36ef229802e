from typing import Optional
from pydantic import BaseModel


class Pack(BaseModel):
    """Grupo de niveles que da bonus al completarlos todos"""

    name: str
    levels: list[str]  # paths requeridos
    colour: Optional[str] = None

    class Config:
        extra = "ignore"
