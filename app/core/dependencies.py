"""
Dependencies de FastAPI para inyeccion del origen de datos y la configuracion
"""

from typing import Annotated

import httpx
from fastapi import Depends

from app.core.config import Settings, get_settings
from app.datasource import get_data_client


# Alias de tipos para que se vea mas limpio en los endpoints
DataClient = Annotated[httpx.AsyncClient, Depends(get_data_client)]
AppSettings = Annotated[Settings, Depends(get_settings)]
