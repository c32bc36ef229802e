"""
Entry point de la API
"""

import logging
import re
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import get_settings
from app.datasource import DataSource

from app.controllers.health_controller import router as health_router
from app.controllers.list_controller import router as list_router
from app.controllers.leaderboard_controller import router as leaderboard_router
from app.controllers.packs_controller import router as packs_router
from app.controllers.staff_controller import router as staff_router

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Parse CORS origins
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",")]
CORS_ORIGIN_REGEX = re.compile(settings.cors_origin_regex) if settings.cors_origin_regex else None


def is_allowed_origin(origin: str) -> bool:
    """Check if origin is allowed by explicit list or regex pattern."""
    if not origin:
        return False
    if origin in CORS_ORIGINS:
        return True
    if CORS_ORIGIN_REGEX and CORS_ORIGIN_REGEX.match(origin):
        return True
    return False


class CORSMiddleware(BaseHTTPMiddleware):
    """
    CORS middleware for a read-only API: answers OPTIONS preflight before
    routing and tags GET responses for allowed origins.
    """

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "")

        if request.method == "OPTIONS":
            if not is_allowed_origin(origin):
                return Response(status_code=403, content="Origin not allowed")
            return Response(
                status_code=200,
                headers={
                    "Access-Control-Allow-Origin": origin,
                    "Access-Control-Allow-Methods": "GET, OPTIONS",
                    "Access-Control-Allow-Headers": "Content-Type, Accept, Origin",
                    "Access-Control-Max-Age": "86400",
                }
            )

        response = await call_next(request)

        if is_allowed_origin(origin):
            response.headers["Access-Control-Allow-Origin"] = origin

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await DataSource.connect()
    yield
    await DataSource.disconnect()

# Creo la app
app = FastAPI(
    title="List Leaderboard API",
    description="Lista de niveles por ranking, packs y leaderboard de jugadores",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(CORSMiddleware)

app.include_router(health_router)
app.include_router(list_router)
app.include_router(leaderboard_router)
app.include_router(packs_router)
app.include_router(staff_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "List Leaderboard API",
        "version": "1.0.0",
        "docs": "/docs"
    }
