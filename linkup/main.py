"""Application entry point for the FastAPI backend."""
from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import get_settings
from .database import dispose_engine, init_db
from .exception_handlers import install_exception_handlers
from .middleware import RequestLogMiddleware
from .routers import (
    auth_router,
    comments_router,
    friends_router,
    moderation_router,
    posts_router,
    search_router,
    stories_router,
    uploads_router,
    users_router,
)

logger = logging.getLogger(__name__)

settings = get_settings()
APP_NAME = settings.app_name
API_VERSION = settings.api_version
API_PREFIX = "/api"

app = FastAPI(title=APP_NAME, version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLogMiddleware, path_prefixes=[API_PREFIX])

install_exception_handlers(app)

for router in (
    auth_router,
    posts_router,
    comments_router,
    users_router,
    friends_router,
    stories_router,
    search_router,
    uploads_router,
    moderation_router,
):
    app.include_router(router, prefix=API_PREFIX)


def _mount_static(directory: Path, route: str, name: str) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    app.mount(route, StaticFiles(directory=str(directory), check_dir=False), name=name)


@app.on_event("startup")
async def _startup() -> None:
    """Ensure the database schema exists before serving."""

    try:
        init_db()
    except Exception:  # pragma: no cover - best effort logging
        logger.exception("Database initialisation failed")
        raise
    logger.info("%s %s ready", APP_NAME, API_VERSION)


@app.on_event("shutdown")
async def _shutdown() -> None:
    dispose_engine()


@app.get(API_PREFIX, tags=["system"])
def api_info() -> dict[str, str]:
    return {"service": APP_NAME, "version": API_VERSION}


@app.get("/health", tags=["system"])
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


# Files written by the upload service land in <MEDIA_ROOT>/uploads.
_mount_static(Path(settings.media_root) / "uploads", "/uploads", "uploads")
