"""TripAlbums Server - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripalbums import __version__
from tripalbums.config import settings
from tripalbums.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create tables on startup."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    init_db()
    yield


app = FastAPI(
    title="TripAlbums",
    description="Album suggestions for trip photos",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Register API routers ---
from tripalbums.api.auth import router as auth_router  # noqa: E402
from tripalbums.api.trips import router as trips_router  # noqa: E402
from tripalbums.api.album_suggestions import router as album_suggestions_router  # noqa: E402

API_PREFIX = "/api/v1"

app.include_router(auth_router, prefix=API_PREFIX)
app.include_router(trips_router, prefix=API_PREFIX)
app.include_router(album_suggestions_router, prefix=API_PREFIX)


@app.get("/")
def root():
    """Server info."""
    return {
        "name": settings.server_name,
        "version": __version__,
        "status": "running",
    }


@app.get("/api/v1/health")
def health():
    return {"status": "ok"}
