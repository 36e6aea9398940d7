"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from manifest_garden.api.community_routes import router as community_router
from manifest_garden.api.inventory_routes import router as inventory_router
from manifest_garden.api.inventory_routes import seed_router
from manifest_garden.api.journal_routes import router as journal_router
from manifest_garden.api.profile_routes import router as profile_router
from manifest_garden.api.quest_routes import router as quest_router
from manifest_garden.api.ranking_routes import router as ranking_router
from manifest_garden.api.routes import router as books_router
from manifest_garden.api.weekly_routes import router as weekly_router
from manifest_garden.core.config import settings
from manifest_garden.infrastructure.database.connection import init_db

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Manifest Garden application")
    await init_db()
    logger.info("Database initialized")
    yield
    logger.info("Shutting down Manifest Garden application")


app = FastAPI(
    title="Manifest Garden",
    description="Manifestation garden: affirmations, journal, quests and leaderboards",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profile_router)
app.include_router(books_router)
app.include_router(community_router)
app.include_router(weekly_router)
app.include_router(inventory_router)
app.include_router(seed_router)
app.include_router(journal_router)
app.include_router(quest_router)
app.include_router(ranking_router)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
