"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from team_roster.config import settings
from team_roster.api.routes.selection import router as selection_router
from team_roster.api.routes.statistics import router as statistics_router
from team_roster.services.selection_engine import SelectionWeights
from team_roster.utils.strength_bands import StrengthBands

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: scoring configuration shared by all requests
    if not hasattr(app.state, "selection_weights"):
        app.state.selection_weights = SelectionWeights.from_settings(settings)
    if not hasattr(app.state, "strength_bands"):
        app.state.strength_bands = StrengthBands.from_settings(settings)
    yield


app = FastAPI(
    title="Team Roster",
    description="Team roster management - fair player auto-selection",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "team-roster"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Team Roster API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(selection_router)
app.include_router(statistics_router)


def run():
    """Serve the API with uvicorn using configured host and port."""
    import uvicorn

    uvicorn.run("team_roster.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
