"""
Fantasy Standings & Playoff Probability - FastAPI Application

Main entry point for the web API.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import standings_router
from .core.config import CORS_ORIGINS, LOG_LEVEL


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# Create FastAPI app
app = FastAPI(
    title="Fantasy Standings & Playoff Probability",
    description="Standings, power rankings and Monte Carlo playoff odds for fantasy football leagues.",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(standings_router, prefix="/api")


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Fantasy Standings & Playoff Probability API",
        "version": "1.0.0",
        "docs": "/api/docs",
        "health": "/api/health"
    }
