#!/usr/bin/env python3
"""
Tipping Arena API - FastAPI Application

Read API for the leaderboard and per-match prediction breakdowns, plus an
admin endpoint for rescoring a match.

Usage:
    python -m web.backend.app

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging

from fastapi import FastAPI, HTTPException

from core.scorer.errors import ScoringError
from .config import get_config
from .exceptions import (
    ServiceException,
    service_exception_handler,
    scoring_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .routers import (
    leaderboard_router,
    matches_router,
    admin_router
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Tipping Arena API",
    description="Kicktipp-style scoring of LLM football predictions",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Register exception handlers
app.add_exception_handler(ServiceException, service_exception_handler)
app.add_exception_handler(ScoringError, scoring_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(leaderboard_router)
app.include_router(matches_router)
app.include_router(admin_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "tipping-arena-api"}


def main():
    """Run the web server."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    config = get_config()

    logger.info(f"Starting Tipping Arena API on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
