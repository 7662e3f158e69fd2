"""
Cellar Match API

FastAPI backend for wine catalog resolution and food pairing ranking.

Usage:
    uvicorn main:app --reload
"""

# Load environment variables from .env file FIRST
from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cellar_match.config import Config

# Configure logging from environment
logging.basicConfig(
    level=getattr(logging, Config.log_level(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)
logger.info(f"Starting with LOG_LEVEL={Config.log_level()}, DEV_MODE={Config.is_dev()}")

from cellar_match.routes import scan_router, pairing_router, embeddings_router  # noqa: E402

app = FastAPI(
    title="Cellar Match API",
    description="Match scanned labels to the wine catalog and rank cellar wines for a dish",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if Config.is_dev() else Config.cors_origins(),
    allow_credentials=not Config.is_dev(),
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(scan_router, tags=["scan"])
app.include_router(pairing_router, tags=["food-pairing"])
app.include_router(embeddings_router, tags=["embeddings"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Cellar Match API",
        "version": "0.1.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "ok"}
