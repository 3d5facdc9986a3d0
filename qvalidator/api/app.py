"""
FastAPI application for the question validator.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core.config import settings
from ..llm.provider import current_llm_provider
from .routes import validation_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"question validator starting (llm_provider={settings.llm_provider})")
    yield
    provider = current_llm_provider()
    if provider is not None:
        await provider.close()


app = FastAPI(
    title="Question Validator API",
    description="Duplicate, contamination and vagueness checks for 20 Questions",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # configure for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(validation_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Question Validator API",
        "version": __version__,
        "docs": "/docs",
    }


__all__ = ["app"]


# Run with: uvicorn qvalidator.api.app:app --reload --port 8000
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
