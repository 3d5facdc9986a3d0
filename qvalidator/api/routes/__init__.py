"""API Routes package."""

from .validation import router as validation_router

__all__ = ["validation_router"]
