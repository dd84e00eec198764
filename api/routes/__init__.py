"""
API route handlers.
"""

from api.routes.assistant import router as assistant_router

__all__ = ["assistant_router"]
