"""API Routes for Webman."""

from .collections_router import router as collections_router
from .headers_router import router as headers_router
from .proxy_router import router as proxy_router

__all__ = [
    "collections_router",
    "headers_router",
    "proxy_router",
]
