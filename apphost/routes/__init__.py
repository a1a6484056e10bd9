"""Web application routes"""

from .pwa import create_pwa_router

__all__ = [
    "create_pwa_router",
]
