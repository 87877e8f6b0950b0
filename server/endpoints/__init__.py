"""
Endpoint handlers for the relay server.
"""
from .auth import router as auth_router
from .health import router as health_router
from .relay import router as relay_router
from .webhook import router as webhook_router

__all__ = [
    'auth_router',
    'health_router',
    'relay_router',
    'webhook_router',
]
