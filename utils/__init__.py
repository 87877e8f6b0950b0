"""Utility modules for zoltar-relay"""

from .storage import TokenStorage

__all__ = [
    "TokenStorage",
]
