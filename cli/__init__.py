"""CLI package for Zoltar Relay

Starts the relay server or reports the stored token status.
"""

from cli.main import main

__all__ = [
    "main",
]
