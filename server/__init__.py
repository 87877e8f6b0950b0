"""
Zoltar Relay HTTP server package.

Serves the Kick OAuth redirect/callback pair, the signed webhook receiver and
the polling endpoints the Unreal scene reads predictions and cues from.
"""
from .app import create_app, create_app_from_settings
from .server import RelayServer

__version__ = "1.0.0"

__all__ = [
    'RelayServer',
    'create_app',
    'create_app_from_settings',
]
