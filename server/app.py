"""
FastAPI application initialization and configuration.
"""
import logging
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import settings
from oauth import (
    AuthorizationStateStore,
    AuthorizationURLBuilder,
    OAuthManager,
    TokenExchangeClient,
)
from relay import EventRelay
from utils.storage import TokenStorage
from webhooks import PublicKeyCache

from .middleware import log_requests_middleware
from .endpoints import (
    auth_router,
    health_router,
    relay_router,
    webhook_router,
)

logger = logging.getLogger(__name__)


def create_app(
    oauth: OAuthManager,
    key_cache: PublicKeyCache,
    relay: EventRelay,
    cors_allow_origins: Optional[List[str]] = None,
) -> FastAPI:
    """Build the relay application around already constructed components

    Args:
        oauth: OAuth flow orchestrator (owns the state store and token storage)
        key_cache: Webhook signing key cache
        relay: Mailbox owner for predictions and cues
        cors_allow_origins: Origins allowed by CORS (default: any)
    """
    app = FastAPI(title="Zoltar Relay", version="1.0.0")

    app.state.oauth = oauth
    app.state.key_cache = key_cache
    app.state.relay = relay

    # Add middleware
    app.middleware("http")(log_requests_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_allow_origins or ["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(webhook_router)
    app.include_router(relay_router)

    logger.debug("FastAPI application initialized with all routers and middleware")
    return app


def create_app_from_settings() -> FastAPI:
    """Build the application from settings.py

    Raises:
        ConfigError: If the OAuth client credentials are missing
    """
    settings.require_oauth_settings()

    oauth = OAuthManager(
        state_store=AuthorizationStateStore(Path(settings.PKCE_FILE)),
        auth_builder=AuthorizationURLBuilder(
            authorize_url=settings.AUTHORIZE_URL,
            client_id=settings.CLIENT_ID,
            redirect_uri=settings.REDIRECT_URI,
            scope=settings.SCOPE,
        ),
        exchange_client=TokenExchangeClient(
            token_url=settings.TOKEN_URL,
            client_id=settings.CLIENT_ID,
            client_secret=settings.CLIENT_SECRET,
            redirect_uri=settings.REDIRECT_URI,
            timeout=settings.HTTP_TIMEOUT,
        ),
        storage=TokenStorage(Path(settings.TOKEN_FILE)),
    )
    key_cache = PublicKeyCache(settings.PUBLIC_KEY_URL, timeout=settings.HTTP_TIMEOUT)
    relay = EventRelay(trigger=settings.ZOLTAR_TRIGGER)

    return create_app(oauth, key_cache, relay, cors_allow_origins=settings.CORS_ALLOW_ORIGINS)
