"""OAuth 2.1 + PKCE authentication package for Kick"""

from .authorization import AuthorizationURLBuilder
from .manager import OAuthManager
from .models import AuthorizationRequest, TokenSet
from .pkce import compute_challenge, generate
from .state_store import AuthorizationStateStore
from .token_exchange import TokenExchangeClient

__all__ = [
    "AuthorizationRequest",
    "AuthorizationStateStore",
    "AuthorizationURLBuilder",
    "OAuthManager",
    "TokenExchangeClient",
    "TokenSet",
    "compute_challenge",
    "generate",
]
