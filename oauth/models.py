"""Data models for Kick OAuth authentication"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AuthorizationRequest:
    """A pending PKCE authorization

    Attributes:
        state: Opaque CSRF token echoed back by the provider (hex)
        verifier: PKCE code verifier, sent only to the token endpoint
        challenge: BASE64URL(SHA256(verifier)), sent to the authorize endpoint
    """
    state: str
    verifier: str
    challenge: str


@dataclass
class TokenSet:
    """OAuth token set returned by the Kick token endpoint

    Attributes:
        access_token: Bearer token for API authentication
        refresh_token: Token for refreshing expired access tokens, if issued
        token_type: Token type reported by the provider (usually "Bearer")
        expires_in: Access token lifetime in seconds
        scope: Space separated scopes granted
    """
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = ""
    expires_in: int = 0
    scope: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenSet":
        return cls(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token"),
            token_type=data.get("token_type") or "",
            expires_in=data.get("expires_in") or 0,
            scope=data.get("scope") or "",
        )
