"""OAuth authorization URL construction"""

from urllib.parse import urlencode

from .models import AuthorizationRequest


class AuthorizationURLBuilder:
    """Builds Kick authorize URLs for a pending PKCE request"""

    def __init__(self, authorize_url: str, client_id: str, redirect_uri: str, scope: str):
        self.authorize_url = authorize_url
        self.client_id = client_id
        self.redirect_uri = redirect_uri
        self.scope = scope

    def get_authorize_url(self, request: AuthorizationRequest) -> str:
        """Construct the authorize URL with S256 PKCE

        Args:
            request: The pending authorization request

        Returns:
            Full authorization URL
        """
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": self.scope,
            "state": request.state,
            "code_challenge": request.challenge,
            "code_challenge_method": "S256",
        }
        return f"{self.authorize_url}?{urlencode(params)}"
