"""OAuth token exchange against the Kick token endpoint"""

import logging
from typing import Optional

import httpx

from errors import MalformedResponse, NetworkError, ProviderError
from .models import TokenSet

logger = logging.getLogger(__name__)


class TokenExchangeClient:
    """Exchanges authorization codes for token sets

    Transport failures and timeouts raise NetworkError, non-2xx answers raise
    ProviderError, and 2xx answers without an access_token raise
    MalformedResponse. Nothing is retried here.
    """

    def __init__(
        self,
        token_url: str,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token_url = token_url
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout = timeout
        self._transport = transport

    async def exchange(self, code: str, verifier: str) -> TokenSet:
        """Exchange an authorization code for tokens

        Args:
            code: Authorization code from the OAuth callback
            verifier: PKCE code verifier of the matching request

        Returns:
            TokenSet as issued by the provider
        """
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code_verifier": verifier,
            "code": code,
        }

        logger.info(f"Exchanging authorization code for tokens at {self.token_url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.TimeoutException as e:
            logger.error(f"Token exchange timed out after {self.timeout} seconds: {e}")
            raise NetworkError(f"Token exchange timed out: {e}") from e
        except httpx.RequestError as e:
            logger.error(f"Token exchange request failed: {e}")
            raise NetworkError(f"Token exchange request failed: {e}") from e

        logger.debug(f"Token exchange response status: {response.status_code}")

        if not response.is_success:
            logger.error(f"Token exchange failed with status {response.status_code}: {response.text}")
            raise ProviderError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponse(f"Token response is not JSON: {e}", response.text) from e

        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not isinstance(access_token, str) or not access_token:
            raise MalformedResponse("Token response missing access_token", response.text)

        logger.info("Successfully exchanged authorization code for tokens")
        return TokenSet.from_dict(payload)
