"""OAuth PKCE flow orchestration"""

import logging
from typing import TYPE_CHECKING

from . import pkce
from .authorization import AuthorizationURLBuilder
from .models import TokenSet
from .state_store import AuthorizationStateStore
from .token_exchange import TokenExchangeClient

if TYPE_CHECKING:
    from utils.storage import TokenStorage

logger = logging.getLogger(__name__)


class OAuthManager:
    """OAuth PKCE flow implementation

    This class orchestrates the OAuth authentication flow:
    - PKCE generation and pending-state storage
    - Authorization URL construction
    - Token exchange
    - Token persistence
    """

    def __init__(
        self,
        state_store: AuthorizationStateStore,
        auth_builder: AuthorizationURLBuilder,
        exchange_client: TokenExchangeClient,
        storage: "TokenStorage",
    ):
        self.state_store = state_store
        self.auth_builder = auth_builder
        self.exchange_client = exchange_client
        self.storage = storage

    def start(self) -> str:
        """Begin a new authorization, replacing any pending one

        Returns:
            Authorization URL to redirect the user to
        """
        request = pkce.generate()
        self.state_store.put(request)
        logger.info("Started OAuth authorization, redirecting to provider")
        return self.auth_builder.get_authorize_url(request)

    async def complete(self, code: str, state: str) -> TokenSet:
        """Finish the authorization started by ``start``

        Args:
            code: Authorization code from the callback
            state: State parameter from the callback

        Returns:
            The persisted TokenSet

        Raises:
            StateMismatch: If the callback does not match the pending request
            UpstreamError: If the token endpoint call fails
            OSError: If the token set cannot be written
        """
        verifier = self.state_store.consume(state, code)
        tokens = await self.exchange_client.exchange(code, verifier)
        self.storage.save(tokens)
        logger.info("Authentication complete, tokens saved")
        return tokens
