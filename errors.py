"""Exception types shared by the OAuth flow, webhook verification and the HTTP layer"""

from typing import Optional


class RelayError(Exception):
    """Base class for all relay errors"""


class ConfigError(RelayError):
    """Required configuration is missing or invalid (fatal at startup)"""


class StateMismatch(RelayError):
    """OAuth callback state or code did not match the pending authorization

    The message is always the same so callers cannot tell whether an
    authorization was pending.
    """

    def __init__(self):
        super().__init__("Bad state/code")


class UpstreamError(RelayError):
    """Base class for failures talking to the provider (token or key endpoint)"""


class NetworkError(UpstreamError):
    """Transport failure or timeout; the caller may retry"""


class ProviderError(UpstreamError):
    """Provider answered with a non-success status"""

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Provider returned {status}: {body}")


class MalformedResponse(UpstreamError):
    """Provider answered 2xx but the body is missing required fields"""

    def __init__(self, message: str, body: Optional[str] = None):
        self.body = body
        super().__init__(message)


class SignatureInvalid(RelayError):
    """Webhook signature did not verify against the provider key"""

    def __init__(self):
        super().__init__("bad signature")
