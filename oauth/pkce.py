"""PKCE (Proof Key for Code Exchange) generation"""

import base64
import hashlib
import secrets

from .models import AuthorizationRequest


def _b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode('utf-8').rstrip('=')


def compute_challenge(code_verifier: str) -> str:
    """Compute the S256 code_challenge for a code_verifier

    Args:
        code_verifier: The code verifier string

    Returns:
        BASE64URL(SHA256(code_verifier)) without padding
    """
    return _b64url(hashlib.sha256(code_verifier.encode('ascii')).digest())


def generate() -> AuthorizationRequest:
    """Generate a fresh state, code verifier and code challenge

    The verifier carries 256 bits of entropy (43 base64url characters) and
    the state 128 bits (32 hex characters). Both come from the OS CSPRNG.

    Returns:
        AuthorizationRequest ready to be stored and sent to the provider
    """
    code_verifier = _b64url(secrets.token_bytes(32))
    state = secrets.token_hex(16)
    return AuthorizationRequest(
        state=state,
        verifier=code_verifier,
        challenge=compute_challenge(code_verifier),
    )
