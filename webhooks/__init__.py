"""Kick webhook verification package"""

from .models import PublicKeyMaterial, WebhookEnvelope
from .public_key import FALLBACK_PUBLIC_KEY_PEM, PublicKeyCache
from .verifier import verify

__all__ = [
    "FALLBACK_PUBLIC_KEY_PEM",
    "PublicKeyCache",
    "PublicKeyMaterial",
    "WebhookEnvelope",
    "verify",
]
