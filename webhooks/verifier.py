"""RSA signature verification for Kick webhooks"""

import base64
import binascii
import logging

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from .models import PublicKeyMaterial, WebhookEnvelope

logger = logging.getLogger(__name__)


def verify(envelope: WebhookEnvelope, key: PublicKeyMaterial) -> bool:
    """Check a webhook signature with RSASSA-PKCS1-v1_5 / SHA-256

    The signed message is rebuilt from the raw body bytes; the body must
    never be parsed and re-serialized before this call.

    Args:
        envelope: The received webhook
        key: Provider signing key

    Returns:
        True only if the signature verifies. Decoding errors, unusable keys
        and mismatches all return False.
    """
    try:
        signature = base64.b64decode(envelope.signature_b64, validate=True)
    except (binascii.Error, ValueError):
        logger.debug("Webhook signature is not valid base64")
        return False

    if not signature:
        return False

    try:
        public_key = serialization.load_pem_public_key(key.pem.encode("utf-8"))
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        logger.error(f"Webhook public key could not be loaded: {e}")
        return False

    if not isinstance(public_key, rsa.RSAPublicKey):
        logger.error("Webhook public key is not an RSA key")
        return False

    try:
        public_key.verify(
            signature,
            envelope.signed_payload(),
            padding.PKCS1v15(),
            hashes.SHA256(),
        )
        return True
    except InvalidSignature:
        return False
