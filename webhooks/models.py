"""Data models for Kick webhook verification"""

from dataclasses import dataclass
from typing import Mapping

# Header names Kick uses for webhook delivery metadata
MESSAGE_ID_HEADER = "Kick-Event-Message-Id"
TIMESTAMP_HEADER = "Kick-Event-Message-Timestamp"
SIGNATURE_HEADER = "Kick-Event-Signature"
EVENT_TYPE_HEADER = "Kick-Event-Type"


@dataclass(frozen=True)
class PublicKeyMaterial:
    """PEM encoded webhook signing key

    Attributes:
        pem: RSA public key in PEM (SubjectPublicKeyInfo) form
        source: "remote" when fetched from Kick, "fallback" for the pinned key
    """
    pem: str
    source: str = "remote"


@dataclass(frozen=True)
class WebhookEnvelope:
    """One inbound webhook delivery, exactly as received

    Attributes:
        message_id: Kick-Event-Message-Id header
        timestamp: Kick-Event-Message-Timestamp header
        signature_b64: Kick-Event-Signature header (standard base64)
        event_type: Kick-Event-Type header
        raw_body: Unparsed request body bytes
    """
    message_id: str
    timestamp: str
    signature_b64: str
    event_type: str
    raw_body: bytes

    @classmethod
    def from_headers(cls, headers: Mapping[str, str], raw_body: bytes) -> "WebhookEnvelope":
        """Build an envelope from request headers; missing headers become empty strings"""
        return cls(
            message_id=headers.get(MESSAGE_ID_HEADER, ""),
            timestamp=headers.get(TIMESTAMP_HEADER, ""),
            signature_b64=headers.get(SIGNATURE_HEADER, ""),
            event_type=headers.get(EVENT_TYPE_HEADER, ""),
            raw_body=raw_body,
        )

    def signed_payload(self) -> bytes:
        """Bytes covered by the signature: messageId.timestamp.rawBody"""
        return f"{self.message_id}.{self.timestamp}.".encode("utf-8") + self.raw_body
