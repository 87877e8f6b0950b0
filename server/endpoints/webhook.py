"""
Kick webhook receiver.
"""
import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from errors import SignatureInvalid
from webhooks import WebhookEnvelope, verify

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/webhook")
async def kick_webhook(request: Request):
    """Verify a signed Kick event and hand it to the relay

    The signature is checked against the raw body bytes before anything is
    parsed. Rejected deliveries never reach the relay.
    """
    raw_body = await request.body()
    envelope = WebhookEnvelope.from_headers(request.headers, raw_body)

    try:
        key = await request.app.state.key_cache.get()
        if not verify(envelope, key):
            raise SignatureInvalid()

        payload = json.loads(raw_body)
        request.app.state.relay.dispatch(envelope.event_type, payload)
    except SignatureInvalid:
        logger.warning(
            f"Webhook signature verification failed: message_id={envelope.message_id!r} "
            f"event_type={envelope.event_type!r} client={request.client.host if request.client else None}"
        )
        return PlainTextResponse("bad signature", status_code=401)
    except Exception as e:
        logger.error(f"Webhook error: {e}")
        return PlainTextResponse("Internal Server Error", status_code=500)

    return PlainTextResponse("OK", status_code=200)
