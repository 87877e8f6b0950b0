"""
Health check and status endpoints.
"""
import time
from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    key = request.app.state.key_cache.cached
    relay = request.app.state.relay
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "webhook_key": key.source if key else None,
        "prediction_pending": not relay.predictions.is_empty(),
        "cue_pending": not relay.cues.is_empty(),
        "cues_logged": len(relay.cue_log),
    }


@router.get("/healthz")
async def healthz_check():
    """Alternative health check endpoint (Kubernetes style)"""
    return {"status": "ok", "timestamp": time.time()}
