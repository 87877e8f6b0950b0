"""
OAuth redirect, callback and token status endpoints.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, RedirectResponse

from errors import StateMismatch, UpstreamError
from ..models import TokenSetResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.get("/start")
async def auth_start(request: Request):
    """Create a PKCE authorization and redirect to Kick's login page"""
    url = request.app.state.oauth.start()
    return RedirectResponse(url, status_code=302)


@router.get("/callback", response_model=TokenSetResponse)
async def auth_callback(request: Request, code: Optional[str] = None, state: Optional[str] = None):
    """Exchange the authorization code and persist the tokens"""
    try:
        tokens = await request.app.state.oauth.complete(code, state)
    except StateMismatch:
        logger.warning("OAuth callback rejected: state or code mismatch")
        return PlainTextResponse("Bad state/code", status_code=400)
    except UpstreamError as e:
        logger.error(f"Token exchange failed: {e}")
        return PlainTextResponse(f"OAuth failed: {e}", status_code=500)
    except OSError as e:
        logger.error(f"Failed to save tokens: {e}")
        return PlainTextResponse(f"OAuth failed: could not save tokens: {e}", status_code=500)

    return TokenSetResponse(**tokens.to_dict())


@router.get("/status")
async def auth_status(request: Request):
    """Get token status without exposing secrets"""
    oauth = request.app.state.oauth
    status = oauth.storage.get_status()
    status["authorization_pending"] = oauth.state_store.has_pending()
    return status
