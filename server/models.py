"""
Pydantic models for the relay HTTP API.
"""
from typing import Any, Optional
from pydantic import BaseModel


class CueRequest(BaseModel):
    """Cue posted by a scene controller"""
    cue: Optional[str] = None
    data: Any = None


class CueResponse(BaseModel):
    """Cue as returned to the Unreal client"""
    cue: str
    data: Any
    timestamp: int


class PredictionResponse(BaseModel):
    """Pending prediction for the Unreal client"""
    prediction: str


class TokenSetResponse(BaseModel):
    """Token set echoed back after a successful callback (diagnostic only)"""
    access_token: str
    refresh_token: Optional[str] = None
    token_type: Optional[str] = None
    expires_in: Optional[int] = None
    scope: Optional[str] = None
