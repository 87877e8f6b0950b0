"""
Polling endpoints for the Unreal scene: predictions and cues.
"""
import logging
from typing import List

from fastapi import APIRouter, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from ..models import CueRequest, CueResponse, PredictionResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/zoltar", response_model=PredictionResponse)
async def take_prediction(request: Request):
    """Return the pending prediction once; 204 when there is none"""
    prediction = request.app.state.relay.predictions.take()
    if prediction is None:
        return Response(status_code=204)
    return PredictionResponse(prediction=prediction.text)


@router.post("/cue")
async def post_cue(request: Request):
    """Publish a scene cue

    Any body without a non-empty string ``cue`` (including one that is not a
    JSON object) is answered with 400 "Missing cue".
    """
    raw_body = await request.body()
    try:
        body = CueRequest.model_validate_json(raw_body)
    except ValidationError as e:
        logger.debug(f"Rejected cue body: {e}")
        return PlainTextResponse("Missing cue", status_code=400)

    if not body.cue:
        return PlainTextResponse("Missing cue", status_code=400)

    request.app.state.relay.record_cue(body.cue, body.data)
    return PlainTextResponse("OK", status_code=200)


@router.get("/cue", response_model=CueResponse)
async def take_cue(request: Request):
    """Return the latest cue once; 204 when there is none"""
    cue = request.app.state.relay.cues.take()
    if cue is None:
        return Response(status_code=204)
    return CueResponse(**cue.to_dict())


@router.get("/cue-log", response_model=List[CueResponse])
async def cue_log(request: Request):
    """Every cue received since startup, oldest first"""
    return [CueResponse(**cue.to_dict()) for cue in request.app.state.relay.cue_log.entries()]
