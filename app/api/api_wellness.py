"""
Wellness endpoints: mood and posture analysis plus the per-user result history.
"""
import logging
from typing import Any, List

from fastapi import APIRouter, Depends

from app.schemas.sche_base import DataResponse, ResponseSchemaBase
from app.schemas.sche_wellness import (
    HistoryEntryResponse, MoodAnalyzeRequest, MoodResultResponse,
    PostureAnalyzeRequest, PostureResultResponse,
)
from app.services.srv_wellness import WellnessService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post('/mood/analyze', response_model=DataResponse[MoodResultResponse])
def analyze_mood(request: MoodAnalyzeRequest, wellness_service: WellnessService = Depends()) -> Any:
    """
    Classify mood from one of:
    - `landmarks` (face mesh, optionally with `blendshapes`)
    - `expressions` (expression probabilities)
    - `frame_data` (base64 image, runs the face landmarker)
    """
    result = wellness_service.analyze_mood(request)
    return DataResponse().success_response(data=result)


@router.post('/posture/analyze', response_model=DataResponse[PostureResultResponse])
def analyze_posture(request: PostureAnalyzeRequest, wellness_service: WellnessService = Depends()) -> Any:
    """Score posture from named `keypoints` in pixels or from a base64 `frame_data`."""
    result = wellness_service.analyze_posture(request)
    return DataResponse().success_response(data=result)


@router.get('/history/{user_id}', response_model=DataResponse[List[HistoryEntryResponse]])
def get_history(user_id: str, wellness_service: WellnessService = Depends()) -> Any:
    return DataResponse().success_response(data=wellness_service.get_history(user_id))


@router.delete('/history/{user_id}', response_model=ResponseSchemaBase)
def clear_history(user_id: str, wellness_service: WellnessService = Depends()) -> Any:
    wellness_service.clear_history(user_id)
    return ResponseSchemaBase().success_response()
