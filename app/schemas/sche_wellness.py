"""
Wellness analysis schemas - mood and posture requests/results.
"""
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class LandmarkPoint(BaseModel):
    x: float
    y: float
    z: float = 0.0


class KeypointItem(BaseModel):
    name: str
    x: float
    y: float
    score: Optional[float] = None


class MoodAnalyzeRequest(BaseModel):
    user_id: Optional[str] = None
    landmarks: Optional[List[LandmarkPoint]] = Field(None, description="Face mesh landmarks, normalized")
    blendshapes: Optional[Dict[str, float]] = Field(None, description="Blendshape name -> score")
    expressions: Optional[Dict[str, float]] = Field(None, description="Expression name -> probability")
    frame_data: Optional[str] = Field(None, description="Base64 encoded frame")

    @model_validator(mode='after')
    def check_input(self):
        if self.landmarks is None and self.expressions is None and self.frame_data is None:
            raise ValueError('One of landmarks, expressions or frame_data is required')
        return self


class PostureAnalyzeRequest(BaseModel):
    user_id: Optional[str] = None
    keypoints: Optional[List[KeypointItem]] = Field(None, description="Named body keypoints in pixels")
    frame_data: Optional[str] = Field(None, description="Base64 encoded frame")

    @model_validator(mode='after')
    def check_input(self):
        if self.keypoints is None and self.frame_data is None:
            raise ValueError('One of keypoints or frame_data is required')
        return self


class MoodResultResponse(BaseModel):
    mood: str
    confidence: float
    is_smiling: bool
    encouragement: str
    suggestion: str
    detected: bool = True


class PostureResultResponse(BaseModel):
    status: str
    score: int
    issues: List[str]
    suggestions: List[str]
    encouragement: str
    detected: bool = True


class HistoryEntryResponse(BaseModel):
    time: str
    label: str
    type: str
    suggestion: Optional[str] = None
