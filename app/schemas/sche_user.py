from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserProfileUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    age: Optional[int] = Field(None, gt=0, lt=150)
    height: Optional[int] = Field(None, gt=0, description="Height in cm")
    weight: Optional[int] = Field(None, gt=0, description="Weight in kg")
    health_issues: List[str] = Field(default_factory=list, max_length=4)
    mental_health: List[str] = Field(default_factory=list)


class UserProfileResponse(BaseModel):
    user_id: str
    name: Optional[str] = None
    age: Optional[int] = None
    height: Optional[int] = None
    weight: Optional[int] = None
    health_issues: List[str] = []
    mental_health: List[str] = []
    xp: int
    level: int
    tasks_completed: int
    streak: int
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
