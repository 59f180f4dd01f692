from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.helpers.date_utils import to_naive_utc


class TaskBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    scheduled_time: datetime
    duration: Optional[int] = Field(None, gt=0, description="Duration in minutes")
    xp_reward: int = Field(50, ge=10, le=500)

    @field_validator('scheduled_time')
    @classmethod
    def normalize_scheduled_time(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class TaskCreateRequest(TaskBase):
    user_id: str = Field(..., min_length=1)


class TaskUpdateRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    scheduled_time: Optional[datetime] = None
    duration: Optional[int] = Field(None, gt=0)
    completed: Optional[bool] = None
    xp_reward: Optional[int] = Field(None, ge=10, le=500)

    @field_validator('scheduled_time')
    @classmethod
    def normalize_scheduled_time(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value) if value is not None else None


class TaskResponse(BaseModel):
    task_id: str
    user_id: str
    title: str
    description: Optional[str] = None
    scheduled_time: datetime
    duration: Optional[int] = None
    completed: bool
    notification_sent: bool
    xp_reward: int
    category: Optional[str] = None
    auto_generated: bool = False
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TaskCompleteResponse(BaseModel):
    task_id: str
    xp_reward: int
    xp_awarded: int
    level: Optional[int] = None
