from datetime import date as date_type
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.sche_task import TaskResponse


class ParseTaskRequest(BaseModel):
    user_id: Optional[str] = None
    prompt: Optional[str] = None


class ChatRequest(BaseModel):
    message: Optional[str] = None
    user_id: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str
    task_created: Optional[TaskResponse] = None


class PlannerGenerateRequest(BaseModel):
    user_id: Optional[str] = None
    preferences: Optional[str] = Field(None, description="Free-text planning preferences")


class PlannedTask(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    time: str = Field(..., pattern=r"^\d{1,2}:\d{2}$", description="HH:MM")
    duration: Optional[int] = None
    category: Optional[str] = None
    xp_reward: Optional[int] = Field(None, alias="xpReward")

    model_config = ConfigDict(populate_by_name=True)


class PlannedDay(BaseModel):
    day: Optional[str] = None
    date: date_type
    tasks: List[PlannedTask] = []


class PlannerGenerateResponse(BaseModel):
    success: bool = True
    week_plan: List[Dict[str, Any]]
    tasks_created: int
    tasks: List[TaskResponse]
