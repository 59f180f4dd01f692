import logging
from typing import Any

from fastapi import APIRouter, Depends

from app.schemas.sche_ai import PlannerGenerateRequest, PlannerGenerateResponse
from app.schemas.sche_base import DataResponse
from app.services.srv_planner import PlannerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post('/generate', response_model=DataResponse[PlannerGenerateResponse])
def generate_week_plan(request: PlannerGenerateRequest, planner_service: PlannerService = Depends()) -> Any:
    """
    Generate a personalized 7-day wellness plan.

    **Process**:
    1. Loads the user's onboarding profile (age, height, weight, health issues)
    2. Calls Gemini AI for 2-3 tasks per day
    3. Stores every task as auto-generated

    **Response**: The week plan as returned by the AI plus the created tasks.
    """
    logger.info(f"generate_week_plan request from user {request.user_id}")
    result = planner_service.generate_week_plan(request)
    logger.info(f"generate_week_plan success: {result.tasks_created} tasks created")
    return DataResponse().success_response(data=result)
