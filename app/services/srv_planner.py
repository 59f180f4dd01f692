import logging

from fastapi import Depends
from starlette import status

from app.ai_agent.gemini_client import GeminiClient, GeminiError, get_gemini_client
from app.ai_agent.mappers import PlannerMapper
from app.ai_agent.planner_agent import WeeklyPlanAgent
from app.helpers.exception_handler import CustomException
from app.repository.repo_user import UserRepository
from app.schemas.sche_ai import PlannerGenerateRequest, PlannerGenerateResponse
from app.schemas.sche_task import TaskResponse
from app.services.srv_task import TaskService

logger = logging.getLogger(__name__)


class PlannerService:
    def __init__(
        self,
        task_service: TaskService = Depends(),
        user_repo: UserRepository = Depends(),
        gemini_client: GeminiClient = Depends(get_gemini_client)
    ):
        self.task_service = task_service
        self.user_repo = user_repo
        self.planner_agent = WeeklyPlanAgent(gemini_client)

    def generate_week_plan(self, request: PlannerGenerateRequest) -> PlannerGenerateResponse:
        """
        Ask the planner agent for 7 days of wellness tasks and store them as
        auto-generated tasks of the user.
        """
        if not request.user_id:
            raise CustomException(http_code=status.HTTP_400_BAD_REQUEST, message="User ID required")

        profile = self.user_repo.get_by_id(request.user_id)
        if profile is None:
            logger.info(f"No profile for user {request.user_id}, planning with default context")

        try:
            week_plan = self.planner_agent.generate_week_plan(profile, request.preferences)
        except GeminiError as e:
            logger.error(f"Error generating plan: {str(e)}", exc_info=True)
            raise CustomException(
                http_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=f"Failed to generate plan: {str(e)}"
            )

        task_fields = PlannerMapper.map_week_plan(week_plan)
        tasks = self.task_service.create_tasks_from_fields(request.user_id, task_fields)

        return PlannerGenerateResponse(
            success=True,
            week_plan=[day for day in week_plan if isinstance(day, dict)],
            tasks_created=len(tasks),
            tasks=[TaskResponse.model_validate(task) for task in tasks],
        )
