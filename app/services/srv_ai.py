import logging
from typing import Optional

from fastapi import Depends
from starlette import status

from app.ai_agent.chat_agent import ChatAgent
from app.ai_agent.gemini_client import GeminiClient, GeminiError, get_gemini_client
from app.ai_agent.task_agent import TaskParseAgent
from app.helpers.exception_handler import CustomException
from app.models.model_task import Task
from app.repository.repo_user import UserRepository
from app.schemas.sche_ai import ChatRequest, ChatResponse, ParseTaskRequest
from app.schemas.sche_task import TaskResponse
from app.services.srv_task import TaskService

logger = logging.getLogger(__name__)

CHAT_FALLBACK_REPLY = "I'm having trouble connecting right now. Please try again in a moment!"


class ChatFailedException(CustomException):
    """Chat could not be answered; carries the reply shown to the user instead."""

    def __init__(self, message: str = "Failed to get response"):
        super().__init__(http_code=status.HTTP_500_INTERNAL_SERVER_ERROR, message=message)
        self.reply = CHAT_FALLBACK_REPLY


class AIService:
    def __init__(
        self,
        task_service: TaskService = Depends(),
        user_repo: UserRepository = Depends(),
        gemini_client: GeminiClient = Depends(get_gemini_client)
    ):
        self.task_service = task_service
        self.user_repo = user_repo
        self.task_agent = TaskParseAgent(gemini_client)
        self.chat_agent = ChatAgent(gemini_client)

    def parse_task(self, request: ParseTaskRequest) -> Task:
        if not request.prompt or not request.user_id:
            raise CustomException(http_code=status.HTTP_400_BAD_REQUEST, message="Missing prompt or user_id")

        try:
            fields = self.task_agent.parse_task(request.prompt)
        except (GeminiError, ValueError) as e:
            logger.error(f"Error parsing task with AI: {str(e)}", exc_info=True)
            raise CustomException(
                http_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message=f"Failed to parse task: {str(e)}"
            )

        return self.task_service.create_task_from_fields(request.user_id, fields)

    def chat(self, request: ChatRequest) -> ChatResponse:
        if not request.message:
            raise CustomException(http_code=status.HTTP_400_BAD_REQUEST, message="Message is required")

        user_context = self._user_context(request.user_id)
        created_task = self._create_task_from_message(request.message, request.user_id)

        try:
            reply = self.chat_agent.reply(request.message, user_context, created_task)
        except GeminiError as e:
            logger.error(f"Error in chat: {str(e)}", exc_info=True)
            raise ChatFailedException()

        return ChatResponse(
            reply=reply,
            task_created=TaskResponse.model_validate(created_task) if created_task else None,
        )

    def _user_context(self, user_id: Optional[str]) -> str:
        if not user_id:
            return ""
        return self.chat_agent.build_user_context(self.user_repo.get_by_id(user_id))

    def _create_task_from_message(self, message: str, user_id: Optional[str]) -> Optional[Task]:
        # Detection problems only cost the task, the chat reply still goes out.
        try:
            fields = self.task_agent.detect_task_request(message)
        except (GeminiError, ValueError) as e:
            logger.warning(f"Could not parse task detection: {str(e)}")
            return None

        if fields is None or not user_id:
            return None
        return self.task_service.create_task_from_fields(user_id, fields)
