"""
AI endpoints: natural-language task parsing and the Ria chat assistant.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from app.schemas.sche_ai import ChatRequest, ChatResponse, ParseTaskRequest
from app.schemas.sche_base import DataResponse
from app.schemas.sche_task import TaskResponse
from app.services.srv_ai import AIService, ChatFailedException

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post('/parse-task', response_model=DataResponse[TaskResponse])
def parse_task(request: ParseTaskRequest, ai_service: AIService = Depends()) -> Any:
    """
    Create a task from a sentence such as "Gym tomorrow at 6pm".
    Missing time defaults to tomorrow 09:00, duration to 30 minutes.
    """
    logger.info(f"parse_task request from user {request.user_id}")
    task = ai_service.parse_task(request)
    logger.info(f"parse_task success: task {task.task_id}")
    return DataResponse().success_response(data=task)


@router.post('/chat', response_model=DataResponse[ChatResponse])
def chat(request: ChatRequest, ai_service: AIService = Depends()) -> Any:
    """
    Chat with Ria. Scheduling requests ("remind me to stretch at 3pm")
    also create a task when a user_id is given.
    """
    try:
        result = ai_service.chat(request)
        return DataResponse().success_response(data=result)
    except ChatFailedException as e:
        return JSONResponse(
            status_code=e.http_code,
            content=jsonable_encoder(
                DataResponse().custom_response(False, e.message, ChatResponse(reply=e.reply))
            )
        )
