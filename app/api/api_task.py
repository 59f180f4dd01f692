import logging
from typing import Any, List

from fastapi import APIRouter, Depends

from app.helpers.exception_handler import CustomException
from app.schemas.sche_base import DataResponse, ResponseSchemaBase
from app.schemas.sche_task import TaskCompleteResponse, TaskCreateRequest, TaskResponse, TaskUpdateRequest
from app.services.srv_task import TaskService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get('/user/{user_id}', response_model=DataResponse[List[TaskResponse]])
def get_user_tasks(user_id: str, task_service: TaskService = Depends()) -> Any:
    tasks = task_service.get_user_tasks(user_id)
    return DataResponse().success_response(data=tasks)


@router.post('/user/{user_id}/due-notifications', response_model=DataResponse[List[TaskResponse]])
def pop_due_notifications(user_id: str, task_service: TaskService = Depends()) -> Any:
    """
    Tasks starting within the next few minutes (or overdue) that have not
    been notified yet. Each task is returned once.
    """
    tasks = task_service.pop_due_notifications(user_id)
    return DataResponse().success_response(data=tasks)


@router.post('', response_model=DataResponse[TaskResponse])
def create_task(task_data: TaskCreateRequest, task_service: TaskService = Depends()) -> Any:
    try:
        task = task_service.create_task(task_data)
        return DataResponse().success_response(data=task)
    except CustomException:
        raise
    except Exception as e:
        logger.error(f"create_task error: {str(e)}", exc_info=True)
        raise CustomException(http_code=400, code='400', message=str(e) or "Failed to create task")


@router.get('/{task_id}', response_model=DataResponse[TaskResponse])
def get_task_detail(task_id: str, task_service: TaskService = Depends()) -> Any:
    task = task_service.get_task(task_id)
    return DataResponse().success_response(data=task)


@router.put('/{task_id}', response_model=DataResponse[TaskResponse])
def update_task(task_id: str, task_data: TaskUpdateRequest, task_service: TaskService = Depends()) -> Any:
    try:
        task = task_service.update_task(task_id, task_data)
        return DataResponse().success_response(data=task)
    except CustomException:
        raise
    except Exception as e:
        logger.error(f"update_task error: {str(e)}", exc_info=True)
        raise CustomException(http_code=400, code='400', message=str(e) or "Failed to update task")


@router.delete('/{task_id}', response_model=ResponseSchemaBase)
def delete_task(task_id: str, task_service: TaskService = Depends()) -> Any:
    task_service.delete_task(task_id)
    return ResponseSchemaBase().custom_response(True, f"Task {task_id} deleted")


@router.post('/{task_id}/complete', response_model=DataResponse[TaskCompleteResponse])
def complete_task(task_id: str, task_service: TaskService = Depends()) -> Any:
    result = task_service.complete_task(task_id)
    return DataResponse().success_response(data=result)
