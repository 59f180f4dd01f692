import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List

from fastapi import Depends
from starlette import status

from app.core.config import settings
from app.helpers.date_utils import utc_now
from app.helpers.exception_handler import CustomException
from app.models.model_task import Task
from app.models.model_user import UserProfile
from app.repository.repo_task import TaskRepository
from app.repository.repo_user import UserRepository
from app.schemas.sche_task import TaskCompleteResponse, TaskCreateRequest, TaskUpdateRequest
from app.services.srv_user import award_xp

logger = logging.getLogger(__name__)

# columns that may not be cleared through a partial update
NON_NULLABLE_FIELDS = {'title', 'scheduled_time', 'completed', 'xp_reward'}


class TaskService:
    def __init__(self, task_repo: TaskRepository = Depends(), user_repo: UserRepository = Depends()):
        self.task_repo = task_repo
        self.user_repo = user_repo

    def get_user_tasks(self, user_id: str) -> List[Task]:
        return self.task_repo.get_tasks_by_user(user_id)

    def get_task(self, task_id: str) -> Task:
        task = self.task_repo.get_task_by_id(task_id)
        if not task:
            raise CustomException(http_code=status.HTTP_404_NOT_FOUND, message="Task not found")
        return task

    def create_task(self, data: TaskCreateRequest) -> Task:
        return self.create_task_from_fields(data.user_id, data.model_dump(exclude={'user_id'}))

    def create_task_from_fields(self, user_id: str, fields: Dict[str, Any]) -> Task:
        """Persist a new, not-yet-completed task and hand it to the calendar hook."""
        task = Task(
            user_id=user_id,
            completed=False,
            notification_sent=False,
            **fields
        )
        task = self.task_repo.create_task(task)
        logger.info(f"Created task {task.task_id} for user {user_id}")
        self._after_create(task)
        return task

    def create_tasks_from_fields(self, user_id: str, fields_list: List[Dict[str, Any]]) -> List[Task]:
        tasks = [
            Task(user_id=user_id, completed=False, notification_sent=False, **fields)
            for fields in fields_list
        ]
        if not tasks:
            return []
        tasks = self.task_repo.create_tasks(tasks)
        logger.info(f"Created {len(tasks)} tasks for user {user_id}")
        for task in tasks:
            self._after_create(task)
        return tasks

    def _after_create(self, task: Task) -> None:
        try:
            self.sync_to_calendar(task)
        except Exception as e:
            logger.warning(f"Calendar sync failed (non-critical): {str(e)}")

    @staticmethod
    def sync_to_calendar(task: Task) -> None:
        # Calendar events are created client side
        logger.info(f"Task {task.task_id} ready for calendar sync for user {task.user_id}")

    def update_task(self, task_id: str, data: TaskUpdateRequest) -> Task:
        task = self.get_task(task_id)
        updates = data.model_dump(exclude_unset=True)

        for key, value in updates.items():
            if value is None and key in NON_NULLABLE_FIELDS:
                continue
            setattr(task, key, value)
        task.updated_at = utc_now()

        return self.task_repo.update_task(task)

    def delete_task(self, task_id: str) -> None:
        task = self.get_task(task_id)
        self.task_repo.delete_task(task)
        logger.info(f"Deleted task {task_id}")

    def complete_task(self, task_id: str) -> TaskCompleteResponse:
        """
        Mark a task completed and credit its XP to the owner's profile.
        XP is credited once per task, however the completed flag is toggled.
        """
        task = self.get_task(task_id)
        xp_reward = task.xp_reward or settings.DEFAULT_XP_REWARD
        profile = self.user_repo.get_by_id(task.user_id)

        if task.xp_credited:
            if not task.completed:
                task.completed = True
                task.updated_at = utc_now()
                self.task_repo.update_task(task)
            return TaskCompleteResponse(
                task_id=task.task_id,
                xp_reward=xp_reward,
                xp_awarded=0,
                level=profile.level if profile else None,
            )

        if profile is None:
            profile = UserProfile(user_id=task.user_id, xp=0, level=1, tasks_completed=0, streak=0)
            self.user_repo.add(profile)

        task.completed = True
        task.xp_credited = True
        task.updated_at = utc_now()
        award_xp(profile, xp_reward)
        self.task_repo.update_task(task)

        logger.info(f"Task {task_id} completed, {xp_reward} XP to user {task.user_id} (level {profile.level})")
        return TaskCompleteResponse(
            task_id=task.task_id,
            xp_reward=xp_reward,
            xp_awarded=xp_reward,
            level=profile.level,
        )

    def pop_due_notifications(self, user_id: str, now: datetime = None) -> List[Task]:
        """
        Tasks due within the notification lead time (or overdue) that have not
        been notified yet. They are marked notified before being returned.
        """
        now = now or utc_now()
        due_before = now + timedelta(minutes=settings.NOTIFICATION_LEAD_MINUTES)
        tasks = self.task_repo.get_due_unnotified_tasks(user_id, due_before)

        for task in tasks:
            task.notification_sent = True
        if tasks:
            self.task_repo.update_tasks(tasks)
            logger.info(f"Marked {len(tasks)} task notifications as sent for user {user_id}")
        return tasks
