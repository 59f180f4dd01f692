from datetime import datetime
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.models.model_task import Task


class TaskRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def create_task(self, task_data: Task) -> Task:
        self.db.add(task_data)
        self.db.commit()
        self.db.refresh(task_data)
        return task_data

    def create_tasks(self, tasks: List[Task]) -> List[Task]:
        self.db.add_all(tasks)
        self.db.commit()
        for task in tasks:
            self.db.refresh(task)
        return tasks

    def get_task_by_id(self, task_id: str) -> Optional[Task]:
        return self.db.query(Task).filter(Task.task_id == task_id).first()

    def get_tasks_by_user(self, user_id: str) -> List[Task]:
        return self.db.query(Task).filter(Task.user_id == user_id).order_by(Task.scheduled_time).all()

    def get_due_unnotified_tasks(self, user_id: str, due_before: datetime) -> List[Task]:
        return self.db.query(Task).filter(
            Task.user_id == user_id,
            Task.completed.is_(False),
            Task.notification_sent.is_(False),
            Task.scheduled_time <= due_before
        ).order_by(Task.scheduled_time).all()

    def update_task(self, task: Task) -> Task:
        self.db.commit()
        self.db.refresh(task)
        return task

    def update_tasks(self, tasks: List[Task]) -> List[Task]:
        self.db.commit()
        for task in tasks:
            self.db.refresh(task)
        return tasks

    def delete_task(self, task: Task) -> None:
        self.db.delete(task)
        self.db.commit()
