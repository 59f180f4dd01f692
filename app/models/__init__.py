from app.models.model_base import Base
from app.models.model_task import Task
from app.models.model_user import UserProfile

__all__ = ['Base', 'Task', 'UserProfile']
