import uuid

from sqlalchemy import Column, String, Text, DateTime, Integer, Boolean, Index

from app.helpers.date_utils import utc_now
from app.models.model_base import Base


class Task(Base):
    __tablename__ = "task"

    task_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(128), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    scheduled_time = Column(DateTime, nullable=False)
    duration = Column(Integer)
    completed = Column(Boolean, nullable=False, default=False)
    notification_sent = Column(Boolean, nullable=False, default=False)
    xp_credited = Column(Boolean, nullable=False, default=False)
    xp_reward = Column(Integer, nullable=False, default=50)
    category = Column(String(50))
    auto_generated = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        Index('ix_task_user_scheduled', 'user_id', 'scheduled_time'),
    )
