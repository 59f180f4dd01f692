from sqlalchemy import Column, String, DateTime, Integer, Boolean, JSON

from app.helpers.date_utils import utc_now
from app.models.model_base import Base


class UserProfile(Base):
    __tablename__ = "user_profile"

    user_id = Column(String(128), primary_key=True)
    name = Column(String(255))
    age = Column(Integer)
    height = Column(Integer)
    weight = Column(Integer)
    health_issues = Column(JSON, default=list)
    mental_health = Column(JSON, default=list)
    xp = Column(Integer, nullable=False, default=0)
    level = Column(Integer, nullable=False, default=1)
    tasks_completed = Column(Integer, nullable=False, default=0)
    streak = Column(Integer, nullable=False, default=0)
    onboarding_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utc_now)
    updated_at = Column(DateTime, default=utc_now, onupdate=utc_now)
