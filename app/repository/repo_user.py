from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.models.model_user import UserProfile


class UserRepository:
    def __init__(self, db_session: Session = Depends(get_db)):
        self.db = db_session

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        return self.db.query(UserProfile).filter(UserProfile.user_id == user_id).first()

    def create(self, profile: UserProfile) -> UserProfile:
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def update(self, profile: UserProfile) -> UserProfile:
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def add(self, profile: UserProfile) -> UserProfile:
        """Stage a profile; it is written with the caller's next commit."""
        self.db.add(profile)
        return profile
