# tests/conftest.py

import os

os.environ['SQL_DATABASE_URL'] = 'sqlite://'
os.environ['VISION_ENABLED'] = 'false'
os.environ['GEMINI_API_KEY'] = ''

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.ai_agent.gemini_client import get_gemini_client
from app.db.base import get_db
from app.main import app
from app.models import Base
from app.services import srv_wellness
from app.vision.modules.history import WellnessHistory
from tests.fakes import FakeGeminiClient

engine = create_engine(
    'sqlite://',
    connect_args={'check_same_thread': False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def gemini() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture()
def client(db_session, gemini, monkeypatch):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_gemini_client] = lambda: gemini
    monkeypatch.setattr(srv_wellness, 'wellness_history', WellnessHistory(max_entries=20))

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
