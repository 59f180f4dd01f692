import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../'))
load_dotenv(os.path.join(BASE_DIR, '.env'))


class Settings(BaseSettings):
    PROJECT_NAME: str = os.getenv('PROJECT_NAME', 'RIA WELLNESS')
    API_PREFIX: str = '/api'
    BACKEND_CORS_ORIGINS: List[str] = ['*']
    DATABASE_URL: str = os.getenv('SQL_DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'ria.db'))
    LOGGING_CONFIG_FILE: str = os.path.join(BASE_DIR, 'logging.ini')
    STATIC_DIR: str = os.getenv('STATIC_DIR', os.path.join(BASE_DIR, 'dist', 'public'))

    # Gemini
    GEMINI_API_KEY: Optional[str] = os.getenv('GEMINI_API_KEY')
    GEMINI_MODEL: str = os.getenv('GEMINI_MODEL', 'gemini-2.0-flash')

    # Tasks / gamification
    DEFAULT_XP_REWARD: int = 50
    XP_PER_LEVEL: int = 500
    NOTIFICATION_LEAD_MINUTES: int = int(os.getenv('NOTIFICATION_LEAD_MINUTES', '5'))

    # Vision (MediaPipe Tasks model files)
    VISION_ENABLED: bool = os.getenv('VISION_ENABLED', 'true').lower() == 'true'
    POSE_MODEL_PATH: str = os.getenv(
        'POSE_MODEL_PATH',
        os.path.join(BASE_DIR, 'models', 'pose_landmarker_lite.task')
    )
    FACE_MODEL_PATH: str = os.getenv(
        'FACE_MODEL_PATH',
        os.path.join(BASE_DIR, 'models', 'face_landmarker.task')
    )
    WELLNESS_HISTORY_SIZE: int = 20


settings = Settings()
