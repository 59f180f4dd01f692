"""
Mappers for converting LLM output to task fields.
Transforms AI-generated data structures into dictionaries ready for the Task model.
"""
import logging
from datetime import datetime, time, timedelta
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from app.core.config import settings
from app.helpers.date_utils import to_naive_utc, tomorrow_at, utc_now
from app.schemas.sche_ai import PlannedDay, PlannedTask

logger = logging.getLogger(__name__)

MIN_XP_REWARD = 10
MAX_XP_REWARD = 500
DEFAULT_DURATION = 30
DEFAULT_TASK_TITLE = "New Task"
DEFAULT_TASK_HOUR = 9
MAX_TITLE_LENGTH = 200


def parse_ai_datetime(value: Any) -> Optional[datetime]:
    """ISO 8601 string (with or without offset / trailing Z) to naive UTC, None when unusable."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return to_naive_utc(datetime.fromisoformat(text))
    except ValueError:
        logger.warning(f"Invalid datetime from AI: {value}")
        return None


def clamp_xp(value: Any, default: int = None) -> int:
    default = default if default is not None else settings.DEFAULT_XP_REWARD
    try:
        xp = int(value) if value else default
    except (TypeError, ValueError):
        xp = default
    return max(MIN_XP_REWARD, min(MAX_XP_REWARD, xp))


def positive_int(value: Any, default: int = DEFAULT_DURATION) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def _title(value: Any, default: Optional[str] = None) -> str:
    title = str(value).strip() if value else ''
    if not title:
        if default is None:
            raise ValueError("AI response missing task title")
        title = default
    return title[:MAX_TITLE_LENGTH]


class TaskMapper:
    """
    Maps single-task AI output (parse-task, chat detection) to Task fields.
    """

    @staticmethod
    def map_parsed_task(ai_task: Dict[str, Any], now: datetime = None) -> Dict[str, Any]:
        """
        Convert a parsed natural-language task.

        Args:
            ai_task: {title, description, scheduledTime, duration, xpReward}.
            now: Reference time for the tomorrow-09:00 fallback.

        Returns:
            Task field dictionary (without user_id).

        Raises:
            ValueError: If the AI output has no title.
        """
        if not isinstance(ai_task, dict):
            raise ValueError("AI response is not a JSON object")

        scheduled_time = parse_ai_datetime(ai_task.get('scheduledTime'))
        if scheduled_time is None:
            scheduled_time = tomorrow_at(DEFAULT_TASK_HOUR, now)

        return {
            'title': _title(ai_task.get('title')),
            'description': ai_task.get('description') or '',
            'scheduled_time': scheduled_time,
            'duration': positive_int(ai_task.get('duration')),
            'xp_reward': clamp_xp(ai_task.get('xpReward')),
        }

    @staticmethod
    def map_detected_task(task_data: Dict[str, Any], now: datetime = None) -> Dict[str, Any]:
        """Convert the taskData of a chat task-detection answer. Every field has a default."""
        now = now or utc_now()
        scheduled_time = parse_ai_datetime(task_data.get('scheduledTime'))
        if scheduled_time is None:
            scheduled_time = now + timedelta(hours=24)

        return {
            'title': _title(task_data.get('title'), DEFAULT_TASK_TITLE),
            'description': task_data.get('description') or '',
            'scheduled_time': scheduled_time,
            'duration': positive_int(task_data.get('duration')),
            'xp_reward': clamp_xp(task_data.get('xpReward')),
        }


class PlannerMapper:
    """
    Maps the weekly plan (JSON array of days) to auto-generated Task fields.
    """

    @staticmethod
    def map_week_plan(week_plan: List[Any]) -> List[Dict[str, Any]]:
        """
        Flatten a week plan into task dictionaries.
        Malformed days and tasks are logged and skipped.
        """
        task_models = []

        for day_idx, raw_day in enumerate(week_plan):
            if not isinstance(raw_day, dict):
                logger.error(f"Skipping day {day_idx}: not an object")
                continue
            try:
                day = PlannedDay.model_validate({**raw_day, 'tasks': []})
            except ValidationError as e:
                logger.error(f"Skipping day {day_idx}: {str(e)}")
                continue

            for task_idx, raw_task in enumerate(raw_day.get('tasks') or []):
                try:
                    task = PlannedTask.model_validate(raw_task)
                    task_models.append(PlannerMapper._map_single_task(day, task))
                except (ValidationError, ValueError) as e:
                    logger.error(f"Failed to map task {task_idx} of day {day_idx}: {str(e)}")
                    continue

        logger.info(f"Mapped {len(task_models)} tasks from weekly plan")
        return task_models

    @staticmethod
    def _map_single_task(day: PlannedDay, task: PlannedTask) -> Dict[str, Any]:
        hours, minutes = (int(part) for part in task.time.split(':'))
        # raises ValueError for 25:00 / 09:75
        scheduled_time = datetime.combine(day.date, time(hour=hours, minute=minutes))

        return {
            'title': _title(task.title),
            'description': task.description or '',
            'scheduled_time': scheduled_time,
            'duration': positive_int(task.duration),
            'xp_reward': clamp_xp(task.xp_reward),
            'category': task.category,
            'auto_generated': True,
        }
