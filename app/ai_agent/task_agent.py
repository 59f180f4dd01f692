"""
Task AI Agent: turns natural language into task fields.
Used by the parse-task endpoint and by chat task detection.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from app.ai_agent.gemini_client import GeminiClient
from app.ai_agent.mappers import TaskMapper
from app.ai_agent.prompt_loader import load_prompt_template
from app.helpers.date_utils import utc_now

logger = logging.getLogger(__name__)


class TaskParseAgent:
    """
    AI Agent for extracting a single task from free text.
    """

    def __init__(self, gemini_client: GeminiClient):
        self.gemini_client = gemini_client
        self.parse_template = load_prompt_template("parse_task_prompt.txt")
        self.detection_template = load_prompt_template("task_detection_prompt.txt")

    def parse_task(self, prompt: str, now: datetime = None) -> Dict[str, Any]:
        """
        Parse a request such as "gym tomorrow at 6pm" into task fields.

        Args:
            prompt: The user's request.
            now: Current time (naive UTC) given to the model for relative dates.

        Returns:
            Task field dictionary: title, description, scheduled_time, duration, xp_reward.

        Raises:
            GeminiError: If the model call fails or returns no JSON object.
            ValueError: If the parsed object has no title.
        """
        now = now or utc_now()
        full_prompt = self.parse_template.format(prompt=prompt, now=now.isoformat() + 'Z')

        logger.info("Parsing task request with Gemini")
        ai_task = self.gemini_client.generate_json_content(full_prompt, expect="object")
        return TaskMapper.map_parsed_task(ai_task, now=now)

    def detect_task_request(self, message: str, now: datetime = None) -> Optional[Dict[str, Any]]:
        """
        Decide whether a chat message asks for a task.

        Returns:
            Task field dictionary with defaults filled in, or None when the
            message is not a task request.
        """
        now = now or utc_now()
        full_prompt = self.detection_template.format(message=message, now=now.isoformat() + 'Z')

        detection = self.gemini_client.generate_json_content(full_prompt, expect="object")
        if not isinstance(detection, dict) or not detection.get('isTaskRequest'):
            return None

        task_data = detection.get('taskData')
        if not isinstance(task_data, dict):
            return None

        logger.info("Chat message detected as task request")
        return TaskMapper.map_detected_task(task_data, now=now)
