"""
Chat AI Agent: Ria, the wellness assistant persona.
"""
import logging
from typing import Optional

from app.ai_agent.gemini_client import GeminiClient
from app.ai_agent.prompt_loader import load_prompt_template

logger = logging.getLogger(__name__)


class ChatAgent:

    def __init__(self, gemini_client: GeminiClient):
        self.gemini_client = gemini_client
        self.prompt_template = load_prompt_template("chat_prompt.txt")

    @staticmethod
    def build_user_context(profile) -> str:
        """One-line gamification summary of a UserProfile, empty without a profile."""
        if profile is None:
            return ""
        return (
            f"User info: Level {profile.level}, {profile.xp} XP, "
            f"{profile.tasks_completed or 0} tasks completed."
        )

    @staticmethod
    def build_task_note(created_task) -> str:
        if created_task is None:
            return ""
        scheduled = created_task.scheduled_time.strftime('%A, %B %d at %H:%M UTC')
        return (
            f'IMPORTANT: I just created a task for the user: "{created_task.title}" '
            f'scheduled for {scheduled}. Acknowledge this in your response.'
        )

    def reply(self, message: str, user_context: str = "", created_task=None) -> str:
        """
        Generate Ria's reply.

        Args:
            message: The user's chat message.
            user_context: Output of build_user_context.
            created_task: Task created from this message, if any.

        Raises:
            GeminiError: If the model call fails.
        """
        prompt = self.prompt_template.format(
            user_context=user_context,
            message=message,
            task_note=self.build_task_note(created_task),
        )
        return self.gemini_client.generate_content(prompt, temperature=0.7).strip()
