"""
Weekly Planner AI Agent.
Generates a personalized 7-day wellness plan from the user's onboarding profile.
"""
import logging
from datetime import date
from typing import Any, List, Optional

from app.ai_agent.gemini_client import GeminiClient, GeminiError
from app.ai_agent.prompt_loader import load_prompt_template
from app.helpers.enums import HealthIssue, MentalHealthConcern
from app.helpers.date_utils import utc_now

logger = logging.getLogger(__name__)

NOT_SPECIFIED = 'Not specified'
NONE_SPECIFIED = 'None specified'
DEFAULT_LEVEL_CONTEXT = 'beginner level'


class WeeklyPlanAgent:
    """
    AI Agent producing a JSON array of days, each with 2-3 timed wellness tasks.
    """

    def __init__(self, gemini_client: GeminiClient):
        self.gemini_client = gemini_client
        self.prompt_template = load_prompt_template("weekly_plan_prompt.txt")
        logger.info("WeeklyPlanAgent initialized")

    @staticmethod
    def build_guidance(health_issues: List[str], mental_health: List[str]) -> str:
        """Condition-specific instructions appended to the plan prompt."""
        lines = []
        if HealthIssue.BACK_POSTURE.value in health_issues:
            lines.append('- Include daily posture correction exercises and reminders')
        if HealthIssue.ANXIETY_STRESS.value in health_issues or MentalHealthConcern.ANXIETY.value in mental_health:
            lines.append('- Include stress management activities, breathing exercises, meditation')
        if HealthIssue.DEPRESSION_MOOD.value in health_issues or MentalHealthConcern.DEPRESSION.value in mental_health:
            lines.append('- Include mood-boosting activities, social interactions, light exercise')
        if HealthIssue.SLEEP.value in health_issues:
            lines.append('- Include sleep hygiene tasks, evening routines, relaxation')
        return '\n'.join(lines)

    def build_prompt(self, profile=None, preferences: Optional[str] = None, today: date = None) -> str:
        today = today or utc_now().date()
        health_issues = list(getattr(profile, 'health_issues', None) or [])
        mental_health = list(getattr(profile, 'mental_health', None) or [])

        if profile is not None:
            level_context = f"Level {profile.level} user with {profile.xp} XP"
        else:
            level_context = DEFAULT_LEVEL_CONTEXT

        return self.prompt_template.format(
            weekday=today.strftime('%A'),
            today=today.isoformat(),
            age=getattr(profile, 'age', None) or NOT_SPECIFIED,
            height=getattr(profile, 'height', None) or NOT_SPECIFIED,
            weight=getattr(profile, 'weight', None) or NOT_SPECIFIED,
            health_issues=', '.join(health_issues) if health_issues else NONE_SPECIFIED,
            mental_health=', '.join(mental_health) if mental_health else NONE_SPECIFIED,
            level_context=level_context,
            preferences=f"- Preferences: {preferences}\n" if preferences else '',
            guidance=self.build_guidance(health_issues, mental_health),
        )

    def generate_week_plan(
        self,
        profile=None,
        preferences: Optional[str] = None,
        today: date = None
    ) -> List[Any]:
        """
        Ask Gemini for the week plan.

        Returns:
            The raw list of day objects as returned by the model.

        Raises:
            GeminiError: If the call fails or the answer is not a JSON array.
        """
        prompt = self.build_prompt(profile, preferences, today)
        week_plan = self.gemini_client.generate_json_content(prompt, expect="array", max_tokens=8192)
        if not isinstance(week_plan, list):
            raise GeminiError("Weekly plan is not a JSON array")

        logger.info(f"Generated weekly plan with {len(week_plan)} days")
        return week_plan
