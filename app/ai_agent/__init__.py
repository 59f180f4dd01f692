"""
AI Agent package for task parsing, chat and weekly planning using Gemini API.
"""
from app.ai_agent.gemini_client import GeminiClient, GeminiError, get_gemini_client
from app.ai_agent.task_agent import TaskParseAgent
from app.ai_agent.chat_agent import ChatAgent
from app.ai_agent.planner_agent import WeeklyPlanAgent

__all__ = ['GeminiClient', 'GeminiError', 'get_gemini_client', 'TaskParseAgent', 'ChatAgent', 'WeeklyPlanAgent']
