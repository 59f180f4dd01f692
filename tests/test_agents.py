# tests/test_agents.py

from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest

from app.ai_agent.chat_agent import ChatAgent
from app.ai_agent.mappers import PlannerMapper, TaskMapper
from app.ai_agent.planner_agent import WeeklyPlanAgent
from app.ai_agent.task_agent import TaskParseAgent
from tests.fakes import FakeGeminiClient

NOW = datetime(2026, 3, 10, 14, 30)


def test_parsed_task_defaults() -> None:
    fields = TaskMapper.map_parsed_task({'title': 'Read', 'scheduledTime': 'soon'}, now=NOW)
    assert fields == {
        'title': 'Read',
        'description': '',
        'scheduled_time': datetime(2026, 3, 11, 9, 0),
        'duration': 30,
        'xp_reward': 50,
    }


def test_parsed_task_normalizes_offset_and_clamps_xp() -> None:
    fields = TaskMapper.map_parsed_task(
        {'title': 'Run', 'scheduledTime': '2026-03-12T18:00:00+02:00', 'duration': 45, 'xpReward': 900},
        now=NOW,
    )
    assert fields['scheduled_time'] == datetime(2026, 3, 12, 16, 0)
    assert fields['duration'] == 45
    assert fields['xp_reward'] == 500

    low = TaskMapper.map_parsed_task({'title': 'Nap', 'xpReward': 3}, now=NOW)
    assert low['xp_reward'] == 10


def test_parsed_task_requires_title() -> None:
    with pytest.raises(ValueError):
        TaskMapper.map_parsed_task({'title': '  '}, now=NOW)


def test_detected_task_defaults() -> None:
    fields = TaskMapper.map_detected_task({'scheduledTime': None, 'duration': None}, now=NOW)
    assert fields['title'] == 'New Task'
    assert fields['scheduled_time'] == NOW + timedelta(hours=24)
    assert fields['duration'] == 30
    assert fields['xp_reward'] == 50


def test_week_plan_skips_malformed_entries() -> None:
    week_plan = [
        {
            'day': 'Tuesday',
            'date': '2026-03-10',
            'tasks': [
                {'title': 'Morning Yoga', 'time': '07:00', 'duration': 15, 'category': 'wellness', 'xpReward': 30},
                {'title': 'Bad time', 'time': 'evening'},
                {'title': 'Out of range', 'time': '25:00'},
                {'time': '12:00'},
            ],
        },
        {'day': 'Wednesday', 'date': 'not a date', 'tasks': [{'title': 'Lost', 'time': '08:00'}]},
        'garbage',
        {'day': 'Thursday', 'date': '2026-03-12', 'tasks': [{'title': 'Evening walk', 'time': '19:30'}]},
    ]

    tasks = PlannerMapper.map_week_plan(week_plan)

    assert [t['title'] for t in tasks] == ['Morning Yoga', 'Evening walk']
    assert tasks[0]['scheduled_time'] == datetime(2026, 3, 10, 7, 0)
    assert tasks[0]['category'] == 'wellness'
    assert tasks[0]['xp_reward'] == 30
    assert tasks[1]['scheduled_time'] == datetime(2026, 3, 12, 19, 30)
    assert tasks[1]['duration'] == 30
    assert all(t['auto_generated'] for t in tasks)


def test_task_agent_parse_sends_request_and_time() -> None:
    fake = FakeGeminiClient(['{"title": "Gym", "scheduledTime": "2026-03-11T18:00:00Z", "duration": 60}'])
    fields = TaskParseAgent(fake).parse_task("gym tomorrow at 6pm", now=NOW)

    assert fields['title'] == 'Gym'
    assert fields['scheduled_time'] == datetime(2026, 3, 11, 18, 0)
    assert 'gym tomorrow at 6pm' in fake.prompts[0]
    assert '2026-03-10T14:30:00Z' in fake.prompts[0]


def test_task_agent_detection_not_a_task() -> None:
    fake = FakeGeminiClient(['{"isTaskRequest": false, "taskData": null}'])
    assert TaskParseAgent(fake).detect_task_request("how are you?") is None


def test_chat_agent_mentions_created_task() -> None:
    fake = FakeGeminiClient(["  Got it!  "])
    profile = SimpleNamespace(level=3, xp=1200, tasks_completed=7)
    task = SimpleNamespace(title='Stretch', scheduled_time=datetime(2026, 3, 11, 15, 0))
    agent = ChatAgent(fake)

    reply = agent.reply("remind me to stretch", agent.build_user_context(profile), task)

    assert reply == "Got it!"
    assert 'User info: Level 3, 1200 XP, 7 tasks completed.' in fake.prompts[0]
    assert 'I just created a task for the user: "Stretch"' in fake.prompts[0]


def test_planner_prompt_uses_profile() -> None:
    agent = WeeklyPlanAgent(FakeGeminiClient())
    profile = SimpleNamespace(
        age=34, height=170, weight=65, level=2, xp=600,
        health_issues=['Back/Posture Problems', 'Sleep Issues'],
        mental_health=['Anxiety'],
    )

    prompt = agent.build_prompt(profile, preferences='no running', today=date(2026, 3, 10))

    assert 'Today is Tuesday, 2026-03-10' in prompt
    assert '- Age: 34' in prompt
    assert '- Health Issues: Back/Posture Problems, Sleep Issues' in prompt
    assert 'Level 2 user with 600 XP' in prompt
    assert '- Preferences: no running' in prompt
    assert 'posture correction exercises' in prompt
    assert 'stress management activities' in prompt
    assert 'sleep hygiene tasks' in prompt
    assert 'mood-boosting activities' not in prompt


def test_planner_prompt_without_profile() -> None:
    prompt = WeeklyPlanAgent(FakeGeminiClient()).build_prompt(None, today=date(2026, 3, 10))
    assert '- Age: Not specified' in prompt
    assert '- Mental Health Concerns: None specified' in prompt
    assert 'beginner level' in prompt
