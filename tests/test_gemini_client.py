# tests/test_gemini_client.py

import pytest

from app.ai_agent.gemini_client import GeminiClient, GeminiError, extract_json


def test_extract_fenced_object() -> None:
    text = 'Here you go:\n```json\n{"title": "Gym", "duration": 45}\n```\nEnjoy!'
    assert extract_json(text) == {'title': 'Gym', 'duration': 45}


def test_extract_bare_object_with_prose() -> None:
    text = 'Sure! {"isTaskRequest": false, "taskData": null} Hope that helps.'
    assert extract_json(text) == {'isTaskRequest': False, 'taskData': None}


def test_extract_array() -> None:
    text = '```\n[{"day": "Monday", "tasks": []}]\n```'
    assert extract_json(text, expect="array") == [{'day': 'Monday', 'tasks': []}]


def test_trailing_commas_are_repaired() -> None:
    text = '{"title": "Walk", "tags": ["a", "b",],}'
    assert extract_json(text) == {'title': 'Walk', 'tags': ['a', 'b']}


@pytest.mark.parametrize('text', ['', 'no json here', '{"title": "broken"'])
def test_unusable_text_raises(text) -> None:
    with pytest.raises(GeminiError):
        extract_json(text)


def test_array_expected_but_object_given() -> None:
    with pytest.raises(GeminiError):
        extract_json('{"day": "Monday"}', expect="array")


def test_client_without_api_key_fails_on_use() -> None:
    client = GeminiClient(api_key='')
    with pytest.raises(GeminiError, match="GEMINI_API_KEY"):
        client.generate_content("hello")
