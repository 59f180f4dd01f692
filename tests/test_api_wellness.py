# tests/test_api_wellness.py

import pytest

from app.helpers.exception_handler import CustomException
from app.services.srv_wellness import analysis_slot
from tests.helpers import GOOD_POSE, as_payload, face_with_eyebrows, smiling_face


def _keypoints(**overrides):
    points = {**GOOD_POSE, **overrides}
    return [{'name': name, 'x': x, 'y': y, 'score': 0.9} for name, (x, y) in points.items()]


def test_mood_from_landmarks(client) -> None:
    response = client.post('/api/wellness/mood/analyze', json={
        'user_id': 'user-1', 'landmarks': as_payload(smiling_face()),
    })

    assert response.status_code == 200, response.text
    result = response.json()['data']
    assert result['mood'] == 'Happy'
    assert result['confidence'] == 0.85
    assert result['is_smiling'] is True
    assert result['suggestion'] == '😊 Great mood! Keep it up!'

    history = client.get('/api/wellness/history/user-1').json()['data']
    assert len(history) == 1
    assert history[0]['label'] == 'Happy'
    assert history[0]['type'] == 'mood'


def test_mood_from_blendshapes(client) -> None:
    result = client.post('/api/wellness/mood/analyze', json={
        'landmarks': as_payload(face_with_eyebrows(0.2)),
        'blendshapes': {'mouthFrownLeft': 0.7},
    }).json()['data']
    assert result['mood'] == 'Sad'
    assert result['suggestion'] == '💡 Take a deep breath, try a quick stretch'


def test_mood_from_expressions(client) -> None:
    result = client.post('/api/wellness/mood/analyze', json={
        'expressions': {'neutral': 0.2, 'angry': 0.7, 'happy': 0.1},
    }).json()['data']
    assert result['mood'] == 'Stressed'
    assert result['confidence'] == 0.7


def test_too_few_landmarks_is_not_recorded(client) -> None:
    result = client.post('/api/wellness/mood/analyze', json={
        'user_id': 'user-1', 'landmarks': [{'x': 0.5, 'y': 0.5}] * 5,
    }).json()['data']
    assert result['mood'] == 'Analyzing...'
    assert client.get('/api/wellness/history/user-1').json()['data'] == []


def test_mood_requires_input(client) -> None:
    assert client.post('/api/wellness/mood/analyze', json={'user_id': 'user-1'}).status_code == 422


def test_frame_analysis_unavailable_when_vision_disabled(client) -> None:
    response = client.post('/api/wellness/mood/analyze', json={'user_id': 'user-1', 'frame_data': 'aGVsbG8='})
    assert response.status_code == 503
    assert response.json()['success'] is False


def test_posture_good(client) -> None:
    result = client.post('/api/wellness/posture/analyze', json={'keypoints': _keypoints()}).json()['data']
    assert result['status'] == 'good'
    assert result['score'] == 100
    assert result['issues'] == []
    assert result['detected'] is True


def test_posture_forward_head(client) -> None:
    result = client.post('/api/wellness/posture/analyze', json={
        'keypoints': _keypoints(nose=(400.0, 100.0)),
    }).json()['data']
    assert result['status'] == 'forward_head'
    assert result['score'] == 75
    assert result['suggestions'] == ['💡 Pull your head back, align with shoulders']


def test_posture_insufficient_keypoints(client) -> None:
    keypoints = [k for k in _keypoints() if k['name'] != 'right_hip']
    result = client.post('/api/wellness/posture/analyze', json={
        'user_id': 'user-1', 'keypoints': keypoints,
    }).json()['data']
    assert result['detected'] is False
    assert result['score'] == 0
    assert result['issues'] == ['Insufficient keypoints detected']
    assert client.get('/api/wellness/history/user-1').json()['data'] == []


def test_history_reset(client) -> None:
    client.post('/api/wellness/posture/analyze', json={'user_id': 'user-1', 'keypoints': _keypoints()})
    client.post('/api/wellness/posture/analyze', json={
        'user_id': 'user-1', 'keypoints': _keypoints(left_shoulder=(270.0, 260.0)),
    })

    history = client.get('/api/wellness/history/user-1').json()['data']
    assert [entry['label'] for entry in history] == ['good', 'leaning_left']

    assert client.delete('/api/wellness/history/user-1').status_code == 200
    assert client.get('/api/wellness/history/user-1').json()['data'] == []


def test_overlapping_analysis_is_rejected() -> None:
    with analysis_slot('user-1'):
        with pytest.raises(CustomException) as exc_info:
            with analysis_slot('user-1'):
                pass
        assert exc_info.value.http_code == 409

        with analysis_slot('user-2'):
            pass

    with analysis_slot('user-1'):
        pass
