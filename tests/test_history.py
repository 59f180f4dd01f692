# tests/test_history.py

from datetime import datetime, timedelta

from app.vision.modules.history import WellnessHistory

T0 = datetime(2026, 5, 1, 10, 0, 0)


def test_same_second_same_label_is_dropped() -> None:
    history = WellnessHistory()
    assert history.record('u1', 'Happy', 'mood', now=T0) is True
    assert history.record('u1', 'Happy', 'mood', now=T0 + timedelta(milliseconds=300)) is False
    assert len(history.entries('u1')) == 1


def test_label_change_or_new_second_is_recorded() -> None:
    history = WellnessHistory()
    history.record('u1', 'Happy', 'mood', now=T0)
    assert history.record('u1', 'Sad', 'mood', now=T0) is True
    assert history.record('u1', 'Sad', 'mood', now=T0 + timedelta(seconds=1)) is True

    entries = history.entries('u1')
    assert [e.label for e in entries] == ['Happy', 'Sad', 'Sad']
    assert entries[-1].time == '10:00:01'


def test_keeps_last_entries_only() -> None:
    history = WellnessHistory(max_entries=20)
    for i in range(25):
        history.record('u1', 'good', 'posture', now=T0 + timedelta(seconds=i))

    entries = history.entries('u1')
    assert len(entries) == 20
    assert entries[0].time == '10:00:05'
    assert entries[-1].time == '10:00:24'


def test_users_are_isolated_and_clear() -> None:
    history = WellnessHistory()
    history.record('u1', 'Happy', 'mood', suggestion='keep going', now=T0)
    history.record('u2', 'good', 'posture', now=T0)

    history.clear('u1')
    assert history.entries('u1') == []
    assert history.entries('u2')[0].to_dict() == {
        'time': '10:00:00', 'label': 'good', 'type': 'posture', 'suggestion': None,
    }
