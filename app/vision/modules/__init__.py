"""
Heuristic classifiers and result history for Ria vision.
"""

from .mood_classifier import MoodResult, analyze_mood, classify_mood, classify_expressions, detect_smile
from .posture_classifier import PostureResult, analyze_posture
from .history import HistoryEntry, WellnessHistory

__all__ = [
    'MoodResult', 'analyze_mood', 'classify_mood', 'classify_expressions', 'detect_smile',
    'PostureResult', 'analyze_posture',
    'HistoryEntry', 'WellnessHistory',
]
