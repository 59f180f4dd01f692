# tests/test_mood_classifier.py

import random

from app.helpers.enums import MoodType
from app.vision.modules.encouragement import MOOD_ENCOURAGEMENTS
from app.vision.modules.mood_classifier import (
    analyze_mood, classify_expressions, classify_mood, detect_smile,
)
from tests.helpers import face_with_eyebrows, make_face_mesh, smiling_face


def test_too_few_landmarks_is_analyzing() -> None:
    assert classify_mood(make_face_mesh(size=9)) == MoodType.ANALYZING
    assert classify_mood([]) == MoodType.ANALYZING


def test_geometric_smile_is_happy() -> None:
    face = smiling_face()
    assert detect_smile(face) is True
    assert classify_mood(face) == MoodType.HAPPY


def test_smile_needs_full_mesh() -> None:
    assert detect_smile(smiling_face(size=400)) is False


def test_closed_mouth_with_low_corners_is_not_smiling() -> None:
    # zero mouth height gives an infinite ratio, but corners are level with the nose
    face = make_face_mesh(p61=(0.4, 0.6), p291=(0.6, 0.6), p13=(0.5, 0.6), p14=(0.5, 0.6), p1=(0.5, 0.6))
    assert detect_smile(face) is False


def test_collapsed_mouth_is_not_smiling() -> None:
    # corners 0.2 above the nose tip, but no mouth width or height at all
    face = make_face_mesh(p1=(0.5, 0.7))
    assert detect_smile(face) is False
    assert classify_mood(face) == MoodType.NEUTRAL


def test_smile_ratio_must_exceed_threshold() -> None:
    # mouth height 0.125, corners 0.0625 above the nose tip
    lips = dict(p13=(0.5, 0.0), p14=(0.5, 0.125), p1=(0.5, 0.0625))
    assert detect_smile(make_face_mesh(p61=(0.25, 0.0), p291=(0.6875, 0.0), **lips)) is False
    assert detect_smile(make_face_mesh(p61=(0.25, 0.0), p291=(0.75, 0.0), **lips)) is True


def test_smile_elevation_must_exceed_threshold() -> None:
    # width-to-height ratio 4
    mouth = dict(p61=(0.25, 0.0), p291=(0.75, 0.0), p13=(0.5, 0.0), p14=(0.5, 0.125))
    assert detect_smile(make_face_mesh(p1=(0.5, 0.05), **mouth)) is False
    assert detect_smile(make_face_mesh(p1=(0.5, 0.0625), **mouth)) is True


def test_blendshape_scores_must_exceed_threshold() -> None:
    face = make_face_mesh()
    assert classify_mood(face, {'mouthSmileLeft': 0.3}) == MoodType.NEUTRAL
    assert classify_mood(face, {'mouthSmileLeft': 0.31}) == MoodType.HAPPY
    assert classify_mood(face, {'mouthFrownLeft': 0.3}) == MoodType.NEUTRAL
    assert classify_mood(face, {'mouthFrownLeft': 0.31}) == MoodType.SAD


def test_eyebrow_ratio_boundaries() -> None:
    def face(eyebrow_y):
        # nose tip at 0, chin at 1: face height 1
        return make_face_mesh(p1=(0.5, 0.0), p152=(0.5, 1.0), p70=(0.4, eyebrow_y), p300=(0.6, eyebrow_y))

    assert classify_mood(face(-0.29)) == MoodType.STRESSED
    assert classify_mood(face(-0.3)) == MoodType.SAD
    assert classify_mood(face(-0.39)) == MoodType.SAD
    assert classify_mood(face(-0.4)) == MoodType.NEUTRAL


def test_blendshape_smile_wins_over_geometry() -> None:
    face = face_with_eyebrows(0.45)
    assert classify_mood(face, {'mouthSmileLeft': 0.6, 'mouthSmileRight': 0.1}) == MoodType.HAPPY


def test_blendshape_frown_is_sad() -> None:
    assert classify_mood(make_face_mesh(), {'mouthFrownRight': 0.5}) == MoodType.SAD


def test_weak_blendshapes_fall_through_to_geometry() -> None:
    face = face_with_eyebrows(0.2)
    assert classify_mood(face, {'mouthSmileLeft': 0.3, 'mouthFrownLeft': 0.1}) == MoodType.NEUTRAL


def test_eyebrow_ratio_labels() -> None:
    assert classify_mood(face_with_eyebrows(0.45)) == MoodType.STRESSED
    assert classify_mood(face_with_eyebrows(0.4)) == MoodType.SAD
    assert classify_mood(face_with_eyebrows(0.2)) == MoodType.NEUTRAL


def test_eyebrows_skipped_without_face_height() -> None:
    face = make_face_mesh(p1=(0.5, 0.5), p152=(0.5, 0.5), p70=(0.4, 0.49), p300=(0.6, 0.49))
    assert classify_mood(face) == MoodType.NEUTRAL


def test_partial_mesh_skips_eyebrows_and_lowers_confidence() -> None:
    result = analyze_mood(make_face_mesh(size=100))
    assert result.mood == MoodType.NEUTRAL
    assert result.confidence == 0.5
    assert result.is_smiling is False


def test_analyze_mood_full_mesh() -> None:
    result = analyze_mood(smiling_face(), rng=random.Random(1))
    assert result.mood == MoodType.HAPPY
    assert result.confidence == 0.85
    assert result.is_smiling is True
    assert result.encouragement in MOOD_ENCOURAGEMENTS[MoodType.HAPPY]


def test_classify_expressions_argmax() -> None:
    result = classify_expressions({'neutral': 0.1, 'happy': 0.8, 'sad': 0.1})
    assert result.mood == MoodType.HAPPY
    assert result.confidence == 0.8
    assert result.is_smiling is True


def test_classify_expressions_mapping() -> None:
    assert classify_expressions({'angry': 0.7, 'neutral': 0.2}).mood == MoodType.STRESSED
    assert classify_expressions({'surprised': 0.9}).mood == MoodType.NEUTRAL
    assert classify_expressions({'sad': 0.6, 'happy': 0.3}).is_smiling is False


def test_classify_expressions_tie_keeps_neutral() -> None:
    result = classify_expressions({'neutral': 0.5, 'sad': 0.5})
    assert result.mood == MoodType.NEUTRAL
