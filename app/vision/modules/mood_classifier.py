"""
Mood Classifier Module for Ria.

Heuristic mood labelling from face mesh geometry and, when the face model
provides them, blendshape scores.
"""

import math
import random
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Tuple

import numpy as np

from app.helpers.enums import MoodType
from app.vision.core.data_types import FaceLandmarkIndex, Point3D
from app.vision.modules.encouragement import pick_mood_encouragement

MIN_LANDMARKS = 10

SMILE_RATIO_THRESHOLD = 3.5
SMILE_ELEVATION_THRESHOLD = 0.05
BLENDSHAPE_THRESHOLD = 0.3
STRESSED_EYEBROW_RATIO = 0.3
SAD_EYEBROW_RATIO = 0.4

FULL_MESH_CONFIDENCE = 0.85
PARTIAL_MESH_CONFIDENCE = 0.5

# face-api.js expression name -> mood
EXPRESSION_MOOD_MAP: Dict[str, MoodType] = {
    'happy': MoodType.HAPPY,
    'sad': MoodType.SAD,
    'angry': MoodType.STRESSED,
    'neutral': MoodType.NEUTRAL,
    'surprised': MoodType.NEUTRAL,
    'disgusted': MoodType.STRESSED,
    'fearful': MoodType.STRESSED,
}


@dataclass
class MoodResult:
    mood: MoodType
    confidence: float
    is_smiling: bool
    encouragement: str


def _distance_2d(a: Point3D, b: Point3D) -> float:
    return float(np.linalg.norm(a.to_2d() - b.to_2d()))


def detect_smile(landmarks: Sequence[Point3D]) -> bool:
    """
    Smile test on a full face mesh: wide mouth relative to its opening and
    mouth corners raised relative to the nose tip.
    """
    if not landmarks or len(landmarks) < FaceLandmarkIndex.FULL_MESH_SIZE:
        return False

    left_corner = landmarks[FaceLandmarkIndex.LEFT_MOUTH_CORNER]
    right_corner = landmarks[FaceLandmarkIndex.RIGHT_MOUTH_CORNER]
    upper_lip = landmarks[FaceLandmarkIndex.UPPER_LIP_CENTER]
    lower_lip = landmarks[FaceLandmarkIndex.LOWER_LIP_CENTER]
    nose_tip = landmarks[FaceLandmarkIndex.NOSE_TIP]

    mouth_width = _distance_2d(left_corner, right_corner)
    mouth_height = _distance_2d(upper_lip, lower_lip)

    mouth_center_y = (left_corner.y + right_corner.y) / 2
    corner_elevation = nose_tip.y - mouth_center_y

    if mouth_height > 0:
        width_to_height = mouth_width / mouth_height
    else:
        # fully collapsed mouth has no ratio
        width_to_height = math.inf if mouth_width > 0 else 0.0
    return width_to_height > SMILE_RATIO_THRESHOLD and corner_elevation > SMILE_ELEVATION_THRESHOLD


def _blendshape_scores(blendshapes: Mapping[str, float]) -> Tuple[float, float]:
    """Strongest smile and frown scores, covering left/right split categories."""
    smile = max((score for name, score in blendshapes.items() if name.startswith('mouthSmile')), default=0.0)
    frown = max((score for name, score in blendshapes.items() if name.startswith('mouthFrown')), default=0.0)
    return smile, frown


def _eyebrow_mood(landmarks: Sequence[Point3D]) -> Optional[MoodType]:
    if len(landmarks) <= FaceLandmarkIndex.RIGHT_EYEBROW:
        return None

    left_eyebrow = landmarks[FaceLandmarkIndex.LEFT_EYEBROW]
    right_eyebrow = landmarks[FaceLandmarkIndex.RIGHT_EYEBROW]
    nose_tip = landmarks[FaceLandmarkIndex.NOSE_TIP]
    chin = landmarks[FaceLandmarkIndex.CHIN]

    eyebrow_y = (left_eyebrow.y + right_eyebrow.y) / 2
    face_height = abs(nose_tip.y - chin.y)
    if face_height <= 0:
        return None

    eyebrow_ratio = (nose_tip.y - eyebrow_y) / face_height
    if eyebrow_ratio < STRESSED_EYEBROW_RATIO:
        return MoodType.STRESSED
    if eyebrow_ratio < SAD_EYEBROW_RATIO:
        return MoodType.SAD
    return None


def classify_mood(
    landmarks: Sequence[Point3D],
    blendshapes: Optional[Mapping[str, float]] = None
) -> MoodType:
    """
    Label a face mesh.

    Order of checks: landmark count, blendshapes (smile then frown),
    geometric smile, eyebrow height ratio, then Neutral.
    """
    if not landmarks or len(landmarks) < MIN_LANDMARKS:
        return MoodType.ANALYZING

    if blendshapes:
        smile_score, frown_score = _blendshape_scores(blendshapes)
        if smile_score > BLENDSHAPE_THRESHOLD:
            return MoodType.HAPPY
        if frown_score > BLENDSHAPE_THRESHOLD:
            return MoodType.SAD

    if detect_smile(landmarks):
        return MoodType.HAPPY

    return _eyebrow_mood(landmarks) or MoodType.NEUTRAL


def analyze_mood(
    landmarks: Sequence[Point3D],
    blendshapes: Optional[Mapping[str, float]] = None,
    rng: Optional[random.Random] = None
) -> MoodResult:
    landmarks = landmarks or []
    mood = classify_mood(landmarks, blendshapes)
    confidence = FULL_MESH_CONFIDENCE if len(landmarks) >= FaceLandmarkIndex.FULL_MESH_SIZE else PARTIAL_MESH_CONFIDENCE

    return MoodResult(
        mood=mood,
        confidence=confidence,
        is_smiling=detect_smile(landmarks),
        encouragement=pick_mood_encouragement(mood, rng),
    )


def classify_expressions(
    expressions: Mapping[str, float],
    rng: Optional[random.Random] = None
) -> MoodResult:
    """
    Map expression probabilities (face-api.js style) to a mood result.
    The winning probability becomes the confidence.
    """
    best_expression = 'neutral'
    best_probability = float(expressions.get('neutral', 0.0))

    for expression, probability in expressions.items():
        if probability > best_probability:
            best_expression = expression
            best_probability = float(probability)

    mood = EXPRESSION_MOOD_MAP.get(best_expression, MoodType.NEUTRAL)
    return MoodResult(
        mood=mood,
        confidence=best_probability,
        is_smiling=float(expressions.get('happy', 0.0)) > 0.5,
        encouragement=pick_mood_encouragement(mood, rng),
    )
