"""
Posture Classifier Module for Ria.

Scores upper-body posture from pixel-space body keypoints (MoveNet
naming). Thresholds assume a webcam frame of roughly 640x480.
"""

import random
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from app.helpers.enums import PostureType
from app.vision.core.data_types import Keypoint, POSTURE_KEYPOINTS
from app.vision.modules.encouragement import pick_posture_encouragement, posture_suggestions

MAX_SCORE = 100

MIN_TORSO_LENGTH_PX = 150.0
MAX_SHOULDER_DIFF_PX = 20.0
MAX_HEAD_OFFSET_PX = 30.0

SLOUCH_PENALTY = 30
LEAN_PENALTY = 20
FORWARD_HEAD_PENALTY = 25

ISSUE_SLOUCHING = 'Slouching detected'
ISSUE_LEANING_LEFT = 'Leaning left'
ISSUE_LEANING_RIGHT = 'Leaning right'
ISSUE_FORWARD_HEAD = 'Forward head posture'
ISSUE_NO_POSE = 'No pose detected'
ISSUE_INSUFFICIENT = 'Insufficient keypoints detected'

# Highest priority first
STATUS_PRIORITY = [
    (ISSUE_SLOUCHING, PostureType.SLOUCHING),
    (ISSUE_LEANING_LEFT, PostureType.LEANING_LEFT),
    (ISSUE_LEANING_RIGHT, PostureType.LEANING_RIGHT),
    (ISSUE_FORWARD_HEAD, PostureType.FORWARD_HEAD),
]


@dataclass
class PostureResult:
    status: PostureType
    score: int
    issues: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    encouragement: str = ''
    detected: bool = True


def _undetected(issue: str) -> PostureResult:
    return PostureResult(status=PostureType.GOOD, score=0, issues=[issue], detected=False)


def analyze_posture(
    keypoints: Optional[Mapping[str, Keypoint]],
    rng: Optional[random.Random] = None
) -> PostureResult:
    """
    Classify posture.

    Args:
        keypoints: Keypoints of the first detected pose, keyed by name.
        rng: Random source for the encouragement pick.

    Returns:
        PostureResult. Missing input yields status GOOD with score 0 and
        detected=False rather than an exception.
    """
    if not keypoints:
        return _undetected(ISSUE_NO_POSE)

    if any(name not in keypoints for name in POSTURE_KEYPOINTS):
        return _undetected(ISSUE_INSUFFICIENT)

    nose = keypoints['nose']
    left_shoulder = keypoints['left_shoulder']
    right_shoulder = keypoints['right_shoulder']
    left_hip = keypoints['left_hip']
    right_hip = keypoints['right_hip']

    issues: List[str] = []
    score = MAX_SCORE

    shoulder_mid_y = (left_shoulder.y + right_shoulder.y) / 2
    hip_mid_y = (left_hip.y + right_hip.y) / 2
    torso_length = abs(shoulder_mid_y - hip_mid_y)
    if torso_length < MIN_TORSO_LENGTH_PX:
        issues.append(ISSUE_SLOUCHING)
        score -= SLOUCH_PENALTY

    shoulder_diff = abs(left_shoulder.y - right_shoulder.y)
    if shoulder_diff > MAX_SHOULDER_DIFF_PX:
        # image y grows downwards: the lower shoulder has the larger y
        if left_shoulder.y > right_shoulder.y:
            issues.append(ISSUE_LEANING_LEFT)
        else:
            issues.append(ISSUE_LEANING_RIGHT)
        score -= LEAN_PENALTY

    shoulder_mid_x = (left_shoulder.x + right_shoulder.x) / 2
    head_offset = abs(nose.x - shoulder_mid_x)
    if head_offset > MAX_HEAD_OFFSET_PX:
        issues.append(ISSUE_FORWARD_HEAD)
        score -= FORWARD_HEAD_PENALTY

    status = PostureType.GOOD
    for issue, posture_type in STATUS_PRIORITY:
        if issue in issues:
            status = posture_type
            break

    return PostureResult(
        status=status,
        score=max(0, score),
        issues=issues,
        suggestions=posture_suggestions(issues),
        encouragement=pick_posture_encouragement(status, rng),
    )
