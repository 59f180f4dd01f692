"""
Data Types Module for Ria vision.

Landmark containers shared by the detection adapters and the heuristic
classifiers. Face landmarks stay normalized (0-1), pose keypoints are in
pixel space and keyed by name.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np


class LandmarkType(Enum):
    """Enum for landmark source."""
    POSE = auto()
    FACE = auto()


@dataclass(frozen=True)
class Point3D:
    """
    A single landmark.

    Attributes:
        x: X coordinate (normalized 0-1 for face mesh).
        y: Y coordinate, growing downwards.
        z: Depth.
        visibility: Confidence (0-1), None when the model does not report it.
    """
    x: float
    y: float
    z: float = 0.0
    visibility: Optional[float] = None

    def to_2d(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class Keypoint:
    """A named body keypoint in pixel coordinates."""
    name: str
    x: float
    y: float
    score: Optional[float] = None


@dataclass
class LandmarkSet:
    """
    Face mesh landmarks of one frame.

    Attributes:
        landmarks: Ordered points, index-compatible with the MediaPipe face mesh.
        landmark_type: Source of the landmarks.
        blendshapes: Blendshape category name -> score, empty when unavailable.
    """
    landmarks: List[Point3D]
    landmark_type: LandmarkType = LandmarkType.FACE
    blendshapes: Dict[str, float] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.landmarks)

    def __getitem__(self, index: int) -> Point3D:
        return self.landmarks[index]


@dataclass
class DetectionResult:
    """
    Output of one detection pass.

    Attributes:
        pose_keypoints: Body keypoints by name, empty when no pose was found.
        face_landmarks: Face mesh of the first face, None when no face was found.
        frame_width: Width of the source frame.
        frame_height: Height of the source frame.
        is_valid: True when the frame was processed.
        error_message: Reason when is_valid is False.
    """
    pose_keypoints: Dict[str, Keypoint] = field(default_factory=dict)
    face_landmarks: Optional[LandmarkSet] = None
    frame_width: int = 0
    frame_height: int = 0
    is_valid: bool = False
    error_message: Optional[str] = None

    def has_pose(self) -> bool:
        return bool(self.pose_keypoints)

    def has_face(self) -> bool:
        return self.face_landmarks is not None and len(self.face_landmarks) > 0


class FaceLandmarkIndex:
    """Face mesh indices used by the mood heuristics (468/478 point mesh)."""
    NOSE_TIP = 1
    UPPER_LIP_CENTER = 13
    LOWER_LIP_CENTER = 14
    LEFT_MOUTH_CORNER = 61
    RIGHT_MOUTH_CORNER = 291
    LEFT_EYEBROW = 70
    RIGHT_EYEBROW = 300
    CHIN = 152

    FULL_MESH_SIZE = 468


# MediaPipe Pose index -> MoveNet-style keypoint name
POSE_KEYPOINT_NAMES: Dict[int, str] = {
    0: 'nose',
    2: 'left_eye',
    5: 'right_eye',
    7: 'left_ear',
    8: 'right_ear',
    11: 'left_shoulder',
    12: 'right_shoulder',
    13: 'left_elbow',
    14: 'right_elbow',
    15: 'left_wrist',
    16: 'right_wrist',
    23: 'left_hip',
    24: 'right_hip',
    25: 'left_knee',
    26: 'right_knee',
    27: 'left_ankle',
    28: 'right_ankle',
}

POSTURE_KEYPOINTS: Tuple[str, ...] = (
    'nose', 'left_shoulder', 'right_shoulder', 'left_hip', 'right_hip'
)
