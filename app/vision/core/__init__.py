"""
Core module for Ria vision: landmark data types and the detection adapter.

The MediaPipe-backed detector lives in `app.vision.core.detector` and is
imported on demand, so the classifiers stay usable without model files.
"""

from .data_types import (
    Point3D, Keypoint, LandmarkSet, LandmarkType, DetectionResult,
    FaceLandmarkIndex, POSE_KEYPOINT_NAMES, POSTURE_KEYPOINTS,
)

__all__ = [
    'Point3D', 'Keypoint', 'LandmarkSet', 'LandmarkType', 'DetectionResult',
    'FaceLandmarkIndex', 'POSE_KEYPOINT_NAMES', 'POSTURE_KEYPOINTS',
]
