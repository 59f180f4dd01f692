"""
Vision Detector Module for Ria.

Wraps the MediaPipe Tasks API (PoseLandmarker, FaceLandmarker) behind a
single `detect(frame)` call and converts its output into the landmark
containers consumed by the mood/posture classifiers.
"""

import base64
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import cv2
import mediapipe as mp
import numpy as np
from mediapipe.tasks import python as mp_tasks
from mediapipe.tasks.python import vision as mp_vision

from .data_types import (
    DetectionResult, Keypoint, LandmarkSet, LandmarkType, Point3D, POSE_KEYPOINT_NAMES,
)

logger = logging.getLogger(__name__)


@dataclass
class DetectorConfig:
    """
    Configuration for VisionDetector.

    Attributes:
        pose_model_path: Path to pose_landmarker*.task, None disables pose.
        face_model_path: Path to face_landmarker.task, None disables face.
        min_pose_detection_confidence: Pose detection threshold.
        min_face_detection_confidence: Face detection threshold.
    """
    pose_model_path: Optional[str] = None
    face_model_path: Optional[str] = None
    min_pose_detection_confidence: float = 0.25
    min_face_detection_confidence: float = 0.5


def decode_frame(frame_data: str) -> np.ndarray:
    """Decode a base64 (optionally data-URI prefixed) image into a BGR array."""
    if ',' in frame_data:
        frame_data = frame_data.split(',', 1)[1]

    frame_bytes = base64.b64decode(frame_data)
    np_arr = np.frombuffer(frame_bytes, np.uint8)
    frame = cv2.imdecode(np_arr, cv2.IMREAD_COLOR)

    if frame is None:
        raise ValueError("Failed to decode image")
    return frame


class VisionDetector:
    """
    Single-image pose and face detector.

    Example:
        >>> detector = VisionDetector(DetectorConfig(pose_model_path="pose_landmarker_lite.task"))
        >>> result = detector.detect(frame)
        >>> if result.has_pose():
        ...     nose = result.pose_keypoints["nose"]
    """

    def __init__(self, config: DetectorConfig):
        """
        Args:
            config: Detector configuration.

        Raises:
            FileNotFoundError: If a configured model file does not exist.
        """
        self._config = config
        self._pose_landmarker: Optional[mp_vision.PoseLandmarker] = None
        self._face_landmarker: Optional[mp_vision.FaceLandmarker] = None

        self._init_pose_landmarker()
        self._init_face_landmarker()

    @staticmethod
    def _base_options(model_path: str) -> mp_tasks.BaseOptions:
        path = Path(model_path)
        if not path.exists():
            raise FileNotFoundError(f"Model not found: {model_path}")
        return mp_tasks.BaseOptions(model_asset_path=str(path))

    def _init_pose_landmarker(self) -> None:
        if self._config.pose_model_path is None:
            return

        options = mp_vision.PoseLandmarkerOptions(
            base_options=self._base_options(self._config.pose_model_path),
            running_mode=mp_vision.RunningMode.IMAGE,
            num_poses=1,
            min_pose_detection_confidence=self._config.min_pose_detection_confidence,
            output_segmentation_masks=False,
        )
        self._pose_landmarker = mp_vision.PoseLandmarker.create_from_options(options)
        logger.info(f"Pose landmarker loaded from {self._config.pose_model_path}")

    def _init_face_landmarker(self) -> None:
        if self._config.face_model_path is None:
            return

        options = mp_vision.FaceLandmarkerOptions(
            base_options=self._base_options(self._config.face_model_path),
            running_mode=mp_vision.RunningMode.IMAGE,
            num_faces=1,
            min_face_detection_confidence=self._config.min_face_detection_confidence,
            output_face_blendshapes=True,
            output_facial_transformation_matrixes=False,
        )
        self._face_landmarker = mp_vision.FaceLandmarker.create_from_options(options)
        logger.info(f"Face landmarker loaded from {self._config.face_model_path}")

    @property
    def has_pose_model(self) -> bool:
        return self._pose_landmarker is not None

    def detect(self, image: np.ndarray) -> DetectionResult:
        """
        Run every configured model on one BGR frame.

        Returns:
            DetectionResult with pixel-space pose keypoints and the normalized
            face mesh (with blendshapes) of the first detected person/face.
        """
        if image is None or image.size == 0:
            return DetectionResult(error_message="Empty frame")

        frame_height, frame_width = image.shape[:2]
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=image_rgb)

        result = DetectionResult(frame_width=frame_width, frame_height=frame_height, is_valid=True)

        if self._pose_landmarker is not None:
            pose_result = self._pose_landmarker.detect(mp_image)
            if pose_result.pose_landmarks:
                result.pose_keypoints = self._to_keypoints(
                    pose_result.pose_landmarks[0], frame_width, frame_height
                )

        if self._face_landmarker is not None:
            face_result = self._face_landmarker.detect(mp_image)
            if face_result.face_landmarks:
                blendshapes: Dict[str, float] = {}
                if face_result.face_blendshapes:
                    blendshapes = {
                        category.category_name: float(category.score)
                        for category in face_result.face_blendshapes[0]
                    }
                result.face_landmarks = LandmarkSet(
                    landmarks=[
                        Point3D(x=lm.x, y=lm.y, z=lm.z, visibility=getattr(lm, 'visibility', None))
                        for lm in face_result.face_landmarks[0]
                    ],
                    landmark_type=LandmarkType.FACE,
                    blendshapes=blendshapes,
                )

        return result

    @staticmethod
    def _to_keypoints(landmarks, frame_width: int, frame_height: int) -> Dict[str, Keypoint]:
        keypoints: Dict[str, Keypoint] = {}
        for index, name in POSE_KEYPOINT_NAMES.items():
            if index >= len(landmarks):
                continue
            lm = landmarks[index]
            keypoints[name] = Keypoint(
                name=name,
                x=float(lm.x) * frame_width,
                y=float(lm.y) * frame_height,
                score=getattr(lm, 'visibility', None),
            )
        return keypoints

    def close(self) -> None:
        if self._pose_landmarker is not None:
            self._pose_landmarker.close()
            self._pose_landmarker = None

        if self._face_landmarker is not None:
            self._face_landmarker.close()
            self._face_landmarker = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
