import logging
import threading
from contextlib import contextmanager
from typing import List, Optional

from starlette import status

from app.core.config import settings
from app.helpers.enums import AnalysisType, MoodType
from app.helpers.exception_handler import CustomException
from app.schemas.sche_wellness import (
    HistoryEntryResponse, MoodAnalyzeRequest, MoodResultResponse,
    PostureAnalyzeRequest, PostureResultResponse,
)
from app.vision.core.data_types import Keypoint, Point3D
from app.vision.modules.encouragement import mood_suggestion
from app.vision.modules.history import WellnessHistory
from app.vision.modules.mood_classifier import MoodResult, analyze_mood, classify_expressions
from app.vision.modules.posture_classifier import PostureResult, analyze_posture

logger = logging.getLogger(__name__)

wellness_history = WellnessHistory(max_entries=settings.WELLNESS_HISTORY_SIZE)

_analyzing_users = set()
_analyzing_lock = threading.Lock()

_detector = None
_detector_lock = threading.Lock()


def get_vision_detector():
    """
    Create the MediaPipe detector on first use.

    Raises:
        CustomException: 503 when vision is disabled or model files are missing.
    """
    global _detector
    if not settings.VISION_ENABLED:
        raise CustomException(http_code=status.HTTP_503_SERVICE_UNAVAILABLE, message="Vision analysis is disabled")

    with _detector_lock:
        if _detector is None:
            from app.vision.core.detector import DetectorConfig, VisionDetector
            try:
                _detector = VisionDetector(DetectorConfig(
                    pose_model_path=settings.POSE_MODEL_PATH,
                    face_model_path=settings.FACE_MODEL_PATH,
                ))
            except FileNotFoundError as e:
                logger.error(f"Vision models unavailable: {str(e)}")
                raise CustomException(
                    http_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    message="Vision models are not installed"
                )
        return _detector


@contextmanager
def analysis_slot(user_id: Optional[str]):
    """Reject a frame analysis while another one for the same user is running."""
    if not user_id:
        yield
        return

    with _analyzing_lock:
        if user_id in _analyzing_users:
            raise CustomException(http_code=status.HTTP_409_CONFLICT, message="Analysis already in progress")
        _analyzing_users.add(user_id)
    try:
        yield
    finally:
        with _analyzing_lock:
            _analyzing_users.discard(user_id)


def _detect_frame(frame_data: str):
    detector = get_vision_detector()
    from app.vision.core.detector import decode_frame

    try:
        frame = decode_frame(frame_data)
    except ValueError as e:
        raise CustomException(http_code=status.HTTP_400_BAD_REQUEST, message=f"Invalid frame data: {str(e)}")

    # MediaPipe landmarkers are not safe for concurrent use
    with _detector_lock:
        return detector.detect(frame)


class WellnessService:

    def __init__(self):
        self.history = wellness_history

    def analyze_mood(self, request: MoodAnalyzeRequest) -> MoodResultResponse:
        detected = True

        if request.landmarks is not None:
            points = [Point3D(x=p.x, y=p.y, z=p.z) for p in request.landmarks]
            result = analyze_mood(points, request.blendshapes)
        elif request.expressions is not None:
            result = classify_expressions(request.expressions)
        else:
            with analysis_slot(request.user_id):
                detection = _detect_frame(request.frame_data)
            if detection.has_face():
                face = detection.face_landmarks
                result = analyze_mood(face.landmarks, face.blendshapes)
            else:
                result = analyze_mood([])
                detected = False

        suggestion = mood_suggestion(result.mood)
        if request.user_id and result.mood != MoodType.ANALYZING:
            self.history.record(request.user_id, result.mood.value, AnalysisType.MOOD.value, suggestion)

        return self._mood_response(result, suggestion, detected)

    def analyze_posture(self, request: PostureAnalyzeRequest) -> PostureResultResponse:
        if request.keypoints is not None:
            keypoints = {
                item.name: Keypoint(name=item.name, x=item.x, y=item.y, score=item.score)
                for item in request.keypoints
            }
        else:
            with analysis_slot(request.user_id):
                detection = _detect_frame(request.frame_data)
            keypoints = detection.pose_keypoints

        result = analyze_posture(keypoints)

        if request.user_id and result.detected:
            suggestion = result.suggestions[0] if result.suggestions else None
            self.history.record(request.user_id, result.status.value, AnalysisType.POSTURE.value, suggestion)

        return self._posture_response(result)

    def get_history(self, user_id: str) -> List[HistoryEntryResponse]:
        return [HistoryEntryResponse(**entry.to_dict()) for entry in self.history.entries(user_id)]

    def clear_history(self, user_id: str) -> None:
        self.history.clear(user_id)
        logger.info(f"Cleared wellness history for user {user_id}")

    @staticmethod
    def _mood_response(result: MoodResult, suggestion: str, detected: bool) -> MoodResultResponse:
        return MoodResultResponse(
            mood=result.mood.value,
            confidence=result.confidence,
            is_smiling=result.is_smiling,
            encouragement=result.encouragement,
            suggestion=suggestion,
            detected=detected,
        )

    @staticmethod
    def _posture_response(result: PostureResult) -> PostureResultResponse:
        return PostureResultResponse(
            status=result.status.value,
            score=result.score,
            issues=result.issues,
            suggestions=result.suggestions,
            encouragement=result.encouragement,
            detected=result.detected,
        )
