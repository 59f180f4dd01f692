# tests/helpers.py

from typing import Dict, List, Tuple

from app.vision.core.data_types import FaceLandmarkIndex, Keypoint, Point3D

GOOD_POSE = {
    'nose': (320.0, 100.0),
    'left_shoulder': (270.0, 200.0),
    'right_shoulder': (370.0, 200.0),
    'left_hip': (270.0, 400.0),
    'right_hip': (370.0, 400.0),
}


def make_pose(**overrides: Tuple[float, float]) -> Dict[str, Keypoint]:
    points = {**GOOD_POSE, **overrides}
    return {name: Keypoint(name=name, x=x, y=y, score=0.9) for name, (x, y) in points.items()}


def make_face_mesh(size: int = FaceLandmarkIndex.FULL_MESH_SIZE, **overrides: Tuple[float, float]) -> List[Point3D]:
    """Flat face at (0.5, 0.5); overrides are keyed like `p61=(x, y)`."""
    points = [Point3D(x=0.5, y=0.5, z=0.0) for _ in range(size)]
    for key, (x, y) in overrides.items():
        points[int(key[1:])] = Point3D(x=x, y=y, z=0.0)
    return points


def smiling_face(size: int = FaceLandmarkIndex.FULL_MESH_SIZE) -> List[Point3D]:
    # width 0.2, height 0.02, corners 0.1 above the nose tip y
    return make_face_mesh(
        size,
        p61=(0.4, 0.6), p291=(0.6, 0.6),
        p13=(0.5, 0.6), p14=(0.5, 0.62),
        p1=(0.5, 0.7),
    )


def face_with_eyebrows(eyebrow_y: float) -> List[Point3D]:
    # nose tip at 0.5, chin at 0.8: face height 0.3
    return make_face_mesh(
        p1=(0.5, 0.5), p152=(0.5, 0.8),
        p70=(0.4, eyebrow_y), p300=(0.6, eyebrow_y),
    )


def as_payload(points: List[Point3D]) -> List[dict]:
    return [{'x': p.x, 'y': p.y, 'z': p.z} for p in points]
