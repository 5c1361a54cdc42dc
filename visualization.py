from typing import Dict, Optional, Tuple

import cv2

from pose_types import Landmark, LandmarkSet, PoseLandmark, side_landmark

P = PoseLandmark

SKELETON_CONNECTIONS = [
    (P.NOSE, P.LEFT_EAR),
    (P.NOSE, P.RIGHT_EAR),
    (P.LEFT_EAR, P.LEFT_SHOULDER),
    (P.RIGHT_EAR, P.RIGHT_SHOULDER),
    (P.LEFT_SHOULDER, P.RIGHT_SHOULDER),
    (P.LEFT_SHOULDER, P.LEFT_ELBOW),
    (P.LEFT_ELBOW, P.LEFT_WRIST),
    (P.RIGHT_SHOULDER, P.RIGHT_ELBOW),
    (P.RIGHT_ELBOW, P.RIGHT_WRIST),
    (P.LEFT_SHOULDER, P.LEFT_HIP),
    (P.RIGHT_SHOULDER, P.RIGHT_HIP),
    (P.LEFT_HIP, P.RIGHT_HIP),
    (P.LEFT_HIP, P.LEFT_KNEE),
    (P.LEFT_KNEE, P.LEFT_ANKLE),
    (P.RIGHT_HIP, P.RIGHT_KNEE),
    (P.RIGHT_KNEE, P.RIGHT_ANKLE),
]


def _to_pixel(lm: Landmark, image_size: Tuple[int, int]) -> Tuple[int, int]:
    width, height = image_size
    return int(lm.x * width), int(lm.y * height)


def _visible(lm: Optional[Landmark], threshold: float) -> bool:
    return lm is not None and lm.visibility > threshold


def draw_pose(
    frame,
    landmarks: LandmarkSet,
    visibility_threshold: float = 0.5,
    highlight: Optional[Dict[PoseLandmark, Tuple[int, int, int]]] = None,
) -> None:
    highlight = highlight or {}
    height, width = frame.shape[:2]

    for a, b in SKELETON_CONNECTIONS:
        lm_a = landmarks.get(a)
        lm_b = landmarks.get(b)
        if not _visible(lm_a, visibility_threshold) or not _visible(lm_b, visibility_threshold):
            continue
        ax, ay = _to_pixel(lm_a, (width, height))
        bx, by = _to_pixel(lm_b, (width, height))
        cv2.line(frame, (ax, ay), (bx, by), (0, 255, 0), 4)

    for idx, lm in enumerate(landmarks):
        if not _visible(lm, visibility_threshold):
            continue
        x, y = _to_pixel(lm, (width, height))
        color = highlight.get(PoseLandmark(idx), (0, 0, 255))
        cv2.circle(frame, (x, y), 6, color, -1)
        cv2.circle(frame, (x, y), 6, (255, 255, 255), 2)


def draw_reference_line(frame, landmarks: LandmarkSet, side: str = "left", color=(255, 0, 255)) -> None:
    # Kendall plumb line: a vertical through the ankle of the scored side.
    ankle = landmarks.get(side_landmark(side, "ankle"))
    if ankle is None:
        return
    height, width = frame.shape[:2]
    x = int(ankle.x * width)
    cv2.line(frame, (x, 0), (x, height), color, 1)
