import logging
import os
from typing import List, Optional

import cv2
import mediapipe as mp
from mediapipe.tasks import python as mp_tasks
from mediapipe.tasks.python import vision

from exceptions import ModelNotFoundError, PoseNotDetectedError
from pose_types import Landmark, LandmarkSet
from image_io import load_image

logger = logging.getLogger(__name__)

MODEL_CANDIDATES = [
    "pose_landmarker_full.task",
    "pose_landmarker_heavy.task",
    "pose_landmarker_lite.task",
    os.path.join("models", "pose_landmarker_full.task"),
    os.path.join("models", "pose_landmarker_heavy.task"),
    os.path.join("models", "pose_landmarker_lite.task"),
]


def find_model(model_path: Optional[str] = None) -> str:
    if model_path:
        if os.path.exists(model_path):
            return model_path
        raise ModelNotFoundError(f"Pose landmarker model not found: {model_path}")
    for path in MODEL_CANDIDATES:
        if os.path.exists(path):
            return path
    raise ModelNotFoundError(
        "Pose landmarker model not found. Download pose_landmarker_full.task "
        "into the working directory or models/, or pass --model."
    )


class PoseDetector:
    """Single-image BlazePose landmark detection producing a LandmarkSet."""

    def __init__(self, model_path: Optional[str] = None, min_detection_confidence: float = 0.5):
        self.model_path = find_model(model_path)
        logger.info("Loading pose landmarker: %s", self.model_path)
        options = vision.PoseLandmarkerOptions(
            base_options=mp_tasks.BaseOptions(model_asset_path=self.model_path),
            running_mode=vision.RunningMode.IMAGE,
            num_poses=1,
            min_pose_detection_confidence=min_detection_confidence,
            output_segmentation_masks=False,
        )
        self._landmarker = vision.PoseLandmarker.create_from_options(options)

    def detect(self, image_bgr) -> LandmarkSet:
        frame_rgb = cv2.cvtColor(image_bgr, cv2.COLOR_BGR2RGB)
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=frame_rgb)
        result = self._landmarker.detect(mp_image)
        if not result.pose_landmarks:
            raise PoseNotDetectedError("No person detected in the image")

        pose = result.pose_landmarks[0]
        entries: List[Landmark] = [
            Landmark(lm.x, lm.y, lm.z, lm.visibility if lm.visibility is not None else 0.0)
            for lm in pose
        ]
        logger.debug("Detected %d landmarks", len(entries))
        return LandmarkSet(entries)

    def detect_file(self, image_path: str) -> LandmarkSet:
        return self.detect(load_image(image_path))

    def close(self) -> None:
        if self._landmarker is not None:
            self._landmarker.close()
            self._landmarker = None

    def __enter__(self) -> "PoseDetector":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
