from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Union

import numpy as np

from exceptions import MissingLandmarkError


LANDMARK_COUNT = 33


@dataclass(frozen=True)
class Landmark:
    x: float
    y: float
    z: float = 0.0
    visibility: float = 0.0


class PoseLandmark(IntEnum):
    # BlazePose topology; indices match the detector output order.
    NOSE = 0
    LEFT_EYE_INNER = 1
    LEFT_EYE = 2
    LEFT_EYE_OUTER = 3
    RIGHT_EYE_INNER = 4
    RIGHT_EYE = 5
    RIGHT_EYE_OUTER = 6
    LEFT_EAR = 7
    RIGHT_EAR = 8
    MOUTH_LEFT = 9
    MOUTH_RIGHT = 10
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16
    LEFT_PINKY = 17
    RIGHT_PINKY = 18
    LEFT_INDEX = 19
    RIGHT_INDEX = 20
    LEFT_THUMB = 21
    RIGHT_THUMB = 22
    LEFT_HIP = 23
    RIGHT_HIP = 24
    LEFT_KNEE = 25
    RIGHT_KNEE = 26
    LEFT_ANKLE = 27
    RIGHT_ANKLE = 28
    LEFT_HEEL = 29
    RIGHT_HEEL = 30
    LEFT_FOOT_INDEX = 31
    RIGHT_FOOT_INDEX = 32


def side_landmark(side: str, joint: str) -> PoseLandmark:
    """Resolve e.g. ("left", "ear") to PoseLandmark.LEFT_EAR."""
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")
    return PoseLandmark[f"{side}_{joint}".upper()]


# MoveNet (17 keypoints) -> BlazePose index.
MOVENET_TO_POSE: Dict[int, PoseLandmark] = {
    0: PoseLandmark.NOSE,
    1: PoseLandmark.LEFT_EYE,
    2: PoseLandmark.RIGHT_EYE,
    3: PoseLandmark.LEFT_EAR,
    4: PoseLandmark.RIGHT_EAR,
    5: PoseLandmark.LEFT_SHOULDER,
    6: PoseLandmark.RIGHT_SHOULDER,
    7: PoseLandmark.LEFT_ELBOW,
    8: PoseLandmark.RIGHT_ELBOW,
    9: PoseLandmark.LEFT_WRIST,
    10: PoseLandmark.RIGHT_WRIST,
    11: PoseLandmark.LEFT_HIP,
    12: PoseLandmark.RIGHT_HIP,
    13: PoseLandmark.LEFT_KNEE,
    14: PoseLandmark.RIGHT_KNEE,
    15: PoseLandmark.LEFT_ANKLE,
    16: PoseLandmark.RIGHT_ANKLE,
}

LandmarkLike = Union[Landmark, Mapping[str, Any], Sequence[float], None]


def _to_landmark(entry: LandmarkLike) -> Optional[Landmark]:
    # Entries without a visibility value count as fully visible.
    if entry is None or isinstance(entry, Landmark):
        return entry
    if isinstance(entry, Mapping):
        return Landmark(
            float(entry["x"]),
            float(entry["y"]),
            float(entry.get("z", 0.0)),
            float(entry.get("visibility", 1.0)),
        )
    values = [float(v) for v in entry]
    if len(values) == 3:
        values.append(1.0)
    x, y, z, visibility = values
    return Landmark(x, y, z, visibility)


class LandmarkSet:
    """Read-only, fixed-size collection of the 33 BlazePose landmarks.

    Undetected points stay in place as ``None`` (or zero-visibility) entries so
    that every index keeps its anatomical meaning.
    """

    def __init__(self, entries: Sequence[LandmarkLike]):
        entries = list(entries)
        if len(entries) != LANDMARK_COUNT:
            raise MissingLandmarkError(
                f"Expected {LANDMARK_COUNT} landmarks, got {len(entries)}"
            )
        self._landmarks: tuple = tuple(_to_landmark(e) for e in entries)

    @classmethod
    def from_array(cls, array) -> "LandmarkSet":
        arr = np.asarray(array, dtype=float)
        if arr.ndim != 2 or arr.shape[1] not in (3, 4):
            raise ValueError(f"Expected an (N, 3) or (N, 4) array, got shape {arr.shape}")
        return cls([tuple(row) for row in arr])

    @classmethod
    def from_movenet(cls, keypoints: Sequence[Any], width: float, height: float) -> "LandmarkSet":
        # MoveNet reports pixels; rescale to the image so both detectors share one frame.
        if width <= 0 or height <= 0:
            raise ValueError("Image width and height must be positive")
        entries: List[Landmark] = [Landmark(0.0, 0.0, 0.0, 0.0) for _ in range(LANDMARK_COUNT)]
        for idx, kp in enumerate(keypoints):
            target = MOVENET_TO_POSE.get(idx)
            if target is None:
                continue
            if isinstance(kp, Mapping):
                x, y, score = kp["x"], kp["y"], kp.get("score") or 0.0
            else:
                x, y, score = kp[0], kp[1], kp[2]
            entries[target] = Landmark(float(x) / width, float(y) / height, 0.0, float(score))
        return cls(entries)

    def to_array(self) -> np.ndarray:
        arr = np.zeros((LANDMARK_COUNT, 4), dtype=float)
        for idx, lm in enumerate(self._landmarks):
            if lm is not None:
                arr[idx] = (lm.x, lm.y, lm.z, lm.visibility)
        return arr

    def get(self, landmark: Union[PoseLandmark, int]) -> Optional[Landmark]:
        return self._landmarks[int(landmark)]

    def __getitem__(self, landmark: Union[PoseLandmark, int, str]) -> Optional[Landmark]:
        if isinstance(landmark, str):
            landmark = PoseLandmark[landmark.upper()]
        return self._landmarks[int(landmark)]

    def __len__(self) -> int:
        return len(self._landmarks)

    def __iter__(self) -> Iterator[Optional[Landmark]]:
        return iter(self._landmarks)

    def __eq__(self, other) -> bool:
        if not isinstance(other, LandmarkSet):
            return NotImplemented
        return self._landmarks == other._landmarks

    def __repr__(self) -> str:
        present = sum(1 for lm in self._landmarks if lm is not None)
        return f"LandmarkSet({present}/{LANDMARK_COUNT} present)"
