from typing import Dict, Optional, Tuple

from pose_types import LANDMARK_COUNT, Landmark, LandmarkSet, side_landmark

# Upright side view: every joint on the same vertical line.
UPRIGHT_Y = {
    "ear": 0.15,
    "shoulder": 0.30,
    "hip": 0.55,
    "knee": 0.75,
    "ankle": 0.95,
}


def make_landmarks(
    x: float = 0.40,
    side: str = "left",
    visibility: float = 0.9,
    placeholders: bool = True,
    overrides: Optional[Dict[str, Tuple[float, float]]] = None,
) -> LandmarkSet:
    """Build a LandmarkSet with the five Kendall joints on one side.

    ``overrides`` maps a joint name ("ear", "hip", ...) to an (x, y) pair.
    Every other index holds a zero placeholder, or ``None`` when
    ``placeholders`` is False.
    """
    filler = Landmark(0.0, 0.0, 0.0, 0.0) if placeholders else None
    entries = [filler] * LANDMARK_COUNT
    points = {joint: (x, y) for joint, y in UPRIGHT_Y.items()}
    points.update(overrides or {})
    for joint, (px, py) in points.items():
        entries[side_landmark(side, joint)] = Landmark(px, py, 0.0, visibility)
    return LandmarkSet(entries)


def landmark_dicts(landmarks: LandmarkSet):
    return [
        {"x": lm.x, "y": lm.y, "z": lm.z, "visibility": lm.visibility}
        for lm in landmarks
    ]
