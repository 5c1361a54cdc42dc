from dataclasses import dataclass
from typing import Dict, List, Tuple

from exceptions import MissingLandmarkError
from pose_types import Landmark, LandmarkSet, PoseLandmark, side_landmark
from tiers import Tier, classify_tier, describe


@dataclass(frozen=True)
class CriterionResult:
    key: str
    name: str
    score: float
    raw_metric: float
    raw_angle: float
    tier: Tier
    description: str


class CriterionBase:
    key = "base"
    name = "base"
    # Joint names ("ear", "hip", ...) read on the scored side.
    required_joints: Tuple[str, ...] = ()

    def __init__(self, side: str = "left"):
        if side not in ("left", "right"):
            raise ValueError(f"side must be 'left' or 'right', got {side!r}")
        self.side = side

    @property
    def required_landmarks(self) -> List[PoseLandmark]:
        return [side_landmark(self.side, joint) for joint in self.required_joints]

    def evaluate(self, landmarks: LandmarkSet) -> CriterionResult:
        raise NotImplementedError

    def _joints(self, landmarks: LandmarkSet) -> Dict[str, Landmark]:
        lm = {joint: landmarks.get(side_landmark(self.side, joint)) for joint in self.required_joints}
        missing = [side_landmark(self.side, joint).name.lower() for joint, value in lm.items() if value is None]
        if missing:
            raise MissingLandmarkError(
                f"{self.name}: missing landmark(s) {', '.join(missing)}", missing
            )
        return lm

    def _result(self, score: float, raw_metric: float, raw_angle: float) -> CriterionResult:
        tier = classify_tier(score)
        return CriterionResult(
            key=self.key,
            name=self.name,
            score=score,
            raw_metric=raw_metric,
            raw_angle=raw_angle,
            tier=tier,
            description=describe(self.key, tier),
        )
