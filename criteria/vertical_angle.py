from dataclasses import dataclass
from typing import Tuple

from criteria.base import CriterionBase, CriterionResult
from criteria.curves import angle_tolerance_score
from geometry import directional_angle, vertical_deviation_angle
from pose_types import LandmarkSet


@dataclass(frozen=True)
class AngleThresholds:
    ideal: float
    tolerance: float
    slope: float


class VerticalAngleCriterion(CriterionBase):
    """Scores how far a body segment leans away from the vertical.

    The deviation is the segment's distance from 90 degrees in the atan2 frame,
    independent of which end is listed first, so a hip below the shoulder and a
    shoulder above the hip read the same.
    """

    def __init__(
        self,
        key: str,
        name: str,
        segment: Tuple[str, str],
        angle_segment: Tuple[str, str],
        ideal: float = 0.0,
        tolerance: float = 5.0,
        slope: float = 3.0,
        side: str = "left",
    ):
        super().__init__(side)
        self.key = key
        self.name = name
        self.segment = segment
        self.angle_segment = angle_segment
        self.thresholds = AngleThresholds(ideal=ideal, tolerance=tolerance, slope=slope)
        self.required_joints = tuple(dict.fromkeys(segment + angle_segment))

    def evaluate(self, landmarks: LandmarkSet) -> CriterionResult:
        lm = self._joints(landmarks)
        upper, lower = self.segment
        angle_difference = vertical_deviation_angle(lm[upper], lm[lower])
        score = angle_tolerance_score(
            angle_difference,
            self.thresholds.ideal,
            self.thresholds.tolerance,
            self.thresholds.slope,
        )

        start, end = self.angle_segment
        angle = directional_angle(lm[start], lm[end])
        return self._result(score, round(angle_difference, 1), round(angle, 1))
