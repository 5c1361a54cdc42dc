from dataclasses import dataclass
from typing import Tuple

from criteria.base import CriterionBase, CriterionResult
from criteria.curves import distance_threshold_score
from geometry import directional_angle, horizontal_distance, midpoint_x
from pose_types import Landmark, LandmarkSet


@dataclass(frozen=True)
class DistanceThresholds:
    threshold: float
    slope: float


class DistanceCriterion(CriterionBase):
    """Scores the horizontal offset of one joint from a reference plumb line.

    The reference is a single joint, or the midpoint of several joints when
    more than one is given (shoulder against the ear-hip midpoint).
    """

    def __init__(
        self,
        key: str,
        name: str,
        subject: str,
        reference: Tuple[str, ...],
        angle_segment: Tuple[str, str],
        threshold: float,
        slope: float,
        side: str = "left",
    ):
        super().__init__(side)
        self.key = key
        self.name = name
        self.subject = subject
        self.reference = reference
        self.angle_segment = angle_segment
        self.thresholds = DistanceThresholds(threshold=threshold, slope=slope)
        self.required_joints = tuple(dict.fromkeys((subject,) + reference + angle_segment))

    def evaluate(self, landmarks: LandmarkSet) -> CriterionResult:
        lm = self._joints(landmarks)
        subject = lm[self.subject]
        refs = [lm[joint] for joint in self.reference]
        if len(refs) == 1:
            reference = refs[0]
        else:
            reference = Landmark(midpoint_x(*refs), subject.y)

        metric = horizontal_distance(subject, reference)
        score = distance_threshold_score(metric, self.thresholds.threshold, self.thresholds.slope)

        start, end = self.angle_segment
        angle = directional_angle(lm[start], lm[end])
        return self._result(score, round(metric, 3), round(angle, 1))
