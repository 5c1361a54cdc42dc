from criteria.base import CriterionBase, CriterionResult
from criteria.curves import angle_tolerance_score, distance_threshold_score
from criteria.distance import DistanceCriterion
from criteria.vertical_angle import VerticalAngleCriterion

__all__ = [
    "CriterionBase",
    "CriterionResult",
    "DistanceCriterion",
    "VerticalAngleCriterion",
    "distance_threshold_score",
    "angle_tolerance_score",
]
