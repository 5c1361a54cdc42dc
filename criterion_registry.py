from dataclasses import dataclass
from typing import List, Optional, Tuple

from criteria.base import CriterionBase
from criteria.distance import DistanceCriterion
from criteria.vertical_angle import VerticalAngleCriterion


@dataclass(frozen=True)
class CriterionSpec:
    key: str
    name: str
    kind: str  # "distance" or "vertical_angle"
    points: Tuple[str, ...]
    angle_segment: Tuple[str, str]
    threshold: float
    slope: float
    tolerance: Optional[float] = None


# Kendall lateral view, in report order. For "distance" the first point is
# measured against the (midpoint of the) remaining points.
KENDALL_LATERAL: Tuple[CriterionSpec, ...] = (
    CriterionSpec("head_posture", "Head posture", "distance",
                  ("ear", "shoulder"), ("shoulder", "ear"), threshold=0.03, slope=2000.0),
    CriterionSpec("shoulder_position", "Shoulder position", "distance",
                  ("shoulder", "ear", "hip"), ("hip", "shoulder"), threshold=0.02, slope=2500.0),
    CriterionSpec("spinal_alignment", "Spinal alignment", "vertical_angle",
                  ("shoulder", "hip"), ("hip", "shoulder"), threshold=0.0, slope=3.0, tolerance=5.0),
    CriterionSpec("pelvic_tilt", "Pelvic tilt", "vertical_angle",
                  ("hip", "knee"), ("hip", "knee"), threshold=0.0, slope=3.0, tolerance=5.0),
    CriterionSpec("knee_position", "Knee position", "distance",
                  ("knee", "hip"), ("hip", "knee"), threshold=0.03, slope=2000.0),
    CriterionSpec("ankle_alignment", "Ankle alignment", "distance",
                  ("ankle", "knee"), ("knee", "ankle"), threshold=0.03, slope=2000.0),
)


def build_criterion(spec: CriterionSpec, side: str = "left") -> CriterionBase:
    if spec.kind == "distance":
        return DistanceCriterion(
            key=spec.key,
            name=spec.name,
            subject=spec.points[0],
            reference=spec.points[1:],
            angle_segment=spec.angle_segment,
            threshold=spec.threshold,
            slope=spec.slope,
            side=side,
        )
    if spec.kind == "vertical_angle":
        return VerticalAngleCriterion(
            key=spec.key,
            name=spec.name,
            segment=(spec.points[0], spec.points[1]),
            angle_segment=spec.angle_segment,
            ideal=spec.threshold,
            tolerance=spec.tolerance if spec.tolerance is not None else 0.0,
            slope=spec.slope,
            side=side,
        )
    raise ValueError(f"Unknown criterion kind: {spec.kind}")


def get_criteria(side: str = "left") -> List[CriterionBase]:
    return [build_criterion(spec, side) for spec in KENDALL_LATERAL]
