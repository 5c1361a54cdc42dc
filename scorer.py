"""
Kendall lateral-view posture scoring.

``PostureScorer.evaluate`` turns one set of 33 landmarks into six criterion
results and their unweighted mean. The call is pure: the input is never
mutated and nothing is read from or written to disk.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from criteria.base import CriterionBase, CriterionResult
from criterion_registry import get_criteria
from exceptions import MissingLandmarkError
from pose_types import LandmarkSet, PoseLandmark
from tiers import Tier, classify_tier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostureReport:
    total_score: float
    details: Tuple[CriterionResult, ...]

    @property
    def total_tier(self) -> Tier:
        return classify_tier(self.total_score)

    @property
    def rounded_total(self) -> int:
        return int(round(self.total_score))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_score": self.total_score,
            "total_tier": self.total_tier.value,
            "details": [
                {
                    "key": d.key,
                    "name": d.name,
                    "score": d.score,
                    "raw_metric": d.raw_metric,
                    "raw_angle": d.raw_angle,
                    "tier": d.tier.value,
                    "description": d.description,
                }
                for d in self.details
            ],
        }


class PostureScorer:
    """Runs the six Kendall criteria against a landmark set.

    Args:
        side: Body side facing the camera ("left" or "right").
        min_visibility: When set, landmarks whose visibility is below this
            value count as missing. ``None`` scores every landmark regardless
            of detection confidence.
    """

    def __init__(self, side: str = "left", min_visibility: Optional[float] = None):
        self.side = side
        self.min_visibility = min_visibility
        self.criteria: List[CriterionBase] = get_criteria(side)

    @property
    def required_landmarks(self) -> List[PoseLandmark]:
        required: Dict[PoseLandmark, None] = {}
        for criterion in self.criteria:
            for landmark in criterion.required_landmarks:
                required[landmark] = None
        return list(required)

    def evaluate(self, landmarks: Union[LandmarkSet, Sequence]) -> PostureReport:
        if not isinstance(landmarks, LandmarkSet):
            landmarks = LandmarkSet(landmarks)
        self._check_required(landmarks)

        details = tuple(criterion.evaluate(landmarks) for criterion in self.criteria)
        for result in details:
            logger.debug(
                "%s: score=%.2f metric=%s angle=%s tier=%s",
                result.key, result.score, result.raw_metric, result.raw_angle, result.tier.value,
            )

        total = sum(d.score for d in details) / len(details)
        logger.debug("Total posture score %.2f (%s side)", total, self.side)
        return PostureReport(total_score=total, details=details)

    def _check_required(self, landmarks: LandmarkSet) -> None:
        missing = []
        for landmark in self.required_landmarks:
            lm = landmarks.get(landmark)
            if lm is None:
                missing.append(landmark.name.lower())
            elif self.min_visibility is not None and lm.visibility < self.min_visibility:
                missing.append(landmark.name.lower())
        if missing:
            raise MissingLandmarkError(
                f"Required landmark(s) not available: {', '.join(missing)}", missing
            )


_default_scorer = PostureScorer()


def evaluate(landmarks: Union[LandmarkSet, Sequence]) -> PostureReport:
    return _default_scorer.evaluate(landmarks)
