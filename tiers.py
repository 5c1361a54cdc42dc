from enum import Enum
from typing import Dict, Tuple


class Tier(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    CAUTION = "Caution"
    POOR = "Poor"

    @property
    def marker(self) -> str:
        return TIER_MARKERS[self]

    @property
    def color(self) -> Tuple[int, int, int]:
        return TIER_COLORS[self]


# Lower bound (inclusive) for each tier, best first.
TIER_BREAKPOINTS = (
    (90.0, Tier.EXCELLENT),
    (70.0, Tier.GOOD),
    (50.0, Tier.CAUTION),
)

TIER_MARKERS: Dict[Tier, str] = {
    Tier.EXCELLENT: "✅",
    Tier.GOOD: "⚠️",
    Tier.CAUTION: "⚠️",
    Tier.POOR: "❌",
}

# BGR, for OpenCV renderers.
TIER_COLORS: Dict[Tier, Tuple[int, int, int]] = {
    Tier.EXCELLENT: (0, 200, 0),
    Tier.GOOD: (0, 220, 220),
    Tier.CAUTION: (0, 140, 255),
    Tier.POOR: (0, 0, 230),
}


def classify_tier(score: float) -> Tier:
    for lower, tier in TIER_BREAKPOINTS:
        if score >= lower:
            return tier
    return Tier.POOR


DESCRIPTIONS: Dict[Tuple[str, Tier], str] = {
    ("head_posture", Tier.EXCELLENT): "Excellent: the head sits in the ideal position",
    ("head_posture", Tier.GOOD): "Good: slight forward displacement of the head",
    ("head_posture", Tier.CAUTION): "Caution: moderate forward head posture",
    ("head_posture", Tier.POOR): "Needs improvement: marked forward head posture",
    ("shoulder_position", Tier.EXCELLENT): "Excellent: the shoulder sits in the ideal position",
    ("shoulder_position", Tier.GOOD): "Good: slight displacement of the shoulder",
    ("shoulder_position", Tier.CAUTION): "Caution: moderate shoulder malposition",
    ("shoulder_position", Tier.POOR): "Needs improvement: marked shoulder malposition",
    ("spinal_alignment", Tier.EXCELLENT): "Excellent: spinal alignment is ideal",
    ("spinal_alignment", Tier.GOOD): "Good: slight deviation in spinal alignment",
    ("spinal_alignment", Tier.CAUTION): "Caution: moderate spinal misalignment",
    ("spinal_alignment", Tier.POOR): "Needs improvement: marked spinal misalignment",
    ("pelvic_tilt", Tier.EXCELLENT): "Excellent: the pelvis is in neutral position",
    ("pelvic_tilt", Tier.GOOD): "Good: slight pelvic tilt",
    ("pelvic_tilt", Tier.CAUTION): "Caution: moderate pelvic tilt",
    ("pelvic_tilt", Tier.POOR): "Needs improvement: marked pelvic tilt",
    ("knee_position", Tier.EXCELLENT): "Excellent: the knee sits in the ideal position",
    ("knee_position", Tier.GOOD): "Good: slight displacement of the knee",
    ("knee_position", Tier.CAUTION): "Caution: moderate knee malposition",
    ("knee_position", Tier.POOR): "Needs improvement: marked knee malposition",
    ("ankle_alignment", Tier.EXCELLENT): "Excellent: the ankle sits in the ideal position",
    ("ankle_alignment", Tier.GOOD): "Good: slight deviation in ankle alignment",
    ("ankle_alignment", Tier.CAUTION): "Caution: moderate ankle misalignment",
    ("ankle_alignment", Tier.POOR): "Needs improvement: marked ankle misalignment",
}


def describe(criterion_key: str, tier: Tier) -> str:
    return DESCRIPTIONS[(criterion_key, tier)]
