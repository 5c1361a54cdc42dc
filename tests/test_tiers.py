import pytest

from criterion_registry import KENDALL_LATERAL
from tiers import DESCRIPTIONS, Tier, classify_tier, describe


@pytest.mark.parametrize(
    "score, expected",
    [
        (100.0, Tier.EXCELLENT),
        (90.0, Tier.EXCELLENT),
        (89.999, Tier.GOOD),
        (70.0, Tier.GOOD),
        (69.999, Tier.CAUTION),
        (50.0, Tier.CAUTION),
        (49.999, Tier.POOR),
        (0.0, Tier.POOR),
    ],
)
def test_tier_boundaries(score, expected):
    assert classify_tier(score) is expected


def test_every_criterion_has_a_description_per_tier():
    assert len(DESCRIPTIONS) == 24
    for spec in KENDALL_LATERAL:
        texts = {describe(spec.key, tier) for tier in Tier}
        assert len(texts) == 4


def test_unknown_criterion_has_no_description():
    with pytest.raises(KeyError):
        describe("neck_rotation", Tier.GOOD)


def test_tier_markers():
    assert Tier.EXCELLENT.marker == "✅"
    assert Tier.POOR.marker == "❌"
    assert Tier.GOOD.marker == Tier.CAUTION.marker
