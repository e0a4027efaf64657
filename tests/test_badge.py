"""Tests for badge classification."""

import pytest

from ev_engine.core.badge import Badge, classify
from ev_engine.core.scoring_config import ScoringConfig

# ---------------------------------------------------------------------------
# Boundaries
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (100, Badge.ENERGY_SAVER),
        (80, Badge.ENERGY_SAVER),
        (79, Badge.ECO_DRIVER),
        (50, Badge.ECO_DRIVER),
        (49, Badge.NEEDS_IMPROVEMENT),
        (10, Badge.NEEDS_IMPROVEMENT),
    ],
)
def test_threshold_boundaries(score: int, expected: Badge) -> None:
    """Lower edges of each band are inclusive."""
    assert classify(score) is expected


def test_out_of_band_values_use_nearest_tier() -> None:
    """Scores outside [10, 100] still classify."""
    assert classify(250) is Badge.ENERGY_SAVER
    assert classify(-3) is Badge.NEEDS_IMPROVEMENT
    assert classify(0) is Badge.NEEDS_IMPROVEMENT


def test_fractional_scores() -> None:
    """Non-integer inputs are compared against the same cutoffs."""
    assert classify(79.99) is Badge.ECO_DRIVER
    assert classify(49.5) is Badge.NEEDS_IMPROVEMENT


def test_custom_thresholds() -> None:
    """Thresholds come from the supplied config."""
    config = ScoringConfig(energy_saver_min=90, eco_driver_min=60)
    assert classify(85, config) is Badge.ECO_DRIVER
    assert classify(55, config) is Badge.NEEDS_IMPROVEMENT


# ---------------------------------------------------------------------------
# Badge values
# ---------------------------------------------------------------------------


def test_badge_values_are_display_labels() -> None:
    """Badge values serialize as their display labels."""
    assert Badge.ENERGY_SAVER.value == "Energy Saver"
    assert Badge.ECO_DRIVER.value == "Eco Driver"
    assert Badge.NEEDS_IMPROVEMENT.value == "Needs Improvement"
    assert Badge("Eco Driver") is Badge.ECO_DRIVER
