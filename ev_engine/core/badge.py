"""Badge classification for normalized efficiency scores."""

from __future__ import annotations

from enum import Enum

from ev_engine.core.scoring_config import DEFAULT_CONFIG, ScoringConfig


class Badge(str, Enum):
    """Qualitative efficiency tier, best first."""

    ENERGY_SAVER = "Energy Saver"
    ECO_DRIVER = "Eco Driver"
    NEEDS_IMPROVEMENT = "Needs Improvement"


def classify(
    normalized_efficiency: float,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> Badge:
    """Map a normalized score to its badge.

    Each band includes its lower edge, so with the default thresholds
    ``80`` is an Energy Saver and ``50`` an Eco Driver.  Values outside
    the normalized band fall into the nearest tier.

    Args:
        normalized_efficiency: Population-relative score.
        config: Thresholds to apply.

    Returns:
        The matching :class:`Badge`.
    """
    if normalized_efficiency >= config.energy_saver_min:
        return Badge.ENERGY_SAVER
    if normalized_efficiency >= config.eco_driver_min:
        return Badge.ECO_DRIVER
    return Badge.NEEDS_IMPROVEMENT
