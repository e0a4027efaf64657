"""Population-relative normalization of raw efficiency scores.

Scores are relative: a driver's normalized value depends on every other
driver in the set, so any insertion or deletion invalidates all of them.
:func:`normalize` therefore always works on the complete population and
returns fresh driver instances.
"""

from __future__ import annotations

import dataclasses

import numpy as np

from ev_engine.core.driver import Driver
from ev_engine.core.scoring_config import DEFAULT_CONFIG, ScoringConfig


def normalized_scores(
    efficiencies: list[float],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> list[int]:
    """Rescale raw efficiencies onto the configured integer band.

    The least efficient value maps to ``config.band_min`` and the most
    efficient to ``config.band_max``.  When every value is equal the
    whole population receives ``config.tie_score``.  Rounding is half-up.

    Args:
        efficiencies: Raw efficiency values, in driver order.
        config: Band bounds and tie score.

    Returns:
        Integer scores in the same order as *efficiencies*.
    """
    if not efficiencies:
        return []

    values = np.asarray(efficiencies, dtype=float)
    low = float(values.min())
    high = float(values.max())

    if high == low:
        return [config.tie_score] * len(efficiencies)

    span = config.band_max - config.band_min
    scaled = (values - low) / (high - low) * span
    rounded = np.floor(scaled + 0.5).astype(int) + config.band_min
    return [int(s) for s in rounded]


def normalize(
    drivers: list[Driver],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> list[Driver]:
    """Return *drivers* with ``normalized_efficiency`` recomputed.

    The input list and its elements are left untouched; output order and
    length match the input.

    Args:
        drivers: The full current population, each carrying a raw
            ``efficiency``.
        config: Band bounds and tie score.

    Returns:
        New :class:`Driver` instances with fresh normalized scores.
    """
    scores = normalized_scores([d.efficiency for d in drivers], config)
    return [
        dataclasses.replace(driver, normalized_efficiency=score)
        for driver, score in zip(drivers, scores)
    ]
