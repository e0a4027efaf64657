"""Raw efficiency calculation for a single trip."""

from ev_engine.core.scoring_config import DEFAULT_CONFIG, ScoringConfig


def calculate_efficiency(
    distance: float,
    energy_used: float,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> float:
    """Return distance travelled per unit of energy (km/kWh).

    Non-positive energy returns ``0.0`` instead of raising; callers are
    expected to reject such trips before they get here.

    Args:
        distance: Distance covered in km.
        energy_used: Energy consumed in kWh.
        config: Supplies the rounding precision.

    Returns:
        Efficiency rounded to ``config.precision`` decimal places.
    """
    if energy_used <= 0:
        return 0.0
    return round(distance / energy_used, config.precision)
