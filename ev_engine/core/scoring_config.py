"""Scoring parameters for the EV efficiency engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    """Tunable constants shared by the normalizer and the badge classifier.

    Attributes:
        band_min: Normalized score given to the least efficient driver.
        band_max: Normalized score given to the most efficient driver.
        tie_score: Score given to every driver when raw efficiencies
            have no spread (including a single-driver population).
        energy_saver_min: Lowest normalized score earning "Energy Saver".
        eco_driver_min: Lowest normalized score earning "Eco Driver".
        precision: Decimal places kept on raw efficiency.
    """

    band_min: int = 10
    band_max: int = 100
    tie_score: int = 50
    energy_saver_min: float = 80
    eco_driver_min: float = 50
    precision: int = 2

    def __post_init__(self) -> None:
        """Validate scoring parameters."""
        if self.band_min >= self.band_max:
            raise ValueError("band_min must be < band_max.")
        if not self.band_min <= self.tie_score <= self.band_max:
            raise ValueError("tie_score must lie within [band_min, band_max].")
        if self.eco_driver_min >= self.energy_saver_min:
            raise ValueError("eco_driver_min must be < energy_saver_min.")
        if self.precision < 0:
            raise ValueError("precision must be >= 0.")


DEFAULT_CONFIG = ScoringConfig()
