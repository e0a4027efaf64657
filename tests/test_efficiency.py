"""Tests for the raw efficiency calculator."""

from ev_engine.core.efficiency import calculate_efficiency
from ev_engine.core.scoring_config import ScoringConfig


def test_efficiency_is_distance_per_energy() -> None:
    """400 km on 50 kWh is 8 km/kWh."""
    assert calculate_efficiency(400.0, 50.0) == 8.0
    assert calculate_efficiency(200.0, 40.0) == 5.0


def test_efficiency_rounded_to_two_places() -> None:
    """Results keep two decimal places."""
    assert calculate_efficiency(100.0, 3.0) == round(100.0 / 3.0, 2)
    assert calculate_efficiency(150.0, 45.0) == 3.33


def test_zero_energy_returns_zero() -> None:
    """Zero energy must not divide."""
    assert calculate_efficiency(250.0, 0.0) == 0.0
    assert calculate_efficiency(0.0, 0.0) == 0.0


def test_negative_energy_returns_zero() -> None:
    """Negative energy is guarded the same way as zero."""
    assert calculate_efficiency(250.0, -5.0) == 0.0


def test_precision_follows_config() -> None:
    """A custom precision changes the rounding."""
    config = ScoringConfig(precision=1)
    assert calculate_efficiency(100.0, 3.0, config) == 33.3


def test_deterministic() -> None:
    """Same inputs must always produce the exact same output."""
    assert calculate_efficiency(123.4, 17.8) == calculate_efficiency(123.4, 17.8)
