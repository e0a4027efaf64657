"""Tests for population-relative normalization."""

from ev_engine.core.driver import Driver
from ev_engine.core.normalization import normalize, normalized_scores
from ev_engine.core.scoring_config import ScoringConfig

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _driver(driver_id: str, efficiency: float) -> Driver:
    return Driver(
        id=driver_id,
        name=f"Driver {driver_id}",
        vehicle="Test EV",
        distance=efficiency * 10.0,
        energy_used=10.0,
        efficiency=efficiency,
    )


def _population(*efficiencies: float) -> list[Driver]:
    return [_driver(str(i), e) for i, e in enumerate(efficiencies)]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_empty_population() -> None:
    """Empty input yields empty output."""
    assert normalize([]) == []
    assert normalized_scores([]) == []


def test_two_driver_scenario() -> None:
    """Best maps to 100 and worst to 10."""
    result = normalize(_population(8.0, 5.0))
    assert [d.normalized_efficiency for d in result] == [100, 10]


def test_single_driver_gets_midpoint() -> None:
    """A lone driver has no spread and scores 50."""
    result = normalize(_population(6.42))
    assert result[0].normalized_efficiency == 50


def test_all_tied_get_midpoint() -> None:
    """Zero variance across many drivers scores everyone 50."""
    result = normalize(_population(4.0, 4.0, 4.0, 4.0))
    assert all(d.normalized_efficiency == 50 for d in result)


def test_intermediate_value() -> None:
    """Midway between min and max scores 55."""
    result = normalize(_population(2.0, 4.0, 6.0))
    assert [d.normalized_efficiency for d in result] == [10, 55, 100]


def test_half_rounds_up() -> None:
    """An exact .5 scaled value rounds toward the higher score."""
    # (1 - 0) / 4 * 90 = 22.5 -> 23 -> 33
    scores = normalized_scores([0.0, 1.0, 4.0])
    assert scores == [10, 33, 100]


def test_range_and_order_preserved() -> None:
    """Scores stay in [10, 100] and follow raw efficiency order."""
    effs = [3.1, 7.25, 5.0, 9.9, 3.1, 6.66, 8.0]
    result = normalize(_population(*effs))
    for d in result:
        assert 10 <= d.normalized_efficiency <= 100
        assert isinstance(d.normalized_efficiency, int)
    for a in result:
        for b in result:
            if a.efficiency < b.efficiency:
                assert a.normalized_efficiency <= b.normalized_efficiency
            if a.efficiency == b.efficiency:
                assert a.normalized_efficiency == b.normalized_efficiency


def test_order_and_ids_preserved() -> None:
    """Output order and identity fields match the input."""
    drivers = _population(5.0, 9.0, 1.0)
    result = normalize(drivers)
    assert [d.id for d in result] == [d.id for d in drivers]
    assert [d.efficiency for d in result] == [d.efficiency for d in drivers]


def test_input_not_mutated() -> None:
    """normalize returns new instances and leaves the input intact."""
    drivers = _population(5.0, 9.0)
    snapshot = list(drivers)
    result = normalize(drivers)
    assert drivers == snapshot
    assert all(d.normalized_efficiency == 0 for d in drivers)
    assert result is not drivers


def test_idempotent() -> None:
    """Normalizing twice gives identical scores."""
    once = normalize(_population(2.2, 8.8, 4.4))
    twice = normalize(once)
    assert [d.normalized_efficiency for d in once] == [
        d.normalized_efficiency for d in twice
    ]


def test_custom_band() -> None:
    """Band bounds and tie score come from the config."""
    config = ScoringConfig(band_min=0, band_max=10, tie_score=5)
    assert normalized_scores([1.0, 2.0, 3.0], config) == [0, 5, 10]
    assert normalized_scores([7.0], config) == [5]
