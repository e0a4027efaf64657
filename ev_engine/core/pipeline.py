"""Driver admission pipeline.

Every change to the driver set (adding one driver, importing a batch,
deleting a driver) goes through this module and ends in :func:`rescore`,
which re-normalizes the whole population and re-derives every badge.
The driver collection itself is owned by the caller and passed in and
out by value; nothing here keeps state between calls.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ev_engine.core.badge import classify
from ev_engine.core.driver import Driver, TripRecord, new_driver_id
from ev_engine.core.efficiency import calculate_efficiency
from ev_engine.core.normalization import normalize
from ev_engine.core.scoring_config import DEFAULT_CONFIG, ScoringConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a bulk import.

    Attributes:
        drivers: The full rescored population after the import.
        imported: Number of rows admitted.
        errors: One human-readable message per failed check.
    """

    drivers: list[Driver]
    imported: int
    errors: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Re-derivation
# ---------------------------------------------------------------------------


def rescore(
    drivers: list[Driver],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> list[Driver]:
    """Normalize the whole population and assign each driver its badge."""
    return [
        dataclasses.replace(d, badge=classify(d.normalized_efficiency, config))
        for d in normalize(drivers, config)
    ]


def _build_driver(
    trip: TripRecord,
    id_factory: Callable[[], str],
    config: ScoringConfig,
) -> Driver:
    return Driver(
        id=id_factory(),
        name=trip.name.strip(),
        vehicle=trip.vehicle.strip(),
        distance=trip.distance,
        energy_used=trip.energy_used,
        efficiency=calculate_efficiency(trip.distance, trip.energy_used, config),
    )


# ---------------------------------------------------------------------------
# Add one
# ---------------------------------------------------------------------------


def add_driver(
    drivers: list[Driver],
    name: str,
    vehicle: str,
    distance: float,
    energy_used: float,
    id_factory: Callable[[], str] = new_driver_id,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> list[Driver]:
    """Admit a single trip and return the rescored population.

    Raises:
        ValueError: If the trip has an empty name or vehicle, or a
            distance or energy that is not a finite positive number.
    """
    trip = TripRecord(
        name=name, vehicle=vehicle, distance=distance, energy_used=energy_used
    )
    new_driver = _build_driver(trip, id_factory, config)
    logger.info(
        "Adding driver %s (%s) with efficiency %.2f km/kWh",
        new_driver.name,
        new_driver.vehicle,
        new_driver.efficiency,
    )
    return rescore([*drivers, new_driver], config)


# ---------------------------------------------------------------------------
# Bulk import
# ---------------------------------------------------------------------------


def _text_field(value: Any) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def _positive_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0.0:
        return None
    return number


def validate_row(
    row: Sequence[Any],
    row_number: int,
) -> tuple[TripRecord | None, list[str]]:
    """Check one positional import row (name, vehicle, distance, energy).

    Missing trailing fields count as empty.  Numeric fields may be
    numbers or numeric strings.

    Args:
        row: The raw row values.
        row_number: Position reported in error messages.

    Returns:
        ``(trip, [])`` when the row is valid, otherwise ``(None, errors)``.
    """
    padded = list(row[:4]) + [None] * (4 - min(len(row), 4))
    name = _text_field(padded[0])
    vehicle = _text_field(padded[1])
    distance = _positive_number(padded[2])
    energy = _positive_number(padded[3])

    errors: list[str] = []
    if name is None:
        errors.append(f"Row {row_number}: Name is required")
    if vehicle is None:
        errors.append(f"Row {row_number}: Vehicle is required")
    if distance is None:
        errors.append(f"Row {row_number}: Distance must be a positive number")
    if energy is None:
        errors.append(f"Row {row_number}: Energy Used must be a positive number")

    if errors:
        return None, errors
    return TripRecord(
        name=name, vehicle=vehicle, distance=distance, energy_used=energy
    ), []


def import_rows(
    drivers: list[Driver],
    rows: Sequence[Sequence[Any]],
    first_row: int = 1,
    id_factory: Callable[[], str] = new_driver_id,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> ImportResult:
    """Admit every valid row and rescore the combined population.

    Invalid rows are dropped and reported; they never abort the batch.

    Args:
        drivers: Current population.
        rows: Positional rows, without a header.
        first_row: Number reported for ``rows[0]`` (use ``2`` when the
            rows came from under a spreadsheet header).
        id_factory: Source of fresh driver ids.
        config: Scoring parameters.

    Returns:
        An :class:`ImportResult` with the rescored population.
    """
    admitted: list[Driver] = []
    errors: list[str] = []

    for offset, row in enumerate(rows):
        trip, row_errors = validate_row(row, first_row + offset)
        if trip is None:
            errors.extend(row_errors)
            continue
        admitted.append(_build_driver(trip, id_factory, config))

    if errors:
        logger.warning("Dropped %d invalid import row(s)", len(rows) - len(admitted))
    logger.info("Imported %d of %d row(s)", len(admitted), len(rows))

    return ImportResult(
        drivers=rescore([*drivers, *admitted], config),
        imported=len(admitted),
        errors=errors,
    )


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


def delete_driver(
    drivers: list[Driver],
    driver_id: str,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> list[Driver]:
    """Remove the driver with *driver_id* and rescore the remainder."""
    remaining = [d for d in drivers if d.id != driver_id]
    if len(remaining) == len(drivers):
        logger.debug("No driver with id %s to delete", driver_id)
    else:
        logger.info("Deleted driver %s", driver_id)
    return rescore(remaining, config)
