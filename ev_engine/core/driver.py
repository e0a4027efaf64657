"""Trip and driver records for the EV efficiency engine."""

from __future__ import annotations

import math
import time
import uuid
from dataclasses import dataclass
from typing import Any

from ev_engine.core.badge import Badge

STORAGE_KEY: str = "ev-tracker-drivers"


def _as_float(value: Any, field: str) -> float:
    """Return *value* as a finite float or raise ValueError naming *field*."""
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number, got bool.")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field} must be a number, got {value!r}.") from exc
    if not math.isfinite(number):
        raise ValueError(f"{field} must be finite, got {number}.")
    return number


def new_driver_id() -> str:
    """Return a fresh opaque driver identifier."""
    return f"driver-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


@dataclass(frozen=True)
class TripRecord:
    """A validated trip submitted for admission.

    Attributes:
        name: Driver name, stripped of surrounding whitespace.
        vehicle: Free-text vehicle description.
        distance: Distance covered in km (> 0).
        energy_used: Energy consumed in kWh (> 0).
    """

    name: str
    vehicle: str
    distance: float
    energy_used: float

    def __post_init__(self) -> None:
        """Validate trip fields."""
        if not self.name or not self.name.strip():
            raise ValueError("name must not be empty.")
        if not self.vehicle or not self.vehicle.strip():
            raise ValueError("vehicle must not be empty.")
        for field in ("distance", "energy_used"):
            value = _as_float(getattr(self, field), field)
            if value <= 0.0:
                raise ValueError(f"{field} must be > 0.")
            # Frozen dataclass; store the coerced value.
            object.__setattr__(self, field, value)


@dataclass(frozen=True)
class Driver:
    """A scored driver entry.

    ``efficiency``, ``normalized_efficiency`` and ``badge`` are derived
    values owned by :mod:`ev_engine.core.pipeline`; a driver that has not
    yet been through a normalization pass carries ``badge=None``.

    Attributes:
        id: Opaque identifier, fixed at creation.
        name: Driver name.
        vehicle: Free-text vehicle description.
        distance: Distance covered in km.
        energy_used: Energy consumed in kWh.
        efficiency: Raw efficiency in km/kWh.
        normalized_efficiency: Population-relative score.
        badge: Tier derived from ``normalized_efficiency``.
    """

    id: str
    name: str
    vehicle: str
    distance: float
    energy_used: float
    efficiency: float = 0.0
    normalized_efficiency: int = 0
    badge: Badge | None = None

    def __post_init__(self) -> None:
        """Validate driver fields."""
        if not self.id:
            raise ValueError("id must not be empty.")
        if not self.name:
            raise ValueError("name must not be empty.")
        if not self.vehicle:
            raise ValueError("vehicle must not be empty.")
        for field in ("distance", "energy_used", "efficiency"):
            _as_float(getattr(self, field), field)

    def to_record(self) -> dict[str, Any]:
        """Return the driver as a plain, JSON-compatible mapping."""
        return {
            "id": self.id,
            "name": self.name,
            "vehicle": self.vehicle,
            "distance": self.distance,
            "energyUsed": self.energy_used,
            "efficiency": self.efficiency,
            "normalizedEfficiency": self.normalized_efficiency,
            "badge": self.badge.value if self.badge is not None else None,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Driver:
        """Rebuild a driver from a mapping produced by :meth:`to_record`.

        Raises:
            ValueError: If a required key is missing or the badge label
                is unknown.
        """
        try:
            badge = record.get("badge")
            return cls(
                id=str(record["id"]),
                name=str(record["name"]),
                vehicle=str(record["vehicle"]),
                distance=float(record["distance"]),
                energy_used=float(record["energyUsed"]),
                efficiency=float(record.get("efficiency", 0.0)),
                normalized_efficiency=int(record.get("normalizedEfficiency", 0)),
                badge=Badge(badge) if badge is not None else None,
            )
        except KeyError as exc:
            raise ValueError(f"Driver record is missing field {exc}") from exc
