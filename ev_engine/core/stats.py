"""Fleet-level statistics and ranking queries over scored drivers."""

from __future__ import annotations

from dataclasses import dataclass

from ev_engine.core.badge import Badge
from ev_engine.core.driver import Driver

_SORT_FIELDS: tuple[str, ...] = (
    "name",
    "vehicle",
    "distance",
    "energy_used",
    "efficiency",
    "normalized_efficiency",
)

_TEXT_FIELDS: frozenset[str] = frozenset({"name", "vehicle"})


@dataclass(frozen=True)
class FleetSummary:
    """Headline figures for the current population.

    Attributes:
        total_drivers: Number of drivers.
        average_efficiency: Mean raw efficiency, ``0.0`` when empty.
        top_performer: Driver with the highest raw efficiency, or
            ``None`` when empty.  The earliest driver wins ties.
        energy_savers: Number of drivers holding the Energy Saver badge.
    """

    total_drivers: int
    average_efficiency: float
    top_performer: Driver | None
    energy_savers: int


def summarize(drivers: list[Driver]) -> FleetSummary:
    """Compute the headline figures for *drivers*."""
    if not drivers:
        return FleetSummary(0, 0.0, None, 0)

    top = drivers[0]
    for driver in drivers[1:]:
        if driver.efficiency > top.efficiency:
            top = driver

    return FleetSummary(
        total_drivers=len(drivers),
        average_efficiency=sum(d.efficiency for d in drivers) / len(drivers),
        top_performer=top,
        energy_savers=sum(1 for d in drivers if d.badge is Badge.ENERGY_SAVER),
    )


def badge_distribution(drivers: list[Driver]) -> dict[Badge, tuple[int, float]]:
    """Return ``{badge: (count, percentage)}`` for every badge, best first."""
    total = len(drivers)
    result: dict[Badge, tuple[int, float]] = {}
    for badge in Badge:
        count = sum(1 for d in drivers if d.badge is badge)
        result[badge] = (count, count / total * 100.0 if total else 0.0)
    return result


def leaderboard(drivers: list[Driver], limit: int | None = None) -> list[Driver]:
    """Drivers ranked by raw efficiency, best first."""
    ranked = sorted(drivers, key=lambda d: d.efficiency, reverse=True)
    return ranked if limit is None else ranked[:limit]


def top_scores(drivers: list[Driver], limit: int = 8) -> list[Driver]:
    """Drivers ranked by normalized score, truncated to *limit*."""
    ranked = sorted(drivers, key=lambda d: d.normalized_efficiency, reverse=True)
    return ranked[:limit]


def search(drivers: list[Driver], term: str) -> list[Driver]:
    """Drivers whose name or vehicle contains *term*, ignoring case."""
    needle = term.lower()
    return [
        d for d in drivers if needle in d.name.lower() or needle in d.vehicle.lower()
    ]


def sort_drivers(
    drivers: list[Driver],
    field: str = "efficiency",
    descending: bool = True,
) -> list[Driver]:
    """Sort drivers by one of their data fields.

    Text fields compare case-insensitively.

    Raises:
        ValueError: If *field* is not a sortable driver field.
    """
    if field not in _SORT_FIELDS:
        raise ValueError(
            f"Cannot sort by '{field}'; expected one of {', '.join(_SORT_FIELDS)}."
        )
    if field in _TEXT_FIELDS:
        return sorted(
            drivers, key=lambda d: getattr(d, field).lower(), reverse=descending
        )
    return sorted(drivers, key=lambda d: getattr(d, field), reverse=descending)
