"""Core scoring modules for the EV efficiency engine."""

from ev_engine.core.badge import Badge, classify
from ev_engine.core.driver import STORAGE_KEY, Driver, TripRecord, new_driver_id
from ev_engine.core.efficiency import calculate_efficiency
from ev_engine.core.normalization import normalize, normalized_scores
from ev_engine.core.pipeline import (
    ImportResult,
    add_driver,
    delete_driver,
    import_rows,
    rescore,
    validate_row,
)
from ev_engine.core.scoring_config import DEFAULT_CONFIG, ScoringConfig
from ev_engine.core.stats import (
    FleetSummary,
    badge_distribution,
    leaderboard,
    search,
    sort_drivers,
    summarize,
    top_scores,
)

__all__ = [
    "Badge",
    "DEFAULT_CONFIG",
    "Driver",
    "FleetSummary",
    "ImportResult",
    "STORAGE_KEY",
    "ScoringConfig",
    "TripRecord",
    "add_driver",
    "badge_distribution",
    "calculate_efficiency",
    "classify",
    "delete_driver",
    "import_rows",
    "leaderboard",
    "new_driver_id",
    "normalize",
    "normalized_scores",
    "rescore",
    "search",
    "sort_drivers",
    "summarize",
    "top_scores",
    "validate_row",
]
