"""CLI entrypoint for the EV Drive Buddy scoring engine."""

from __future__ import annotations

import logging
import sys

from ev_engine import __version__
from ev_engine.config import load_scoring_config
from ev_engine.core.driver import Driver
from ev_engine.core.pipeline import add_driver, delete_driver, import_rows
from ev_engine.core.stats import badge_distribution, leaderboard, summarize
from ev_engine.data_ingestion.frame_loader import rows_from_frame, template_frame


def _print_table(drivers: list[Driver]) -> None:
    print(f"  {'Name':<14}  {'Vehicle':<14}  {'km/kWh':>7}  {'Score':>5}  Badge")
    print(f"  {'-' * 14}  {'-' * 14}  {'-' * 7}  {'-' * 5}  {'-' * 17}")
    for d in leaderboard(drivers):
        print(
            f"  {d.name:<14}  {d.vehicle:<14}  {d.efficiency:7.2f}  "
            f"{d.normalized_efficiency:5d}  {d.badge.value}"
        )


def main() -> None:
    """Run a demonstration of the scoring pipeline."""
    logging.basicConfig(level=logging.WARNING)

    print(f"EV Drive Buddy scoring engine v{__version__}")
    print("=" * 56)

    # -- Load scoring parameters -------------------------------------------
    config = load_scoring_config()
    print(
        f"\nScore band [{config.band_min}, {config.band_max}], "
        f"tie score {config.tie_score}"
    )

    # -- Single admissions --------------------------------------------------
    drivers = add_driver([], "Alice", "Tesla Model 3", 400.0, 50.0, config=config)
    print("\nAfter adding one driver:\n")
    _print_table(drivers)

    drivers = add_driver(drivers, "Bruno", "Nissan Leaf", 200.0, 40.0, config=config)
    print("\nAfter adding a second driver:\n")
    _print_table(drivers)

    # -- Bulk import from the template -------------------------------------
    rows = rows_from_frame(template_frame())
    rows.append(["", "Kia EV6", "abc", "0"])
    result = import_rows(drivers, rows, first_row=2, config=config)
    drivers = result.drivers
    print(f"\nImported {result.imported} row(s) from the template:\n")
    _print_table(drivers)
    for error in result.errors:
        print(f"  ! {error}")

    # -- Delete -------------------------------------------------------------
    drivers = delete_driver(drivers, drivers[0].id, config=config)
    print("\nAfter deleting the first driver:\n")
    _print_table(drivers)

    # -- Summary ------------------------------------------------------------
    summary = summarize(drivers)
    print("-" * 56)
    print(f"Drivers            : {summary.total_drivers}")
    print(f"Average efficiency : {summary.average_efficiency:.1f} km/kWh")
    if summary.top_performer is not None:
        print(f"Top performer      : {summary.top_performer.name}")
    for badge, (count, pct) in badge_distribution(drivers).items():
        print(f"  {badge.value:<18} {count:2d}  ({pct:5.1f}%)")


if __name__ == "__main__":
    sys.exit(main() or 0)
