"""pandas bridge between tabular trip data and the admission pipeline.

Reading spreadsheet files is left to the caller (for example
``pd.read_excel``); this module only reshapes an already-loaded
DataFrame into the positional rows :func:`ev_engine.core.pipeline.import_rows`
expects, and renders scored drivers back into a DataFrame.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

from ev_engine.core.driver import Driver

# ---------------------------------------------------------------------------
# Import template
# ---------------------------------------------------------------------------

TEMPLATE_HEADER: tuple[str, ...] = (
    "Name",
    "Vehicle",
    "Distance (km)",
    "Energy Used (kWh)",
)

TEMPLATE_ROWS: tuple[tuple[str, ...], ...] = (
    ("John Doe", "Tesla Model 3", "400", "50"),
    ("Jane Smith", "Nissan Leaf", "200", "40"),
    ("Bob Johnson", "BMW i3", "150", "45"),
)


def template_frame() -> pd.DataFrame:
    """Return the import template as a DataFrame."""
    return pd.DataFrame(list(TEMPLATE_ROWS), columns=list(TEMPLATE_HEADER))


# ---------------------------------------------------------------------------
# Frame -> rows
# ---------------------------------------------------------------------------


def rows_from_frame(df: pd.DataFrame) -> list[list[Any]]:
    """Convert the first four columns of *df* into positional rows.

    Missing cells (``NaN``/``None``) become ``None`` so that the
    pipeline's row validation reports them.  Frames with fewer than four
    columns yield short rows.

    Args:
        df: Trip table with columns in name, vehicle, distance, energy
            order.  Column labels are ignored.

    Returns:
        One list per DataFrame row.
    """
    subset = df.iloc[:, :4]
    rows: list[list[Any]] = []
    for values in subset.itertuples(index=False, name=None):
        rows.append([None if pd.isna(v) else v for v in values])
    return rows


# ---------------------------------------------------------------------------
# Drivers -> frame
# ---------------------------------------------------------------------------


def drivers_to_frame(drivers: list[Driver]) -> pd.DataFrame:
    """Tabulate scored drivers using their record field names."""
    columns = [
        "id",
        "name",
        "vehicle",
        "distance",
        "energyUsed",
        "efficiency",
        "normalizedEfficiency",
        "badge",
    ]
    return pd.DataFrame([d.to_record() for d in drivers], columns=columns)
