"""Configuration loader for the EV efficiency engine."""

from pathlib import Path

import yaml

from ev_engine.core.scoring_config import ScoringConfig

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
SCORING_PATH: Path = DATA_DIR / "scoring.yaml"

_INT_FIELDS: tuple[str, ...] = (
    "band_min",
    "band_max",
    "tie_score",
    "precision",
)

_NUMERIC_FIELDS: tuple[str, ...] = (
    "energy_saver_min",
    "eco_driver_min",
)

_REQUIRED_FIELDS: tuple[str, ...] = _INT_FIELDS + _NUMERIC_FIELDS


def load_scoring_config(path: Path | None = None) -> ScoringConfig:
    """Load scoring parameters from a YAML file.

    Args:
        path: Optional override for the scoring file path.

    Returns:
        A validated :class:`ScoringConfig`.

    Raises:
        FileNotFoundError: If the scoring file does not exist.
        ValueError: If a field is missing, has the wrong type, or the
            combined values are inconsistent.
    """
    scoring_path = path or SCORING_PATH
    if not scoring_path.exists():
        raise FileNotFoundError(f"Scoring file not found: {scoring_path}")

    with open(scoring_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Scoring file {scoring_path} must contain a mapping")

    for field in _REQUIRED_FIELDS:
        if field not in data:
            raise ValueError(f"Scoring file is missing required field '{field}'")

    # bool is an int subclass; reject it explicitly.
    for field in _INT_FIELDS:
        val = data[field]
        if isinstance(val, bool) or not isinstance(val, int):
            raise ValueError(
                f"'{field}' must be an integer, got {type(val).__name__}"
            )

    for field in _NUMERIC_FIELDS:
        val = data[field]
        if isinstance(val, bool) or not isinstance(val, (int, float)):
            raise ValueError(
                f"'{field}' must be numeric, got {type(val).__name__}"
            )

    return ScoringConfig(
        band_min=int(data["band_min"]),
        band_max=int(data["band_max"]),
        tie_score=int(data["tie_score"]),
        energy_saver_min=float(data["energy_saver_min"]),
        eco_driver_min=float(data["eco_driver_min"]),
        precision=int(data["precision"]),
    )
