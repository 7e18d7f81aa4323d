"""
Inductee Dataset Reader (Imperative Shell)

Reads the inductee CSV and returns the flat DataFrame consumed by the
functional core (``hofviz.analysis``) and the plotting layer.

Package Location: src/hofviz/data/reader.py

Expected columns (extra columns are ignored)::

    category    : str, induction category (e.g. "Performers")
    class_year  : int, induction year
    gender      : str, one of "male" | "female" | "mixed"

Load failures (missing file, unparseable CSV, missing column) raise
``DatasetLoadError``; nothing is retried.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

from ..analysis.aggregate import GENDERS, RECORD_COLUMNS

log = logging.getLogger(__name__)


class DatasetLoadError(Exception):
    """
    Raised when the inductee dataset cannot be loaded.

    Raised when:
    - The file does not exist
    - The CSV cannot be parsed
    - A required column is absent
    """
    pass


def load_inductees(path: Union[str, Path]) -> pd.DataFrame:
    """
    Load and normalise the inductee dataset.

    ``category`` is stripped, ``gender`` is stripped and lower-cased, and
    ``class_year`` is coerced to ``int64``.  Rows whose year is missing or
    not a whole number (``1986.7``) are dropped and counted in a warning.
    Blank genders and values outside ``male``/``female``/``mixed`` are
    kept (the core ignores them but their year still appears) and logged.

    Args:
        path: Path to the CSV file.

    Returns:
        DataFrame with columns ``[category, class_year, gender]``.

    Raises:
        DatasetLoadError: If the file is missing, unreadable, or lacks a
            required column.
    """
    csv_path = Path(path)
    if not csv_path.is_file():
        raise DatasetLoadError(f"Dataset not found: {csv_path}")

    try:
        raw = pd.read_csv(csv_path, dtype=str, keep_default_na=False, na_values=[''])
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(f"Failed to parse {csv_path.name}: {exc}") from exc

    raw.columns = [str(c).strip() for c in raw.columns]
    missing = [c for c in RECORD_COLUMNS if c not in raw.columns]
    if missing:
        raise DatasetLoadError(
            f"{csv_path.name} is missing required columns: {missing}"
        )

    df = raw[RECORD_COLUMNS].copy()
    df['category'] = df['category'].str.strip()
    df['gender'] = df['gender'].str.strip().str.lower()
    df['class_year'] = pd.to_numeric(df['class_year'], errors='coerce')

    year = df['class_year']
    bad_year = year.isna() | (year % 1 != 0)
    if bad_year.any():
        log.warning(
            f"Dropping {int(bad_year.sum())} rows without a valid integer class_year",
            extra={"dataset": str(csv_path), "dropped": int(bad_year.sum())},
        )
        df = df.loc[~bad_year].copy()

    df['class_year'] = df['class_year'].astype(np.int64)

    unknown = ~df['gender'].isin(GENDERS)
    if unknown.any():
        log.warning(
            f"{int(unknown.sum())} rows have an unrecognised gender value",
            extra={
                "dataset": str(csv_path),
                "values": sorted(df.loc[unknown, 'gender'].dropna().unique().tolist()),
            },
        )

    df = df.reset_index(drop=True)
    log.info(
        f"Loaded {len(df)} inductees from {csv_path.name}",
        extra={"dataset": str(csv_path), "rows": len(df)},
    )
    return df
