from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import pytest


@pytest.fixture()
def inductees() -> pd.DataFrame:
    """Small inductee set spanning two categories and three years."""
    rows = [
        ("Performers", 1986, "male"),
        ("Performers", 1986, "male"),
        ("Performers", 1986, "female"),
        ("Performers", 1987, "mixed"),
        ("Performers", 1987, "male"),
        ("Early Influences", 1986, "female"),
        ("Early Influences", 1988, "male"),
        ("Early Influences", 1988, "mixed"),
        ("Early Influences", 1988, "mixed"),
    ]
    return pd.DataFrame(rows, columns=["category", "class_year", "gender"])


@pytest.fixture()
def inductee_csv(tmp_path: Path, inductees: pd.DataFrame) -> Path:
    path = tmp_path / "hall_of_fame_data.csv"
    df = inductees.copy()
    df.insert(0, "name", [f"Inductee {i}" for i in range(len(df))])
    df.to_csv(path, index=False)
    return path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers the CLI attaches so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("hofviz")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
