"""
Inductee Aggregation and Stacking (Functional Core)

Pure functions only. No I/O, no plotting, no side effects.
Input/output is DataFrames and plain dicts.

Package Location: src/hofviz/analysis/aggregate.py

Category Filter Rule:
    ``None`` and the sentinel string ``"all"`` (any case) both mean "no
    filter".  Any other value is an equality match on ``category``.

Stacking Rule:
    Stacks carry magnitudes only.  The positive group is ``male``; the
    negative group is ``female`` then ``mixed`` on top of it, so that
    ``mixed.lower == female.upper`` for every year.  The plotting layer
    flips the sign of the negative group at render time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import numpy as np
import pandas as pd

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

ALL_CATEGORIES: str = 'all'

GENDERS: Tuple[str, ...] = ('male', 'female', 'mixed')
POSITIVE_KEYS: Tuple[str, ...] = ('male',)
NEGATIVE_KEYS: Tuple[str, ...] = ('female', 'mixed')

RECORD_COLUMNS: List[str] = ['category', 'class_year', 'gender']
AGGREGATE_COLUMNS: List[str] = ['year', *GENDERS]

# Accepted spellings of the year field when records are plain mappings
_YEAR_ALIASES = ('class_year', 'classYear', 'year')


@dataclass(frozen=True)
class InducteeRecord:
    """One honoree: category, induction year and gender."""

    category: str
    class_year: int
    gender: str


Records = Union[pd.DataFrame, Iterable[Union[InducteeRecord, Mapping[str, Any]]]]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def filter_records(records: Records, category: Optional[str] = None) -> pd.DataFrame:
    """
    Restrict *records* to a single category.

    Args:
        records: Inductee DataFrame (or iterable of records).
        category: Category name, ``"all"`` or ``None``.

    Returns:
        A new DataFrame; the input is never mutated.
    """
    df = _as_frame(records)
    if is_all_categories(category):
        return df.copy()
    return df.loc[df['category'] == category].copy()


def aggregate(records: Records, category: Optional[str] = None) -> pd.DataFrame:
    """
    Count inductees per gender for each class year.

    Every distinct year in the filtered set yields one row; a gender with no
    inductees in that year is reported as ``0``.  Rows whose gender is not
    one of ``male``/``female``/``mixed`` still make their year appear but
    are not counted in any column.

    Args:
        records: Inductee DataFrame with ``category``, ``class_year`` and
            ``gender`` columns, or an iterable of records.
        category: Optional category filter (see module docstring).

    Returns:
        DataFrame with columns ``[year, male, female, mixed]`` sorted by
        year.  Empty (with those columns) when nothing matches.

    Example::

        >>> aggregate([{'category': 'x', 'class_year': 2000, 'gender': 'male'}])
           year  male  female  mixed
        0  2000     1       0      0
    """
    df = filter_records(records, category)

    if df.empty:
        return _empty_aggregate()

    # Blank genders still mark their year as present
    genders = df['gender'].fillna('')
    counts = pd.crosstab(df['class_year'], genders)
    counts = counts.reindex(columns=list(GENDERS), fill_value=0)

    result = counts.rename_axis(index='year', columns=None).reset_index()
    result['year'] = result['year'].astype(np.int64)
    for key in GENDERS:
        result[key] = result[key].astype(np.int64)

    return result[AGGREGATE_COLUMNS].sort_values('year').reset_index(drop=True)


def stack_positive(aggregates: pd.DataFrame) -> Dict[str, pd.DataFrame]:
    """
    Stack the positive group (``male``) from a zero baseline.

    Args:
        aggregates: Output of :func:`aggregate`.

    Returns:
        ``{'male': DataFrame[year, lower, upper]}`` with ``[0, male]`` per year.
    """
    return _stack(aggregates, POSITIVE_KEYS)


def stack_negative(aggregates: pd.DataFrame) -> Dict[str, pd.DataFrame]:
    """
    Stack the negative group: ``female`` from zero, ``mixed`` on top.

    Intervals are magnitudes; the caller mirrors them below the axis.

    Args:
        aggregates: Output of :func:`aggregate`.

    Returns:
        ``{'female': [0, female], 'mixed': [female, female + mixed]}``, each
        a DataFrame with columns ``[year, lower, upper]``.
    """
    return _stack(aggregates, NEGATIVE_KEYS)


def summarize(records: Records) -> Dict[str, Any]:
    """
    Totals and share of women among male/female inductees.

    Mixed entries are left out of both the totals and the denominator.

    Args:
        records: Inductee DataFrame (already filtered by the caller).

    Returns:
        Dict with ``total_male`` (int), ``total_female`` (int) and
        ``percent_female`` (float, two decimals; ``0.0`` when there are no
        male or female inductees).
    """
    df = _as_frame(records)
    total_male = int((df['gender'] == 'male').sum())
    total_female = int((df['gender'] == 'female').sum())
    total = total_male + total_female

    percent_female = round(total_female / total * 100, 2) if total else 0.0

    return {
        'total_male': total_male,
        'total_female': total_female,
        'percent_female': float(percent_female),
    }


def value_extent(aggregates: pd.DataFrame, floor: float = -10) -> Tuple[float, float]:
    """
    Signed y-axis extent for the diverging layout.

    Computed once from the unfiltered dataset so the axis stays put while
    the category changes.  The upper bound is the largest
    ``male + max(female, mixed)``; the lower bound is *floor* unless the
    stacked negative group reaches further down.

    Args:
        aggregates: Output of :func:`aggregate` on the full dataset.
        floor: Minimum depth of the negative side.

    Returns:
        ``(low, high)`` tuple.
    """
    _validate_columns(aggregates, AGGREGATE_COLUMNS, name='aggregates')
    if aggregates.empty:
        return float(floor), 0.0

    high = (aggregates['male'] + aggregates[['female', 'mixed']].max(axis=1)).max()
    depth = (aggregates['female'] + aggregates['mixed']).max()
    return float(min(floor, -depth)), float(high)


def list_categories(records: Records) -> List[str]:
    """Distinct categories in order of first appearance."""
    df = _as_frame(records)
    return [str(c) for c in df['category'].dropna().unique().tolist()]


def is_all_categories(category: Optional[str]) -> bool:
    """True when *category* means "no filter"."""
    return category is None or str(category).strip().lower() == ALL_CATEGORIES


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _stack(aggregates: pd.DataFrame, keys: Tuple[str, ...]) -> Dict[str, pd.DataFrame]:
    """
    Cumulative ``[lower, upper]`` intervals for *keys*, in order.

    Args:
        aggregates: DataFrame with ``year`` and one column per key.
        keys: Series stacked bottom to top.

    Returns:
        Dict of key -> DataFrame ``[year, lower, upper]``.
    """
    _validate_columns(aggregates, ['year', *keys], name='aggregates')

    values = aggregates[list(keys)].to_numpy(dtype=np.int64)
    upper = np.cumsum(values, axis=1)
    lower = upper - values

    years = aggregates['year'].to_numpy(dtype=np.int64)
    return {
        key: pd.DataFrame({
            'year': years,
            'lower': lower[:, i],
            'upper': upper[:, i],
        })
        for i, key in enumerate(keys)
    }


def _as_frame(records: Records) -> pd.DataFrame:
    """
    Coerce *records* to a DataFrame with ``RECORD_COLUMNS``.

    DataFrames are validated and returned as-is (never mutated).  Any other
    iterable is read as ``InducteeRecord`` instances or mappings; the year
    may be keyed ``class_year``, ``classYear`` or ``year``.

    Raises:
        ValueError: If a required column or field is missing.
    """
    if isinstance(records, pd.DataFrame):
        _validate_columns(records, RECORD_COLUMNS, name='records')
        return records

    rows = []
    for rec in records:
        if isinstance(rec, InducteeRecord):
            rows.append({
                'category': rec.category,
                'class_year': rec.class_year,
                'gender': rec.gender,
            })
            continue

        year = next((rec[k] for k in _YEAR_ALIASES if k in rec), None)
        if year is None:
            raise ValueError(f"record has no class year field: {dict(rec)}")
        rows.append({
            'category': rec.get('category'),
            'class_year': int(year),
            'gender': rec.get('gender'),
        })

    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def _empty_aggregate() -> pd.DataFrame:
    return pd.DataFrame(
        {col: pd.Series(dtype=np.int64) for col in AGGREGATE_COLUMNS}
    )


def _validate_columns(df: pd.DataFrame, required: List[str], name: str) -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.
        name: Argument name used in the error message.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{name} is missing required columns: {missing}")
