"""
hofviz Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept inductee DataFrames (or iterables of records) and
return DataFrames or plain dicts.

Modules:
- aggregate: per-year gender counts, diverging stacks, summary statistics
"""

from .aggregate import (
    ALL_CATEGORIES,
    GENDERS,
    InducteeRecord,
    aggregate,
    filter_records,
    is_all_categories,
    list_categories,
    stack_negative,
    stack_positive,
    summarize,
    value_extent,
)

__all__ = [
    'ALL_CATEGORIES',
    'GENDERS',
    'InducteeRecord',
    'aggregate',
    'filter_records',
    'is_all_categories',
    'list_categories',
    'stack_negative',
    'stack_positive',
    'summarize',
    'value_extent',
]
