from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from hofviz.analysis import (
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
from hofviz.data import load_inductees


def test_aggregate_single_year_example() -> None:
    records = [
        {"category": "x", "year": 2000, "gender": "male"},
        {"category": "x", "year": 2000, "gender": "female"},
        {"category": "x", "year": 2000, "gender": "mixed"},
    ]

    result = aggregate(records)

    assert result.to_dict("records") == [
        {"year": 2000, "male": 1, "female": 1, "mixed": 1}
    ]
    assert summarize(records) == {
        "total_male": 1,
        "total_female": 1,
        "percent_female": 50.0,
    }


def test_aggregate_counts_per_year_with_zero_fill(inductees: pd.DataFrame) -> None:
    result = aggregate(inductees)

    expected = pd.DataFrame(
        {
            "year": [1986, 1987, 1988],
            "male": [2, 1, 1],
            "female": [2, 0, 0],
            "mixed": [0, 1, 2],
        }
    ).astype(np.int64)
    pd.testing.assert_frame_equal(result, expected)


def test_aggregate_category_filter(inductees: pd.DataFrame) -> None:
    result = aggregate(inductees, "Early Influences")

    assert result["year"].tolist() == [1986, 1988]
    assert result["male"].tolist() == [0, 1]
    assert result["female"].tolist() == [1, 0]
    assert result["mixed"].tolist() == [0, 2]


def test_aggregate_total_matches_filtered_record_count(inductees: pd.DataFrame) -> None:
    for category in [None, "all", "Performers", "Early Influences"]:
        result = aggregate(inductees, category)
        filtered = filter_records(inductees, category)
        total = int(result[["male", "female", "mixed"]].to_numpy().sum())
        assert total == len(filtered)


def test_filter_equal_to_every_category_matches_no_filter(inductees: pd.DataFrame) -> None:
    single = inductees.assign(category="Performers")

    pd.testing.assert_frame_equal(aggregate(single, "Performers"), aggregate(single))
    assert summarize(filter_records(single, "Performers")) == summarize(single)


def test_all_sentinel_is_case_insensitive(inductees: pd.DataFrame) -> None:
    assert is_all_categories(None)
    assert is_all_categories("all")
    assert is_all_categories("All")
    assert not is_all_categories("Performers")
    pd.testing.assert_frame_equal(aggregate(inductees, "All"), aggregate(inductees))


def test_unknown_category_yields_empty_aggregate(inductees: pd.DataFrame) -> None:
    result = aggregate(inductees, "Sidemen")

    assert result.empty
    assert list(result.columns) == ["year", "male", "female", "mixed"]


def test_empty_input_produces_empty_outputs() -> None:
    result = aggregate([])

    assert result.empty
    assert list(result.columns) == ["year", "male", "female", "mixed"]
    assert stack_positive(result)["male"].empty
    negative = stack_negative(result)
    assert negative["female"].empty and negative["mixed"].empty
    assert summarize([]) == {
        "total_male": 0,
        "total_female": 0,
        "percent_female": 0.0,
    }


def test_unrecognised_gender_is_not_counted() -> None:
    records = [
        InducteeRecord(category="x", class_year=1990, gender="male"),
        InducteeRecord(category="x", class_year=1991, gender="unknown"),
    ]

    result = aggregate(records)

    assert result["year"].tolist() == [1990, 1991]
    assert result.loc[1, ["male", "female", "mixed"]].tolist() == [0, 0, 0]


def test_stack_positive_is_zero_based(inductees: pd.DataFrame) -> None:
    stack = stack_positive(aggregate(inductees))

    assert list(stack) == ["male"]
    assert stack["male"]["lower"].tolist() == [0, 0, 0]
    assert stack["male"]["upper"].tolist() == [2, 1, 1]


def test_stack_negative_has_no_gap_or_overlap(inductees: pd.DataFrame) -> None:
    agg = aggregate(inductees)
    stack = stack_negative(agg)

    female, mixed = stack["female"], stack["mixed"]
    assert female["lower"].tolist() == [0, 0, 0]
    assert female["upper"].tolist() == agg["female"].tolist()
    assert mixed["lower"].tolist() == female["upper"].tolist()
    assert mixed["upper"].tolist() == (agg["female"] + agg["mixed"]).tolist()
    assert (mixed["lower"] >= 0).all()


def test_summarize_excludes_mixed_from_denominator(inductees: pd.DataFrame) -> None:
    assert summarize(inductees) == {
        "total_male": 4,
        "total_female": 2,
        "percent_female": 33.33,
    }
    assert summarize(filter_records(inductees, "Performers"))["percent_female"] == 25.0


def test_summarize_only_mixed_is_zero_percent() -> None:
    records = [{"category": "x", "class_year": 2001, "gender": "mixed"}]

    assert summarize(records)["percent_female"] == 0.0


def test_value_extent_uses_floor_and_stack_depth(inductees: pd.DataFrame) -> None:
    assert value_extent(aggregate(inductees)) == (-10.0, 4.0)

    deep = pd.DataFrame(
        {"year": [2000], "male": [3], "female": [8], "mixed": [5]}
    )
    assert value_extent(deep) == (-13.0, 11.0)


def test_list_categories_preserves_first_appearance(inductees: pd.DataFrame) -> None:
    assert list_categories(inductees) == ["Performers", "Early Influences"]


def test_filter_does_not_mutate_input(inductees: pd.DataFrame) -> None:
    before = inductees.copy(deep=True)
    filter_records(inductees, "Performers")
    aggregate(inductees, "Performers")
    pd.testing.assert_frame_equal(inductees, before)


def test_missing_columns_raise_value_error() -> None:
    with pytest.raises(ValueError, match="class_year"):
        aggregate(pd.DataFrame({"category": ["x"], "gender": ["male"]}))


def test_record_without_year_raises_value_error() -> None:
    with pytest.raises(ValueError, match="class year"):
        aggregate([{"category": "x", "gender": "male"}])


def test_blank_gender_year_survives_loading_and_aggregation(tmp_path: Path) -> None:
    path = tmp_path / "blank_gender.csv"
    path.write_text(
        "category,class_year,gender\n"
        "Performers,1986,male\n"
        "Performers,1987,\n"
    )

    result = aggregate(load_inductees(path))

    assert result["year"].tolist() == [1986, 1987]
    assert result.loc[result["year"] == 1987, ["male", "female", "mixed"]].iloc[0].tolist() == [0, 0, 0]
