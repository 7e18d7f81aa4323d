from __future__ import annotations

import re
from pathlib import Path

import pytest

from hofviz.data import DatasetLoadError
from hofviz.reports import ChartGenerator, generate_report

# Call plotly emits on page load when the walkthrough auto-plays
AUTO_PLAY = re.compile(r"Plotly\.animate\('[^']+', null")


def test_generate_writes_html(inductee_csv: Path, tmp_path: Path) -> None:
    out_dir = tmp_path / "reports"
    gen = ChartGenerator(inductee_csv, out_dir)

    out_path = gen.generate()

    assert out_path == out_dir / "inductees_by_gender.html"
    html = out_path.read_text(encoding="utf-8")
    assert "Play walkthrough" in html
    assert "Hall Of Fame Data" in html


def test_generate_with_category_and_filename(inductee_csv: Path, tmp_path: Path) -> None:
    gen = ChartGenerator(inductee_csv, tmp_path, metadata={"dataset_name": "Rock Hall"})

    out_path = gen.generate(category="Performers", filename="performers.html", auto_play=True)

    assert out_path.name == "performers.html"
    html = out_path.read_text(encoding="utf-8")
    assert "Category: Performers" in html
    assert "Rock Hall" in html


def test_summary_per_category(inductee_csv: Path, tmp_path: Path) -> None:
    gen = ChartGenerator(inductee_csv, tmp_path)

    assert gen.summary() == {"total_male": 4, "total_female": 2, "percent_female": 33.33}
    assert gen.summary("Early Influences")["percent_female"] == 50.0


def test_unknown_category_raises(inductee_csv: Path, tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        ChartGenerator(inductee_csv, tmp_path).generate(category="Sidemen")


def test_missing_dataset_raises(tmp_path: Path) -> None:
    with pytest.raises(DatasetLoadError):
        generate_report(tmp_path / "missing.csv", tmp_path)


def test_generate_report_convenience(inductee_csv: Path, tmp_path: Path) -> None:
    out_path = generate_report(inductee_csv, tmp_path / "out", filename="chart.html")

    assert out_path.exists()


def test_generate_starts_walkthrough_by_default(inductee_csv: Path, tmp_path: Path) -> None:
    gen = ChartGenerator(inductee_csv, tmp_path)

    playing = gen.generate(filename="playing.html").read_text(encoding="utf-8")
    still = gen.generate(filename="still.html", auto_play=False).read_text(encoding="utf-8")

    assert AUTO_PLAY.search(playing)
    assert not AUTO_PLAY.search(still)
