"""
hofviz Report Generator (Imperative Shell)

Thin orchestration layer: loads the inductee CSV through
``data/reader.py``, calls the plotting function to build the figure,
writes HTML.

No aggregation logic lives here.  All counting goes through
src/hofviz/analysis/aggregate.py.

Package Location: src/hofviz/reports/generators.py

Usage::

    from pathlib import Path
    from hofviz.reports.generators import ChartGenerator

    gen = ChartGenerator(
        data_path=Path("data/hall_of_fame_data.csv"),
        output_dir=Path("reports"),
    )
    gen.generate()
    # Writes:
    #   reports/inductees_by_gender.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd

from ..analysis.aggregate import filter_records, summarize
from ..data.reader import load_inductees
from ..plotting.diverging import (
    DEFAULT_INTERVAL_MS,
    DEFAULT_TRANSITION_MS,
    animation_options,
    plot_diverging,
)

log = logging.getLogger(__name__)

DEFAULT_FILENAME: str = 'inductees_by_gender.html'


class ChartGenerator:
    """
    Generates and saves the diverging inductee chart for one dataset.

    Responsibilities
    ----------------
    - Load the dataset once (lazily) through ``reader.py``.
    - Call the pure plotting function from the functional core.
    - Write the resulting Plotly figure to an HTML file.

    Args:
        data_path: Path to the inductee CSV.
        output_dir: Directory for report output (created on demand).
        metadata: Optional dict passed to the plotting function
            (``dataset_name``).  Defaults to the CSV file stem.
    """

    def __init__(
        self,
        data_path: Path,
        output_dir: Path,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.data_path = Path(data_path)
        self.output_dir = Path(output_dir)
        self.metadata = metadata
        self._records: Optional[pd.DataFrame] = None  # lazily loaded

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def generate(
        self,
        category: Optional[str] = None,
        filename: str = DEFAULT_FILENAME,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        transition_ms: int = DEFAULT_TRANSITION_MS,
        auto_play: bool = True,
    ) -> Path:
        """
        Build the chart and write it as a standalone HTML file.

        Args:
            category: View shown on load (``None``/``"all"`` for everything).
            filename: Output file name inside ``output_dir``.
            interval_ms: Walkthrough step duration.
            transition_ms: Bar transition duration.
            auto_play: Start the walkthrough as soon as the page loads
                (default).  Pass ``False`` for a static initial view.

        Returns:
            Path of the written HTML file.

        Raises:
            DatasetLoadError: If the dataset cannot be loaded.
            ValueError: If *category* is not present in the dataset.
        """
        records = self._get_records()

        fig = plot_diverging(
            df_inductees=records,
            metadata=self._get_metadata(),
            category=category,
            interval_ms=interval_ms,
            transition_ms=transition_ms,
        )

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / filename
        fig.write_html(
            str(out_path),
            auto_play=auto_play,
            animation_opts=animation_options(interval_ms, transition_ms),
        )
        log.info(
            f"Chart saved → {out_path}",
            extra={"path": str(out_path), "category": category or 'all'},
        )
        return out_path

    def summary(self, category: Optional[str] = None) -> Dict[str, Any]:
        """
        Gender totals for one category (or the whole dataset).

        Args:
            category: Category name, ``"all"`` or ``None``.

        Returns:
            Output of ``summarize`` on the filtered records.
        """
        return summarize(filter_records(self._get_records(), category))

    # ------------------------------------------------------------------
    # Lazy dataset / metadata resolution
    # ------------------------------------------------------------------

    def _get_records(self) -> pd.DataFrame:
        """Load and cache the inductee records."""
        if self._records is None:
            self._records = load_inductees(self.data_path)
        return self._records

    def _get_metadata(self) -> Dict[str, Any]:
        if not self.metadata:
            name = self.data_path.stem.replace('_', ' ').strip().title()
            self.metadata = {'dataset_name': name}
        return self.metadata


# ---------------------------------------------------------------------------
# Convenience entry-point
# ---------------------------------------------------------------------------

def generate_report(
    data_path: Path,
    output_dir: Path,
    category: Optional[str] = None,
    filename: str = DEFAULT_FILENAME,
) -> Path:
    """
    Convenience function: create a ``ChartGenerator`` and write one chart.

    Args:
        data_path: Path to the inductee CSV.
        output_dir: Output directory.
        category: Initial view (``None``/``"all"`` for everything).
        filename: Output file name.

    Returns:
        Path of the written HTML file.

    Example::

        from pathlib import Path
        from hofviz.reports.generators import generate_report

        generate_report(
            data_path=Path("data/hall_of_fame_data.csv"),
            output_dir=Path("reports"),
        )
    """
    gen = ChartGenerator(data_path=data_path, output_dir=output_dir)
    return gen.generate(category=category, filename=filename)
