"""
hofviz Reports Package (Imperative Shell)

Orchestrates dataset loading, plot generation, and HTML output.
No aggregation logic lives here; this package calls the functional core
(src/hofviz/analysis/) and plotting (src/hofviz/plotting/) via the data
reader (src/hofviz/data/reader.py).

Modules:
    generators: ChartGenerator class and generate_report() convenience
                function for producing the HTML chart.
"""

from .generators import (
    ChartGenerator,
    generate_report,
)

__all__ = [
    'ChartGenerator',
    'generate_report',
]
