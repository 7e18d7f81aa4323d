"""
hofviz - Hall of Fame inductees by gender

A small Python package that turns an inductee CSV into an interactive
diverging bar chart, using the Functional Core, Imperative Shell
architecture.

Structure:
- data/     : Imperative Shell (CSV loading)
- analysis/ : Functional Core (aggregation and stacking)
- plotting/ : Plotly figure builders
- reports/  : HTML output orchestration
"""

__version__ = "0.1.0"
