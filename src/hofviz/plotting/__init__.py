"""
hofviz Plotting Package (Functional Core)

Pure plotting functions only – no file I/O, no side effects.
Every public figure builder accepts DataFrames / dicts and returns a
``plotly.graph_objects.Figure``.

Modules:
    diverging: Diverging bar chart of inductees per class year (male up,
               female/mixed down) with category dropdown, timed
               walkthrough, tooltips, legend and summary annotation.
"""

from .diverging import animation_options, annotation_text, plot_diverging

__all__ = [
    'animation_options',
    'annotation_text',
    'plot_diverging',
]
