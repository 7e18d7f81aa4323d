"""
Diverging Inductee Bar Chart (Functional Core)

Pure function – no file I/O, no side effects.
Input: inductee DataFrame (``category``, ``class_year``, ``gender``) +
       optional metadata dict.
Output: plotly.graph_objects.Figure with one animation frame per view.

Package Location: src/hofviz/plotting/diverging.py

Diverging Layout Rule:
    Male bars grow upward from zero.  Female and mixed bars are stacked
    below zero: the stack intervals from ``stack_negative`` are magnitudes
    and are sign-flipped here, so female spans ``[0, -female]`` and mixed
    spans ``[-female, -(female + mixed)]``.  All bars are floating bars
    (``base=``) drawn with ``barmode='overlay'``.

Fixed Axes Rule:
    The x range (every year in the full dataset) and the y range
    (``value_extent`` of the full dataset) are computed once, so switching
    category never rescales the chart.

Frames:
    One ``go.Frame`` per view, named after it: every category in order of
    first appearance, then ``"all"``.  Each frame carries its three bar
    traces plus the header title and the annotation box for that view.

    * Category dropdown – jumps straight to a frame.
    * Walkthrough – the "Play walkthrough" button animates through the
      category frames at ``interval_ms`` per step and ends on ``"all"``.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from ..analysis.aggregate import (
    ALL_CATEGORIES,
    GENDERS,
    aggregate,
    filter_records,
    is_all_categories,
    list_categories,
    stack_negative,
    stack_positive,
    summarize,
    value_extent,
)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_COLORS: Dict[str, str] = {
    'male':   '#000080',
    'female': '#d94f70',
    'mixed':  '#5a4e7a',
}

# Lowest point of the y-axis even when no negative bar reaches it
_Y_FLOOR: int = -10

# Label every second year on the x-axis
_X_TICK_STEP: int = 2

# Fraction of each year slot left empty between bars
_BAR_GAP: float = 0.3

DEFAULT_INTERVAL_MS: int = 3000
DEFAULT_TRANSITION_MS: int = 1000

_EXPLORE_HEADER = 'Explore the data by selecting a category and hovering over the bars:'


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_diverging(
    df_inductees: pd.DataFrame,
    metadata: Optional[Dict[str, Any]] = None,
    category: Optional[str] = None,
    interval_ms: int = DEFAULT_INTERVAL_MS,
    transition_ms: int = DEFAULT_TRANSITION_MS,
) -> go.Figure:
    """
    Build the diverging male / female+mixed bar chart.

    Args:
        df_inductees: Inductee DataFrame with columns::

            category   : str
            class_year : int
            gender     : str ("male" | "female" | "mixed")

        metadata: Optional dict; ``dataset_name`` is used in the title.
        category: View shown when the figure first renders.  ``None`` or
            ``"all"`` shows every inductee.
        interval_ms: Time each category stays on screen during the
            walkthrough.  Default 3000.
        transition_ms: Bar transition duration.  Default 1000.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If ``df_inductees`` is missing required columns, or
            *category* does not occur in the data.
    """
    metadata = metadata or {}
    title = _build_title(metadata, suffix='Inductees by Gender')

    categories = list_categories(df_inductees)
    initial_view = ALL_CATEGORIES if is_all_categories(category) else category
    if initial_view != ALL_CATEGORIES and initial_view not in categories:
        raise ValueError(
            f"Unknown category '{category}'. Available: {categories}"
        )

    # Axes are fixed from the unfiltered data
    df_all = aggregate(df_inductees)
    years: List[int] = df_all['year'].tolist()
    y_low, y_high = value_extent(df_all, floor=_Y_FLOOR)

    # -----------------------------------------------------------------------
    # One frame per view; "all" last so the walkthrough ends on it
    # -----------------------------------------------------------------------
    views = categories + [ALL_CATEGORIES]
    frames = [
        go.Frame(
            name=view,
            data=_view_traces(df_inductees, view),
            layout=_view_layout(df_inductees, view, title),
        )
        for view in views
    ]
    initial = frames[views.index(initial_view)]

    fig = go.Figure(data=initial.data, frames=frames)
    fig.update_layout(initial.layout.to_plotly_json())

    # -----------------------------------------------------------------------
    # Controls: category dropdown + walkthrough buttons
    # -----------------------------------------------------------------------
    dropdown_views = [ALL_CATEGORIES] + categories
    fig.update_layout(
        updatemenus=[
            _category_dropdown(dropdown_views, initial_view, transition_ms),
            _walkthrough_buttons(views, interval_ms, transition_ms),
        ],
    )

    # -----------------------------------------------------------------------
    # Layout – y-axis ticks show absolute values
    # -----------------------------------------------------------------------
    tick_vals = _abs_ticks(y_low, y_high)

    xaxis: Dict[str, Any] = dict(
        title='Class Year',
        tickmode='linear',
        dtick=_X_TICK_STEP,
        tickformat='d',
        tickfont=dict(size=12),
        showgrid=False,
    )
    if years:
        xaxis.update(tick0=years[0], range=[years[0] - 0.5, years[-1] + 0.5])

    fig.update_layout(
        xaxis=xaxis,
        yaxis=dict(
            title='Inductees',
            range=[y_low, y_high],
            tickmode='array',
            tickvals=tick_vals,
            ticktext=[str(abs(v)) for v in tick_vals],
            zeroline=True,
            zerolinecolor='black',
            zerolinewidth=1,
            fixedrange=True,
        ),
        barmode='overlay',  # floating bars use 'base'; 'stack' would add offsets
        bargap=_BAR_GAP,
        showlegend=True,
        legend=dict(
            orientation='v',
            x=1.02,
            y=1.0,
            xanchor='left',
        ),
        hovermode='closest',
        template='plotly_white',
        margin=dict(t=110, r=260, b=70, l=60),
        width=1180,
        height=520,
    )

    return fig


def animation_options(
    interval_ms: int = DEFAULT_INTERVAL_MS,
    transition_ms: int = DEFAULT_TRANSITION_MS,
) -> Dict[str, Any]:
    """
    Plotly ``animate`` options shared by the walkthrough button and
    ``write_html(auto_play=True, animation_opts=...)``.

    Args:
        interval_ms: Time each frame is held.
        transition_ms: Bar transition duration.

    Returns:
        Options dict for ``Plotly.animate``.
    """
    return {
        'frame': {'duration': interval_ms, 'redraw': True},
        'transition': {'duration': transition_ms, 'easing': 'cubic-in-out'},
        'fromcurrent': False,
        'mode': 'immediate',
    }


def annotation_text(
    summary: Dict[str, Any],
    category: Optional[str],
    sep: str = '<br>',
) -> str:
    """
    Render the gender summary for one view.

    Args:
        summary: Output of ``summarize``.
        category: View name; ``None``/``"all"`` is shown as ``All``.
        sep: Line separator (``'<br>'`` for the figure, ``'\\n'`` for text).

    Returns:
        Multi-line summary string.
    """
    label = 'All' if is_all_categories(category) else category
    lines = [
        f"In the {label} category:",
        f"Number of men inducted: {summary['total_male']}",
        f"Number of women inducted: {summary['total_female']}",
        f"Percentage of women inductees: {summary['percent_female']:.2f}%",
    ]
    return sep.join(lines)


# ---------------------------------------------------------------------------
# Per-view builders
# ---------------------------------------------------------------------------

def _view_traces(df_inductees: pd.DataFrame, view: str) -> List[go.Bar]:
    """
    Build the three bar traces (male, female, mixed) for one view.

    Trace order is fixed so frames animate trace-by-trace.  A view with no
    inductees still yields three (empty) traces.

    Args:
        df_inductees: Full inductee DataFrame.
        view: Category name or ``"all"``.

    Returns:
        List of ``go.Bar`` in ``GENDERS`` order.
    """
    df_agg = aggregate(df_inductees, view)
    positive = stack_positive(df_agg)
    negative = stack_negative(df_agg)

    male_custom = df_agg['male'].to_numpy()
    neg_custom = np.column_stack(
        [df_agg['female'].to_numpy(), df_agg['mixed'].to_numpy()]
    ) if not df_agg.empty else np.empty((0, 2), dtype=np.int64)

    traces: List[go.Bar] = []
    for key in GENDERS:
        if key in positive:
            stack = positive[key]
            base = stack['lower']
            height = stack['upper'] - stack['lower']
            customdata = male_custom
            hovertemplate = (
                "Year: %{x}<br>"
                "Male: %{customdata}<extra></extra>"
            )
        else:
            # Mirror magnitudes below the axis
            stack = negative[key]
            base = -stack['lower']
            height = -(stack['upper'] - stack['lower'])
            customdata = neg_custom
            hovertemplate = (
                "Year: %{x}<br>"
                "Female: %{customdata[0]}<br>"
                "Mixed: %{customdata[1]}<extra></extra>"
            )

        traces.append(go.Bar(
            x=stack['year'],
            y=height,
            base=base,
            name=key.capitalize(),
            marker_color=_COLORS[key],
            legendgroup=key,
            customdata=customdata,
            hovertemplate=hovertemplate,
        ))

    return traces


def _view_layout(df_inductees: pd.DataFrame, view: str, title: str) -> go.Layout:
    """
    Title header and annotation box for one view.

    Args:
        df_inductees: Full inductee DataFrame.
        view: Category name or ``"all"``.
        title: Figure title (shown above the category header).

    Returns:
        ``go.Layout`` holding only ``title`` and ``annotations``.
    """
    summary = summarize(filter_records(df_inductees, view))
    header = _EXPLORE_HEADER if view == ALL_CATEGORIES else f"Category: {view}"

    return go.Layout(
        title=dict(
            text=f"{title}<br><sup>{header}</sup>",
            x=0.5,
            xanchor='center',
        ),
        annotations=[dict(
            text=annotation_text(summary, view),
            x=1.02,
            y=0.35,
            xref='paper',
            yref='paper',
            xanchor='left',
            yanchor='top',
            align='left',
            showarrow=False,
            bgcolor='white',
            bordercolor='black',
            borderwidth=1,
            borderpad=8,
            font=dict(size=12),
        )],
    )


# ---------------------------------------------------------------------------
# Controls
# ---------------------------------------------------------------------------

def _category_dropdown(
    views: List[str],
    active: str,
    transition_ms: int,
) -> Dict[str, Any]:
    """
    Dropdown menu with one entry per view; selecting animates to its frame.

    Args:
        views: ``"all"`` followed by every category.
        active: View selected when the figure loads.
        transition_ms: Bar transition duration.

    Returns:
        ``updatemenus`` entry.
    """
    buttons = [
        {
            'label': view,
            'method': 'animate',
            'args': [
                [view],
                {
                    'frame': {'duration': 0, 'redraw': True},
                    'transition': {'duration': transition_ms},
                    'mode': 'immediate',
                },
            ],
        }
        for view in views
    ]
    return {
        'type': 'dropdown',
        'buttons': buttons,
        'active': views.index(active),
        'direction': 'down',
        'showactive': True,
        'x': 0.0,
        'xanchor': 'left',
        'y': 1.22,
        'yanchor': 'top',
    }


def _walkthrough_buttons(
    views: List[str],
    interval_ms: int,
    transition_ms: int,
) -> Dict[str, Any]:
    """
    Play / pause buttons for the timed category walkthrough.

    Args:
        views: Frame names in walkthrough order (categories, then ``"all"``).
        interval_ms: Time each category is held.
        transition_ms: Bar transition duration.

    Returns:
        ``updatemenus`` entry.
    """
    return {
        'type': 'buttons',
        'direction': 'left',
        'showactive': False,
        'x': 0.25,
        'xanchor': 'left',
        'y': 1.22,
        'yanchor': 'top',
        'buttons': [
            {
                'label': 'Play walkthrough',
                'method': 'animate',
                'args': [views, animation_options(interval_ms, transition_ms)],
            },
            {
                'label': 'Pause',
                'method': 'animate',
                'args': [
                    [None],
                    {
                        'frame': {'duration': 0, 'redraw': False},
                        'transition': {'duration': 0},
                        'mode': 'immediate',
                    },
                ],
            },
        ],
    }


# ---------------------------------------------------------------------------
# Shared utilities
# ---------------------------------------------------------------------------

def _abs_ticks(low: float, high: float, target: int = 8) -> List[int]:
    """
    Integer tick positions spanning ``[low, high]`` on a 1/2/5 step.

    Always includes 0 so the diverging baseline is labelled.

    Args:
        low: Axis minimum (negative).
        high: Axis maximum.
        target: Approximate number of ticks.

    Returns:
        Sorted list of tick values.
    """
    span = max(high - low, 1.0)
    raw = span / target
    magnitude = 10 ** math.floor(math.log10(raw)) if raw >= 1 else 1
    step = next(
        (m * magnitude for m in (1, 2, 5, 10) if m * magnitude >= raw),
        10 * magnitude,
    )
    step = max(int(step), 1)

    start = int(math.ceil(low / step)) * step
    stop = int(math.floor(high / step)) * step
    ticks = list(range(start, stop + 1, step))
    if 0 not in ticks:
        ticks = sorted(ticks + [0])
    return ticks


def _build_title(metadata: Dict[str, Any], suffix: str = '') -> str:
    """
    Construct a plot title from metadata.

    Uses ``dataset_name``; falls back to ``"Hall of Fame"``.

    Args:
        metadata: Dict with an optional ``dataset_name`` key.
        suffix: String appended after the dataset name.

    Returns:
        Formatted title string.
    """
    name = str(metadata.get('dataset_name') or 'Hall of Fame').strip()
    return f'{name} – {suffix}' if suffix else name
