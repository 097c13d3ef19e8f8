from __future__ import annotations

from typing import Optional, Sequence

import plotly.graph_objects as go
import streamlit as st

from config import THEME
from data.demographics import AGE_RADAR_SERIES, AgeBucket, EthnicityGroup, Slice


CHART_HEIGHT = 300


def create_plotly_theme() -> dict:
    """
    Shared Plotly styling:
    - white card surface
    - system font stack
    - soft grids, horizontal legend above the plot
    """
    return {
        "font_family": "Inter, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif",
        "font_color": THEME["text_primary"],
        "paper_bgcolor": THEME["bg_card"],
        "plot_bgcolor": THEME["bg_card"],
        "gridcolor": THEME["grid"],
        "axis_linecolor": THEME["border_color"],
        "legend": {
            "orientation": "h",
            "yanchor": "bottom",
            "y": 1.02,
            "xanchor": "left",
            "x": 0,
            "font": {"color": THEME["text_secondary"]},
        },
    }


def apply_plotly_theme(fig: go.Figure, title: str = "", x_title: Optional[str] = None, y_title: Optional[str] = None) -> go.Figure:
    theme = create_plotly_theme()
    fig.update_layout(
        title_text=title,
        height=CHART_HEIGHT,
        margin=dict(l=10, r=10, t=44 if title else 16, b=10),
        font=dict(family=theme["font_family"], color=theme["font_color"]),
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        legend=theme["legend"],
    )
    if x_title is not None:
        fig.update_xaxes(title_text=x_title, gridcolor=theme["gridcolor"], zeroline=False, linecolor=theme["axis_linecolor"])
    if y_title is not None:
        fig.update_yaxes(title_text=y_title, gridcolor=theme["gridcolor"], zeroline=False, linecolor=theme["axis_linecolor"])
    return fig


def _cycle(colors: Sequence[str], n: int) -> list[str]:
    return [colors[i % len(colors)] for i in range(n)]


def pie_chart(
    slices: Sequence[Slice],
    colors: Sequence[str],
    title: str = "",
    label_mode: str = "percent",  # "percent" | "label+percent"
    show_legend: bool = False,
) -> go.Figure:
    fig = go.Figure(
        go.Pie(
            labels=[s.name for s in slices],
            values=[s.value for s in slices],
            marker=dict(colors=_cycle(colors, len(slices))),
            texttemplate="%{percent:.0%}" if label_mode == "percent" else "%{label} %{percent:.0%}",
            textposition="inside" if label_mode == "percent" else "outside",
            insidetextfont=dict(color="white"),
            sort=False,
            direction="clockwise",
        )
    )
    fig.update_layout(showlegend=show_legend)
    return apply_plotly_theme(fig, title=title)


def bar_chart(slices: Sequence[Slice], colors: Sequence[str], title: str = "", series_name: str = "value") -> go.Figure:
    fig = go.Figure(
        go.Bar(
            x=[s.name for s in slices],
            y=[s.value for s in slices],
            name=series_name,
            marker=dict(color=_cycle(colors, len(slices))),
        )
    )
    fig.update_layout(showlegend=True)
    return apply_plotly_theme(fig, title=title, x_title="", y_title="")


def radar_chart(buckets: Sequence[AgeBucket], title: str = "") -> go.Figure:
    labels = [b.bucket for b in buckets]
    fig = go.Figure()
    for name, attr, color in AGE_RADAR_SERIES:
        values = [getattr(b, attr) for b in buckets]
        # close the polygon
        fig.add_trace(
            go.Scatterpolar(
                r=values + values[:1],
                theta=labels + labels[:1],
                name=name,
                fill="toself",
                line=dict(color=color),
                opacity=0.6,
            )
        )
    fig.update_layout(polar=dict(radialaxis=dict(visible=True)), showlegend=True)
    return apply_plotly_theme(fig, title=title)


def bubble_chart(groups: Sequence[EthnicityGroup], colors: Sequence[str], title: str = "", size_range: tuple[int, int] = (10, 40)) -> go.Figure:
    """Distribution (x) against YoY growth (y); bubble area follows representation ratio."""
    ratios = [g.ratio for g in groups]
    lo, hi = (min(ratios), max(ratios)) if ratios else (0.0, 0.0)
    span = hi - lo
    sizes = [
        size_range[0] + ((r - lo) / span if span else 0.5) * (size_range[1] - size_range[0])
        for r in ratios
    ]
    fig = go.Figure(
        go.Scatter(
            x=[g.value for g in groups],
            y=[g.growth for g in groups],
            mode="markers",
            name="Ethnicity Distribution",
            text=[g.name for g in groups],
            marker=dict(size=sizes, color=_cycle(colors, len(groups)), line=dict(width=0)),
            hovertemplate="<b>%{text}</b><br>Distribution: %{x}%<br>Growth: %{y}%<extra></extra>",
        )
    )
    fig.update_layout(showlegend=True)
    fig.update_xaxes(ticksuffix="%")
    fig.update_yaxes(ticksuffix="%")
    return apply_plotly_theme(fig, title=title, x_title="Distribution (%)", y_title="YoY Growth (%)")


def render_chart(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True)
