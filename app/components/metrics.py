from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from config import THEME


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    help: Optional[str] = None


def render_kpi_row(kpis: list[Kpi]) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            st.markdown(
                f"""
<div class="metric-card" title="{html.escape(k.help or '')}">
  <div class="metric-label">{html.escape(k.label)}</div>
  <div class="metric-value">{html.escape(k.value)}</div>
</div>
                """,
                unsafe_allow_html=True,
            )


def create_plotly_theme() -> dict:
    """Shared Plotly styling: card surface, Inter, branded colorway, soft grids."""
    return {
        "font_family": "Inter, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif",
        "font_color": THEME["text_primary"],
        "paper_bgcolor": THEME["bg_card"],
        "plot_bgcolor": THEME["bg_card"],
        "colorway": [THEME["accent_primary"], THEME["navy_800"], "#6B7280"],
        "gridcolor": THEME["grid"],
        "axis_linecolor": THEME["border_color"],
        "title_font": {"color": THEME["navy_900"], "size": 16},
    }


def apply_plotly_theme(fig: go.Figure, x_title: str, y_title: str) -> go.Figure:
    theme = create_plotly_theme()
    fig.update_layout(
        margin=dict(l=10, r=10, t=44, b=10),
        font=dict(family=theme["font_family"], color=theme["font_color"]),
        paper_bgcolor=theme["paper_bgcolor"],
        plot_bgcolor=theme["plot_bgcolor"],
        colorway=theme["colorway"],
        title_font=theme["title_font"],
    )
    fig.update_xaxes(
        title_text=x_title,
        gridcolor=theme["gridcolor"],
        zeroline=False,
        linecolor=theme["axis_linecolor"],
        tickfont=dict(color=THEME["text_secondary"]),
    )
    fig.update_yaxes(
        title_text=y_title,
        gridcolor=theme["gridcolor"],
        zeroline=False,
        linecolor=theme["axis_linecolor"],
        tickfont=dict(color=THEME["text_secondary"]),
    )
    return fig


def bar_chart(
    df: pd.DataFrame,
    x: str,
    y: str,
    title: str = "",
    y_format: Optional[str] = None,  # "currency" | None
):
    fig = px.bar(df, x=x, y=y, title=title)
    fig = apply_plotly_theme(fig, x_title="", y_title="")
    if y_format == "currency":
        fig.update_yaxes(tickprefix="$", separatethousands=True)
    st.plotly_chart(fig, use_container_width=True)
