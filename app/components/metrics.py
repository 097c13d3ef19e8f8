from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str
    delta: Optional[str] = None
    help: Optional[str] = None


def delta_class(delta: Optional[str]) -> str:
    d = str(delta or "").strip()
    if d.startswith(("+", "▲")):
        return "positive"
    if d.startswith(("-", "▼")):
        return "negative"
    return ""


def render_kpi_row(kpis: list[Kpi], accent: Optional[str] = None) -> None:
    cols = st.columns(len(kpis))
    for c, k in zip(cols, kpis):
        with c:
            delta_html = ""
            if k.delta:
                delta_html = f'<div class="metric-delta {delta_class(k.delta)}">{k.delta}</div>'
            label_style = f' style="color:{accent}"' if accent else ""

            st.markdown(
                f"""
<div class="metric-card" title="{k.help or ''}">
  <div class="metric-label"{label_style}>{k.label}</div>
  <div class="metric-value">{k.value}</div>
  {delta_html}
</div>
                """,
                unsafe_allow_html=True,
            )
