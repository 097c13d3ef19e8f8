from __future__ import annotations

import streamlit as st

from components.charts import pie_chart, render_chart
from components.narrative import render_page_intro, render_section_title
from components.tables import render_raw_data_panel
from config import THEME, AppConfig
from data.demographics import WORKNIGHT_AGE, WORKNIGHT_COLORS, WORKNIGHT_GENDER, distribution_caption
from data.service import get_processing_log


def render(cfg: AppConfig, use_mock: bool) -> None:
    accent = THEME["accent_secondary"]
    render_page_intro(
        "Demographic Insights",
        "Understand the distribution of application demographics.",
        accent=accent,
    )

    c1, c2 = st.columns(2)
    with c1:
        render_section_title("Gender Distribution", accent=accent)
        render_chart(pie_chart(WORKNIGHT_GENDER, WORKNIGHT_COLORS))
        st.caption(distribution_caption(WORKNIGHT_GENDER))
    with c2:
        render_section_title("Age Distribution", accent=accent)
        render_chart(pie_chart(WORKNIGHT_AGE, WORKNIGHT_COLORS))
        st.caption(distribution_caption(WORKNIGHT_AGE))

    render_section_title("More Application Tools", accent=accent)
    log = get_processing_log()
    render_raw_data_panel("Backend Processing Data", log.df, file_name="processing_log.csv")
