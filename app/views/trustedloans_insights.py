from __future__ import annotations

import streamlit as st

from components.charts import bar_chart, bubble_chart, pie_chart, radar_chart, render_chart
from components.metrics import Kpi, render_kpi_row
from components.narrative import render_chart_annotation, render_page_intro, render_section_title
from config import THEME, AppConfig
from data.demographics import (
    TRUSTEDLOANS_AGE,
    TRUSTEDLOANS_COLORS,
    TRUSTEDLOANS_ETHNICITY,
    TRUSTEDLOANS_GENDER,
    TRUSTEDLOANS_MARITAL_STATUS,
    calculate_age_stats,
    calculate_ethnicity_stats,
    subgroup_frame,
)


def render(cfg: AppConfig, use_mock: bool) -> None:
    accent = THEME["accent_primary"]
    render_page_intro("Anonymous Demographic Insights", accent=accent)

    age = calculate_age_stats(TRUSTEDLOANS_AGE)
    eth = calculate_ethnicity_stats(TRUSTEDLOANS_ETHNICITY)

    render_kpi_row(
        [
            Kpi("Largest age group", age.largest_group or "—", f"{age.largest_group_share*100:.0f}% of applicants"),
            Kpi("Average age", f"{age.average_age:.1f}", "Estimated from bucket midpoints"),
            Kpi("Full-time share", f"{age.full_time_ratio*100:.0f}%", "Of employed applicants"),
            Kpi("Fastest growing", eth.fastest_growing or "—", f"Avg growth {eth.average_growth:.1f}% YoY"),
        ],
        accent=accent,
    )

    c1, c2 = st.columns(2)
    with c1:
        render_section_title("Age Distribution", accent=accent)
        render_chart(radar_chart(TRUSTEDLOANS_AGE))
    with c2:
        render_section_title("Gender Distribution", accent=accent)
        render_chart(bar_chart(TRUSTEDLOANS_GENDER, TRUSTEDLOANS_COLORS["gender"]))

    c3, c4 = st.columns(2)
    with c3:
        render_section_title("Marital Status", accent=accent)
        render_chart(
            pie_chart(
                TRUSTEDLOANS_MARITAL_STATUS,
                TRUSTEDLOANS_COLORS["marital_status"],
                label_mode="label+percent",
                show_legend=True,
            )
        )
    with c4:
        render_section_title("Ethnicity", accent=accent)
        render_chart(bubble_chart(TRUSTEDLOANS_ETHNICITY, TRUSTEDLOANS_COLORS["ethnicity"]))

    if eth.largest_subgroup:
        render_chart_annotation(
            title="What to notice",
            body=(
                f"{eth.largest_group} applicants are the largest group, while {eth.fastest_growing} "
                f"applicants grow fastest. The largest single subgroup is {eth.largest_subgroup} "
                f"({eth.largest_subgroup_parent})."
            ),
        )
    with st.expander("Ethnicity subgroups"):
        st.dataframe(subgroup_frame(TRUSTEDLOANS_ETHNICITY), hide_index=True, use_container_width=True)
