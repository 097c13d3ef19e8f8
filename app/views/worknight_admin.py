from __future__ import annotations

import streamlit as st

from components.metrics import Kpi, render_kpi_row
from components.narrative import notify_error, render_page_intro, render_quick_actions
from config import THEME, AppConfig
from data.demographics import WORKNIGHT_AGE, estimate_average_age
from data.models import JobApplication, format_submitted
from data.service import database_status, get_latest_job_application


QUICK_ACTIONS = ["👥 Export User Data", "📄 Generate Report", "⚙️ System Settings"]


def _render_application(app: JobApplication) -> None:
    left, right = st.columns(2)
    with left:
        st.markdown(f"**{app.full_name}**")
        st.markdown(f"✉️ [{app.email}](mailto:{app.email})")
        st.markdown(f"📞 [{app.phone}](tel:{app.phone})")
        st.markdown(f"📍 {app.address}  \n{app.city_line}")
    with right:
        st.markdown(f"**University:** {app.university or '—'}")
        st.markdown(f"**Major:** {app.major or '—'}")
        st.markdown(f"**Graduation:** {app.graduation_date or '—'}")
        st.markdown(f"**Submitted:** {format_submitted(app.created_at)}")


def render(cfg: AppConfig, use_mock: bool) -> None:
    accent = THEME["accent_admin"]
    render_page_intro("Admin Dashboard", "Manage and monitor health demographic data", accent=accent)

    latest = get_latest_job_application(cfg, use_mock)
    if latest.error:
        notify_error(latest.error)
    status, status_note = database_status(latest)

    render_kpi_row(
        [
            Kpi("👥 Total Responses", "1,234", "+12% from last month"),
            Kpi("🧑 Average Age", f"{estimate_average_age(WORKNIGHT_AGE):.1f}", "Years old"),
            Kpi("🗄️ Database Status", status, status_note),
        ],
        accent=accent,
    )
    st.write("")

    with st.expander("👥 Latest Application", expanded=False):
        if latest.record is not None:
            _render_application(latest.record)
        else:
            st.caption("No applications found")

    render_quick_actions(QUICK_ACTIONS, key_prefix="worknight")
