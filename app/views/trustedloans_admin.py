from __future__ import annotations

import streamlit as st

from components.metrics import Kpi, render_kpi_row
from components.narrative import notify_error, render_page_intro, render_quick_actions
from config import THEME, AppConfig
from data.models import LoanApplication, format_currency, format_submitted
from data.service import get_latest_loan_application


QUICK_ACTIONS = ["👥 Review Applications", "📄 Generate Reports", "🗄️ System Settings"]


def _render_application(app: LoanApplication) -> None:
    left, right = st.columns(2)
    with left:
        st.markdown(f"**{app.full_name}**")
        st.markdown(f"✉️ [{app.email}](mailto:{app.email})")
        st.markdown(f"📞 [{app.phone}](tel:{app.phone})")
        st.markdown(f"📍 {app.address}  \n{app.city_line}")
    with right:
        st.markdown(f"**Employer:** {app.employer_name}")
        st.markdown(f"**Annual Income:** {format_currency(app.annual_income)}")
        st.markdown(f"**Loan Amount:** {format_currency(app.loan_amount)}")
        st.markdown(f"**Submitted:** {format_submitted(app.created_at)}")


def render(cfg: AppConfig, use_mock: bool) -> None:
    accent = THEME["accent_primary"]
    render_page_intro("Loan Management Dashboard", "Monitor loan applications and analytics", accent=accent)

    render_kpi_row(
        [
            Kpi("👥 Active Applications", "342", "+12% from last month"),
            Kpi("💲 Total Loan Volume", "$2.4M", "This quarter"),
            Kpi("📈 Approval Rate", "76%", "Last 30 days"),
        ],
        accent=accent,
    )
    st.write("")

    latest = get_latest_loan_application(cfg, use_mock)
    if latest.error:
        notify_error(latest.error)

    with st.expander("👥 Latest Application", expanded=False):
        if latest.record is not None:
            _render_application(latest.record)
        else:
            st.caption("No applications found")
    st.caption(f"Data source: **{latest.source}**")

    render_quick_actions(QUICK_ACTIONS, key_prefix="trustedloans")
