from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    use_mock: bool


NAV_ITEMS = [
    ("📊 WorkNight · Insights", "worknight_insights"),
    ("🛠️ WorkNight · Admin", "worknight_admin"),
    ("📈 TrustedLoans · Insights", "trustedloans_insights"),
    ("💼 TrustedLoans · Admin", "trustedloans_admin"),
]

PRODUCT_BY_VIEW = {
    "worknight_insights": "WorkNight",
    "worknight_admin": "WorkNight",
    "trustedloans_insights": "TrustedLoans",
    "trustedloans_admin": "TrustedLoans",
}


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🧭 Insight Dashboards")
        st.caption("Survey demographics + loan administration (sample data)")

        labels = [l for l, _ in NAV_ITEMS]
        default_label = st.session_state.get("nav_label", labels[0])
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label
        view = dict(NAV_ITEMS)[label]

        with st.expander("⚙️ Settings", expanded=False):
            use_mock = st.toggle(
                "Use mock data",
                value=st.session_state.get("use_mock", cfg.default_use_mock),
                help="When off, admin pages read the latest application from Supabase.",
            )
            st.session_state["use_mock"] = use_mock

            st.markdown("**Backend**")
            if cfg.has_backend:
                st.code(cfg.supabase_url, language="text")
            else:
                st.caption("SUPABASE_URL / SUPABASE_ANON_KEY not set; live reads will fail.")
    use_mock = st.session_state.get("use_mock", cfg.default_use_mock)

    return SidebarState(view=view, use_mock=use_mock)
