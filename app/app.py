"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

import streamlit as st  # noqa: E402

from components.header import render_header  # noqa: E402
from components.sidebar import PRODUCT_BY_VIEW, render_sidebar  # noqa: E402
from components.styles import APP_TITLE, apply_theme  # noqa: E402
from config import configure_logging, get_config  # noqa: E402

from views import trustedloans_admin, trustedloans_insights, worknight_admin, worknight_insights  # noqa: E402


VIEWS = {
    "worknight_insights": worknight_insights,
    "worknight_admin": worknight_admin,
    "trustedloans_insights": trustedloans_insights,
    "trustedloans_admin": trustedloans_admin,
}


def main() -> None:
    apply_theme()
    cfg = get_config()
    configure_logging(cfg)
    state = render_sidebar(cfg)

    render_header(
        app_name=APP_TITLE,
        subtitle=PRODUCT_BY_VIEW.get(state.view, ""),
        right_pill=f"Data: {'Mock' if state.use_mock else 'Supabase'}",
    )

    # Routing only
    view = VIEWS.get(state.view)
    if view is None:
        st.error("Unknown view")
        return
    view.render(cfg, state.use_mock)


if __name__ == "__main__":
    main()
