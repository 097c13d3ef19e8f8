from __future__ import annotations

import pandas as pd
import streamlit as st


def frame_to_csv(df: pd.DataFrame) -> str:
    return df.to_csv(index=False, lineterminator="\n")


def render_raw_data_panel(
    title: str,
    df: pd.DataFrame,
    file_name: str = "data.csv",
    trigger_label: str = "📤 View Raw Data",
) -> None:
    """Collapsed-by-default panel holding a table and its CSV download."""
    with st.expander(trigger_label, expanded=False):
        left, right = st.columns([3, 1])
        left.markdown(f"**{title}**")
        right.download_button(
            "⬇️ Download CSV",
            data=frame_to_csv(df),
            file_name=file_name,
            mime="text/csv",
            use_container_width=True,
        )
        st.dataframe(df, hide_index=True, use_container_width=True)
