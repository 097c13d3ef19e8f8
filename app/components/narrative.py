from __future__ import annotations

from typing import Optional, Sequence

import streamlit as st


def render_page_intro(title: str, subtitle: Optional[str] = None, accent: Optional[str] = None) -> None:
    """Page heading + one-line description."""
    style = f' style="color:{accent}"' if accent else ""
    st.markdown(
        f"""
<div class="page-intro">
  <div class="page-intro-title"{style}>{title}</div>
  {f'<div class="page-intro-subtitle">{subtitle}</div>' if subtitle else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_section_title(title: str, accent: Optional[str] = None) -> None:
    style = f' style="color:{accent}"' if accent else ""
    st.markdown(f'<div class="section-title"{style}>{title}</div>', unsafe_allow_html=True)


def render_chart_annotation(title: str, body: str) -> None:
    st.markdown(
        f"""
<div class="callout callout-annot">
  <div class="callout-title">{title}</div>
  <div class="callout-body">{body}</div>
</div>
        """,
        unsafe_allow_html=True,
    )


def render_quick_actions(actions: Sequence[str], key_prefix: str, title: str = "⚡ Quick Actions") -> Optional[str]:
    """
    Button grid. Returns the label of the clicked action, if any.
    The actions have no backend yet; callers only acknowledge the click.
    """
    st.markdown(f'<div class="section-title">{title}</div>', unsafe_allow_html=True)
    clicked = None
    cols = st.columns(len(actions))
    for c, label in zip(cols, actions):
        if c.button(label, key=f"{key_prefix}-{label}", use_container_width=True):
            clicked = label
    if clicked:
        st.info(f"{clicked}: not available in this demo yet.")
    return clicked


def notify_error(message: str, title: str = "Error") -> None:
    st.toast(f"**{title}**: {message}", icon="🚨")
    st.error(message)
