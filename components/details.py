# components/details.py
from __future__ import annotations
import html
from typing import Callable, Optional

import streamlit as st

from features.orgchart.models import Person

# ---- Icon set ----
ICON_TITLE = "https://img.icons8.com/?size=100&id=109233&format=png&color=000000"
ICON_LOCATION = "https://img.icons8.com/?size=100&id=59830&format=png&color=000000"
ICON_MANAGER = "https://img.icons8.com/?size=100&id=99268&format=png&color=000000"

def _initials(name: str) -> str:
    parts = [p for p in name.strip().split() if p]
    if not parts:
        return "?"
    return (parts[0][:1] + (parts[1][:1] if len(parts) > 1 else "")).upper()

# ---- Tiny HTML helpers ----
def _row(icon_url: str, text: str) -> str:
    if not text:
        return ""
    icon = (
        f'<img src="{icon_url}" width="16" height="16" '
        f'style="opacity:.85;flex:0 0 16px;" />'
        if icon_url.startswith("http") else ""
    )
    return f"""
      <div style="display:flex;gap:8px;align-items:center;margin:6px 0;">
        {icon}
        <div style="font-size:13px;color:#213547;line-height:1.35">{html.escape(text)}</div>
      </div>
    """

def _avatar_html(person: Person, size: int = 96) -> str:
    url = person.image_url.strip()
    if url.startswith("http"):
        return f"""
        <div style="width:{size}px;height:{size}px;border-radius:14px;overflow:hidden;
                    background:#f4f6fa;border:1px solid #e7ecf3;">
          <img src="{html.escape(url)}" alt="avatar"
               style="width:100%;height:100%;object-fit:cover;display:block;" />
        </div>
        """
    initials = _initials(person.name)
    return f"""
    <svg width="{size}" height="{size}" xmlns="http://www.w3.org/2000/svg">
      <rect width="100%" height="100%" rx="14" fill="#e8eef7"/>
      <text x="50%" y="54%" dominant-baseline="middle" text-anchor="middle"
            font-size="{size // 3}" font-family="sans-serif" fill="#213547">{html.escape(initials)}</text>
    </svg>
    """

# ---- Public renderer ----
@st.dialog("Employee details")
def show_person_dialog(
    person: Person,
    toggle_label: Optional[str] = None,
    on_toggle: Optional[Callable[[], None]] = None,
) -> None:
    """
    Modal card for one person. When the person has reports, the dialog
    also carries the node's expand/collapse button.
    """
    left, right = st.columns([1, 2])
    with left:
        st.markdown(_avatar_html(person), unsafe_allow_html=True)
    with right:
        st.markdown(f"### {html.escape(person.name)}")
        st.markdown(
            _row(ICON_TITLE, person.title)
            + _row(ICON_LOCATION, person.department)
            + _row(ICON_MANAGER, f"Reports to {person.manager_name}" if person.manager_name else ""),
            unsafe_allow_html=True,
        )

    if person.details:
        st.markdown(f'<div class="org-bio">{html.escape(person.details)}</div>', unsafe_allow_html=True)
    else:
        st.caption("No additional details.")

    if toggle_label and on_toggle is not None:
        if st.button(toggle_label, width="stretch"):
            on_toggle()
            st.rerun()
