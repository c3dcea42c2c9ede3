# utils/layout.py
from pathlib import Path
import streamlit as st

STYLES_PATH = Path(__file__).resolve().parents[1] / "asset" / "styles.css"

def read_css(css_path: Path = STYLES_PATH) -> str:
    """CSS text without a leading BOM; a missing file just means no custom styling."""
    try:
        return css_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        return ""

def apply_global_style() -> None:
    """Inject global CSS from asset/styles.css."""
    css = read_css()
    if css:
        st.markdown(f"<style>{css}</style>", unsafe_allow_html=True)

def render_header(title: str, subtitle: str = "") -> None:
    sub = f'<div class="org-subtitle">{subtitle}</div>' if subtitle else ""
    st.markdown(
        f"""
        <div class="org-header">
          <h2 style="margin:0;">🏢 {title}</h2>
          {sub}
        </div>
        """,
        unsafe_allow_html=True,
    )
