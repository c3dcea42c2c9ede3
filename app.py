# app.py  (streamlit run app.py)
import streamlit as st

from components.details import show_person_dialog
from components.org_chart_view import render_org_chart, render_toolbar
from config.settings import load_settings
from features.orgchart.classifier import load_role_rules
from features.orgchart.controller import OrgChartController
from features.orgchart.errors import OrgChartError
from features.orgchart.models import Person
from features.orgchart.renderer import find_visual
from features.orgchart.state import ExpansionState
from services.sheet_loader import SheetLoadError, load_rows
from utils.layout import apply_global_style, render_header
from utils.logger import logger
from utils.page_config import set_common_page_config

set_common_page_config("Org Chart")
apply_global_style()

settings = load_settings()

# ---------- Session state ----------
ss = st.session_state
if "org_expansion" not in ss:
    ss["org_expansion"] = ExpansionState()

# ---------- Load data ----------
@st.cache_data(ttl=settings.cache_ttl, show_spinner=False)
def load_sheet_rows(settings_key: tuple) -> list:
    return load_rows(settings)

@st.cache_resource(show_spinner=False)
def role_rules(path: str):
    return load_role_rules(path or None)

def refresh() -> None:
    load_sheet_rows.clear()
    st.rerun()

render_header("Org Chart", "Demo data" if settings.demo_mode else "")

try:
    with st.spinner("Loading organization data…"):
        rows = load_sheet_rows((settings.sheet_url, settings.demo_mode))
except SheetLoadError as e:
    logger.error("Error loading data: %s", e)
    st.error(str(e))
    if st.button("Retry"):
        refresh()
    st.stop()

# ---------- Build ----------
controller: OrgChartController

def open_detail(person: Person) -> None:
    vn = find_visual(controller.visual, person.id)
    show_person_dialog(
        person,
        toggle_label=vn.toggle_label if vn else None,
        on_toggle=vn.on_toggle if vn else None,
    )

try:
    controller = OrgChartController.from_rows(
        rows,
        state=ss["org_expansion"],
        mode=settings.grouping_mode,
        strict=settings.strict_names,
        rules=role_rules(settings.role_rules_path),
        detail_view=open_detail,
    )
except OrgChartError as e:
    logger.error("Could not build org chart: %s", e)
    st.error(str(e))
    st.stop()

# ---------- Render ----------
render_toolbar(controller, on_refresh=refresh)
render_org_chart(controller, height=settings.chart_height)
