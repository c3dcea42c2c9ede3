# components/org_chart_view.py
from __future__ import annotations
import html
from typing import Callable, Dict, List, Optional

import streamlit as st
from streamlit_echarts import JsCode, st_echarts

from features.orgchart.controller import OrgChartController
from features.orgchart.renderer import (
    SYNTHETIC_ROOT_KEY, ZOOM_STEP, VisualNode, find_visual, step_zoom,
    to_echarts_option, to_echarts_tree,
)
from utils.logger import get_logger

logger = get_logger("view")

ZOOM_KEY = "org_zoom"
LAST_CLICK_KEY = "org_last_click"

# key + timestamp so that clicking the same node twice still registers
_CLICK_EVENT = "function(params) { return ((params.data && params.data.key) ?? '') + '|' + Date.now(); }"

_LABEL_FORMATTER = JsCode("function(params) { return (params.data && params.data.display) || params.name; }").js_code


def parse_click(value: Optional[str]) -> Optional[str]:
    """
    '<key>|<ts>' -> key. Keys may themselves contain '|'; an unnamed
    person has the empty key.
    """
    if not value or "|" not in value:
        return None
    return value.rsplit("|", 1)[0]


# ---------- Toolbar ----------

def render_toolbar(controller: OrgChartController, on_refresh: Callable[[], None]) -> None:
    ss = st.session_state
    ss.setdefault(ZOOM_KEY, 1.0)
    c1, c2, c3, c4, c5, c6 = st.columns(6)
    with c1:
        if st.button("⟳ Refresh", width="stretch"):
            on_refresh()
    with c2:
        if st.button("⊞ Expand all", width="stretch"):
            controller.on_expand_all()
    with c3:
        if st.button("⊟ Collapse all", width="stretch"):
            controller.on_collapse_all()
    with c4:
        if st.button("－ Zoom out", width="stretch"):
            ss[ZOOM_KEY] = step_zoom(ss[ZOOM_KEY], -ZOOM_STEP)
    with c5:
        if st.button("⟲ Reset view", width="stretch"):
            ss[ZOOM_KEY] = 1.0
    with c6:
        if st.button("＋ Zoom in", width="stretch"):
            ss[ZOOM_KEY] = step_zoom(ss[ZOOM_KEY], ZOOM_STEP)


# ---------- Legend ----------

def legend_html(colors: Dict[str, str]) -> str:
    pills = [
        f'<span class="org-pill"><span class="swatch" style="background:{html.escape(col)};"></span>{html.escape(cls)}</span>'
        for cls, col in colors.items()
    ]
    return f'<div class="org-legend">{"".join(pills)}</div>'


def render_legend(colors: Dict[str, str]) -> None:
    if colors:
        st.markdown(legend_html(colors), unsafe_allow_html=True)


# ---------- Chart ----------

def dispatch_click(visual: List[VisualNode], key: str) -> None:
    vn = find_visual(visual, key)
    if vn is None:
        logger.debug("Click on unknown node %r", key)
        return
    if vn.on_click is not None:
        vn.on_click()
    elif vn.on_toggle is not None:
        # grouping nodes have no detail card; a click opens/closes them
        vn.on_toggle()
        st.rerun()


def render_org_chart(controller: OrgChartController, height: int = 720) -> None:
    visual = controller.visual
    if not visual:
        st.info("No organizational data to display")
        return

    zoom = st.session_state.get(ZOOM_KEY, 1.0)
    tree = to_echarts_tree(visual)
    render_legend(tree["colors"])
    clicked = st_echarts(
        options=to_echarts_option(tree, zoom=zoom, label_formatter=_LABEL_FORMATTER),
        events={"click": _CLICK_EVENT},
        height=f"{height}px",
        key="org_chart",
    )

    if clicked and clicked != st.session_state.get(LAST_CLICK_KEY):
        st.session_state[LAST_CLICK_KEY] = clicked
        key = parse_click(clicked)
        if key is not None and key != SYNTHETIC_ROOT_KEY:
            dispatch_click(visual, key)
