# features/orgchart/renderer.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from features.orgchart.classifier import RoleRule, classify
from features.orgchart.models import HierarchyNode, Person
from features.orgchart.state import ExpansionState

EXPAND_LABEL = "▼ Expand"
COLLAPSE_LABEL = "▲ Collapse"
LOCATION_PREFIX = "📍 "
GROUP_CLASS = "group"
DEPT_ICON = "🏢"
TEAM_ICON = "👥"
SYNTHETIC_ROOT_KEY = "__root__"

ToggleHook = Callable[[str], None]
DetailHook = Callable[[Person], None]


@dataclass
class VisualNode:
    key: str
    label: str
    subtitle: str = ""
    location: str = ""
    css_class: str = ""
    icon: str = ""
    person: Optional[Person] = None
    toggle_label: Optional[str] = None      # None => no affordance (leaf)
    children: List["VisualNode"] = field(default_factory=list)
    children_hidden: bool = False
    on_toggle: Optional[Callable[[], None]] = field(default=None, compare=False, repr=False)
    on_click: Optional[Callable[[], None]] = field(default=None, compare=False, repr=False)

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def visible_children(self) -> List["VisualNode"]:
        return [] if self.children_hidden else self.children


def render(
    node: HierarchyNode,
    state: ExpansionState,
    rules: Optional[Sequence[RoleRule]] = None,
    on_toggle: Optional[ToggleHook] = None,
    on_show_detail: Optional[DetailHook] = None,
) -> VisualNode:
    """
    Materialize one hierarchy node (and, recursively, its children in
    order). Child containers are always built; they are flagged hidden
    when the node is not in `state`.
    """
    key = node.key
    if node.person is not None:
        p = node.person
        role = classify(p, rules)
        vn = VisualNode(
            key=key,
            label=p.name,
            subtitle=p.title,
            location=f"{LOCATION_PREFIX}{p.department}" if p.department else "",
            css_class=role.css_class,
            icon=role.icon,
            person=p,
        )
        if on_show_detail is not None:
            vn.on_click = lambda p=p: on_show_detail(p)
    else:
        vn = VisualNode(
            key=key,
            label=node.label,
            subtitle=f"{len(node.children)} member(s)",
            css_class=GROUP_CLASS,
            icon=DEPT_ICON if key.startswith("dept:") else TEAM_ICON,
        )

    if node.children:
        expanded = key in state
        vn.toggle_label = COLLAPSE_LABEL if expanded else EXPAND_LABEL
        vn.children_hidden = not expanded
        vn.children = [render(ch, state, rules, on_toggle, on_show_detail) for ch in node.children]
        if on_toggle is not None:
            vn.on_toggle = lambda k=key: on_toggle(k)
    return vn


def render_forest(
    forest: List[HierarchyNode],
    state: ExpansionState,
    rules: Optional[Sequence[RoleRule]] = None,
    on_toggle: Optional[ToggleHook] = None,
    on_show_detail: Optional[DetailHook] = None,
) -> List[VisualNode]:
    return [render(n, state, rules, on_toggle, on_show_detail) for n in forest]


def find_visual(forest: List[VisualNode], key: str) -> Optional[VisualNode]:
    stack = list(reversed(forest))
    while stack:
        vn = stack.pop()
        if vn.key == key:
            return vn
        stack.extend(reversed(vn.children))
    return None


# ---------- ECharts conversion ----------

CLASS_COLORS: Dict[str, str] = {
    "ceo": "#f59e0b",
    "coo": "#8b5cf6",
    "department-head": "#2563eb",
    "manager": "#16a34a",
    "team-member": "#6b7280",
    GROUP_CLASS: "#0ea5e9",
}

_PALETTE = [
    "#2563eb", "#16a34a", "#f59e0b", "#ef4444", "#6b7280", "#8b5cf6",
    "#059669", "#f97316", "#dc2626", "#0ea5e9", "#22c55e", "#a855f7",
]


def assign_colors(classes: List[str]) -> Dict[str, str]:
    """Known role classes keep their colour; anything else takes the next palette slot."""
    out: Dict[str, str] = {}
    extra = 0
    for c in classes:
        if not c or c in out:
            continue
        if c in CLASS_COLORS:
            out[c] = CLASS_COLORS[c]
        else:
            out[c] = _PALETTE[extra % len(_PALETTE)]
            extra += 1
    return out


def _collect_classes(forest: List[VisualNode], acc: List[str]) -> None:
    for vn in forest:
        acc.append(vn.css_class)
        _collect_classes(vn.visible_children, acc)


def _label_text(vn: VisualNode) -> str:
    lines = [f"{vn.icon} {vn.label}".strip()]
    if vn.subtitle:
        lines.append(vn.subtitle)
    if vn.location:
        lines.append(vn.location)
    if vn.toggle_label:
        lines.append(vn.toggle_label)
    return "\n".join(lines)


def _to_chart_node(vn: VisualNode, colors: Dict[str, str]) -> dict:
    d = {
        "name": vn.label,
        "value": vn.subtitle,
        "key": vn.key,
        "cssClass": vn.css_class,
        "expandable": vn.has_children,
        "display": _label_text(vn),
        "children": [_to_chart_node(ch, colors) for ch in vn.visible_children],
    }
    col = colors.get(vn.css_class)
    if col:
        d["itemStyle"] = {"color": "#FFFFFF", "borderColor": col, "borderWidth": 2}
    return d


def to_echarts_tree(forest: List[VisualNode]) -> Dict[str, dict]:
    """Chart data for the forest plus the class->colour legend."""
    acc: List[str] = []
    _collect_classes(forest, acc)
    colors = assign_colors(acc)
    roots = [_to_chart_node(vn, colors) for vn in forest]
    if len(roots) == 1:
        return {"data": roots[0], "colors": colors}
    synthetic = {
        "name": "",
        "key": SYNTHETIC_ROOT_KEY,
        "symbolSize": 0,
        "label": {"show": False},
        "itemStyle": {"opacity": 0},
        "lineStyle": {"opacity": 0},
        "children": roots,
    }
    return {"data": synthetic, "colors": colors}


def to_echarts_option(tree: Dict[str, dict], zoom: float = 1.0, label_formatter: str = "{b}") -> dict:
    """
    Tree series option for the output of to_echarts_tree. Person text lives
    in each node's "display" field and is never used as a template; pass a
    JS formatter returning params.data.display to show it.
    """
    return {
        "tooltip": {
            "trigger": "item",
            "triggerOn": "mousemove",
            "formatter": "{b}: {c}",
            "borderColor": "#E0E7EF", "backgroundColor": "#FFFFFF",
            "textStyle": {"color": "#213547"},
            "extraCssText": "box-shadow: 0 6px 16px rgba(0,0,0,0.12);",
        },
        "series": [{
            "type": "tree",
            "data": [tree["data"]],
            "layout": "orthogonal",
            "orient": "vertical",
            "top": "8%",
            "left": "5%",
            "bottom": "12%",
            "right": "5%",
            "roam": True,
            "zoom": zoom,
            # expand/collapse is driven from Python, not by the chart
            "expandAndCollapse": False,
            "initialTreeDepth": -1,
            "animationDuration": 300,
            "animationDurationUpdate": 300,
            "emphasis": {
                "focus": "descendant",
                "itemStyle": {"borderColor": "#0072FF", "borderWidth": 1},
                "label": {"fontWeight": "bold"},
            },
            "edgeShape": "polyline",
            "edgeForkPosition": "50%",
            "symbol": "rect",
            "symbolSize": [170, 64],
            "itemStyle": {
                "borderColor": "#E0E7EF",
                "borderWidth": 1,
                "color": "#FFFFFF",
                "shadowBlur": 3,
                "shadowColor": "rgba(0,0,0,0.06)",
            },
            "label": {
                "show": True,
                "formatter": label_formatter,
                "position": "inside",
                "verticalAlign": "middle",
                "align": "center",
                "overflow": "break",
                "fontSize": 11,
                "lineHeight": 14,
                "color": "#213547",
            },
            "lineStyle": {"color": "#AAB4C3", "curveness": 0.0},
            "leaves": {"label": {"position": "inside", "align": "center"}},
        }],
    }


# ---------- Zoom ----------

ZOOM_MIN, ZOOM_MAX, ZOOM_STEP = 0.5, 2.0, 0.1


def step_zoom(current: float, delta: float) -> float:
    return round(max(ZOOM_MIN, min(ZOOM_MAX, current + delta)), 2)
