# features/orgchart/controller.py
from __future__ import annotations
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence

from features.orgchart.builder import build_hierarchy
from features.orgchart.classifier import RoleRule
from features.orgchart.models import HierarchyNode, Person
from features.orgchart.normalizer import normalize_rows
from features.orgchart.renderer import VisualNode, render_forest
from features.orgchart.state import ExpansionState, expandable_keys
from utils.logger import get_logger

logger = get_logger("controller")


class OrgChartController:
    """
    Owns one record set, its forest and the ExpansionState, and exposes
    the hooks the UI calls. Every hook re-renders the whole forest.
    """

    def __init__(
        self,
        persons: Sequence[Person],
        state: Optional[ExpansionState] = None,
        mode: str = "tree",
        strict: bool = False,
        rules: Optional[Sequence[RoleRule]] = None,
        detail_view: Optional[Callable[[Person], None]] = None,
    ):
        self.persons: List[Person] = list(persons)
        self.state = state if state is not None else ExpansionState()
        self.mode = mode
        self.rules = rules
        self.detail_view = detail_view
        self.forest: List[HierarchyNode] = build_hierarchy(self.persons, mode=mode, strict=strict)
        self.visual: List[VisualNode] = []
        self.render()

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]], **kwargs) -> "OrgChartController":
        return cls(normalize_rows(rows), **kwargs)

    def render(self) -> List[VisualNode]:
        self.visual = render_forest(
            self.forest, self.state, self.rules,
            on_toggle=self.on_expand_toggle,
            on_show_detail=self.on_show_detail,
        )
        return self.visual

    # ---------- hooks ----------

    def on_expand_toggle(self, key: str) -> List[VisualNode]:
        now = self.state.toggle(key)
        logger.debug("Toggled %r -> %s", key, "expanded" if now else "collapsed")
        return self.render()

    def on_show_detail(self, person: Person) -> None:
        if self.detail_view is not None:
            self.detail_view(person)

    def on_expand_all(self) -> List[VisualNode]:
        self.state.expand_all(expandable_keys(self.forest))
        return self.render()

    def on_collapse_all(self) -> List[VisualNode]:
        self.state.clear()
        return self.render()
