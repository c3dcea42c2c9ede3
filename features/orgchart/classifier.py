# features/orgchart/classifier.py
from __future__ import annotations
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from features.orgchart.models import Person

DEFAULT_RULES_PATH = Path(__file__).resolve().parents[2] / "config" / "role_rules.json"


@dataclass(frozen=True)
class RoleCategory:
    name: str
    css_class: str
    icon: str


@dataclass(frozen=True)
class RoleRule:
    category: RoleCategory
    title_keywords: Tuple[str, ...] = ()
    departments: Tuple[str, ...] = ()

    @property
    def is_default(self) -> bool:
        return not self.title_keywords and not self.departments

    def matches(self, title_lower: str, department: str) -> bool:
        if any(k in title_lower for k in self.title_keywords):
            return True
        return department in self.departments


def _rule_from_dict(d: Dict[str, Any]) -> RoleRule:
    if not isinstance(d, dict) or not str(d.get("category") or "").strip():
        raise ValueError(f"Role rule needs a 'category': {d!r}")
    name = str(d["category"]).strip()
    return RoleRule(
        category=RoleCategory(
            name=name,
            css_class=str(d.get("css_class") or name.lower()),
            icon=str(d.get("icon") or ""),
        ),
        title_keywords=tuple(str(k).lower() for k in d.get("title_keywords") or ()),
        departments=tuple(str(x) for x in d.get("departments") or ()),
    )


def parse_role_rules(raw: Sequence[Dict[str, Any]]) -> List[RoleRule]:
    """
    Validate an ordered rule table. The final entry must be the catch-all
    (no keywords, no departments) so classification is total.
    """
    if not isinstance(raw, list) or not raw:
        raise ValueError("Role rule table must be a non-empty list")
    rules = [_rule_from_dict(d) for d in raw]
    if not rules[-1].is_default:
        raise ValueError("Last role rule must be a default (no title_keywords / departments)")
    return rules


def load_role_rules(path: Optional[Union[str, Path]] = None) -> List[RoleRule]:
    p = Path(path) if path else DEFAULT_RULES_PATH
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Role rule file {p} is not valid JSON: {e}") from e
    return parse_role_rules(raw)


_DEFAULT_RULES: Optional[List[RoleRule]] = None


def default_rules() -> List[RoleRule]:
    global _DEFAULT_RULES
    if _DEFAULT_RULES is None:
        _DEFAULT_RULES = load_role_rules()
    return _DEFAULT_RULES


def classify(person: Person, rules: Optional[Sequence[RoleRule]] = None) -> RoleCategory:
    """First matching rule wins; order in the table is the tie-break."""
    rules = rules or default_rules()
    title = person.title.lower()
    for rule in rules:
        if rule.is_default or rule.matches(title, person.department):
            return rule.category
    return rules[-1].category
