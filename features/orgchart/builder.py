# features/orgchart/builder.py
from __future__ import annotations
from typing import Dict, Iterable, List, Sequence

from config.settings import GROUPING_MODES
from features.orgchart.errors import DuplicatePersonError, HierarchyCycleError
from features.orgchart.models import HierarchyNode, Person
from utils.logger import get_logger

logger = get_logger("builder")

EXECUTIVE_LABEL = "Executive"


# ---------- Lookup ----------

def index_people(persons: Iterable[Person], strict: bool = False) -> Dict[str, Person]:
    """
    id -> Person in first-seen order. A repeated id keeps its first position
    but the later row wins (silent merge), unless strict=True.
    """
    lookup: Dict[str, Person] = {}
    for p in persons:
        if p.id in lookup:
            if strict:
                raise DuplicatePersonError(p.id)
            logger.warning("Duplicate name %r: later row replaces earlier one", p.id)
        lookup[p.id] = p
    return lookup


def _resolves(p: Person, lookup: Dict[str, object]) -> bool:
    return bool(p.manager_name) and p.manager_name in lookup


def check_acyclic(lookup: Dict[str, Person]) -> None:
    """Follow every manager chain once; raise HierarchyCycleError on a loop."""
    safe: set[str] = set()
    for start in lookup:
        path: List[str] = []
        on_path: set[str] = set()
        cur = start
        while cur not in safe:
            if cur in on_path:
                cycle = path[path.index(cur):] + [cur]
                logger.error("Manager cycle: %s", " -> ".join(cycle))
                raise HierarchyCycleError(cycle)
            path.append(cur)
            on_path.add(cur)
            p = lookup[cur]
            if not _resolves(p, lookup):
                break
            cur = p.manager_name
        safe.update(path)


# ---------- Strict tree ----------

def build_forest(persons: Sequence[Person], strict: bool = False) -> List[HierarchyNode]:
    """
    Roots of the reporting tree, in input order. Children keep input order.
    A manager reference that does not resolve makes the person a root.
    """
    lookup = index_people(persons, strict=strict)
    check_acyclic(lookup)

    nodes = {pid: HierarchyNode(person=p) for pid, p in lookup.items()}
    roots: List[HierarchyNode] = []
    unresolved = 0
    for node in nodes.values():
        mgr = node.person.manager_name
        if mgr and mgr in nodes:
            nodes[mgr].children.append(node)
            continue
        if mgr:
            unresolved += 1
            logger.debug("Manager %r of %r not found; treating as root", mgr, node.key)
        roots.append(node)

    if unresolved:
        logger.info("%d person(s) with unresolved manager promoted to root", unresolved)
    logger.debug("Built forest: %d people, %d roots", len(nodes), len(roots))
    return roots


# ---------- Sub-department split ----------

def _split_node(node: HierarchyNode) -> None:
    parent_sub = node.person.sub_department if node.person is not None else ""
    regrouped: List[HierarchyNode] = []
    buckets: Dict[str, HierarchyNode] = {}
    for ch in node.children:
        _split_node(ch)
        sub = ch.person.sub_department if ch.person is not None else ""
        if not sub or sub == parent_sub:
            regrouped.append(ch)
            continue
        grp = buckets.get(sub)
        if grp is None:
            grp = HierarchyNode(group_key=f"team:{node.key}/{sub}", group_label=sub)
            buckets[sub] = grp
            regrouped.append(grp)
        grp.children.append(ch)
    node.children = regrouped


def split_subdepartments(forest: List[HierarchyNode]) -> List[HierarchyNode]:
    """Bucket each node's direct reports by sub-department (in place)."""
    for root in forest:
        _split_node(root)
    return forest


# ---------- Department grid ----------

def _is_head(p: Person, lookup: Dict[str, Person]) -> bool:
    t = p.title.lower()
    return "head" in t or ("manager" in t and not _resolves(p, lookup))


def build_department_groups(persons: Sequence[Person], strict: bool = False) -> List[HierarchyNode]:
    """
    One group node per department (first-seen order). Heads sit directly
    under their department; everyone else hangs under the in-department head
    named as their manager, or under the department itself.
    """
    lookup = index_people(persons, strict=strict)

    members: Dict[str, List[Person]] = {}
    for p in lookup.values():
        members.setdefault(p.department, []).append(p)

    groups: List[HierarchyNode] = []
    for dept, people in members.items():
        group = HierarchyNode(group_key=f"dept:{dept}", group_label=dept or EXECUTIVE_LABEL)
        heads = {p.id: HierarchyNode(person=p) for p in people if _is_head(p, lookup)}
        for p in people:
            if p.id in heads:
                group.children.append(heads[p.id])
            elif p.manager_name in heads:
                heads[p.manager_name].children.append(HierarchyNode(person=p))
            else:
                group.children.append(HierarchyNode(person=p))
        groups.append(group)
    return groups


# ---------- Entry point ----------

def build_hierarchy(persons: Sequence[Person], mode: str = "tree", strict: bool = False) -> List[HierarchyNode]:
    if mode == "tree":
        return build_forest(persons, strict=strict)
    if mode == "subdepartment":
        return split_subdepartments(build_forest(persons, strict=strict))
    if mode == "department":
        return build_department_groups(persons, strict=strict)
    raise ValueError(f"Unknown grouping mode {mode!r}; expected one of {GROUPING_MODES}")
