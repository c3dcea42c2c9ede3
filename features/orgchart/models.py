# features/orgchart/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Person:
    """One organization member, built from one input row."""
    id: str
    name: str
    title: str = ""
    department: str = ""
    sub_department: str = ""
    manager_name: str = ""
    image_url: str = ""
    details: str = ""


@dataclass
class HierarchyNode:
    """
    A Person plus its ordered children. Grouping nodes (department /
    sub-team buckets) carry no Person and are identified by `group_key`.
    """
    person: Optional[Person] = None
    children: List["HierarchyNode"] = field(default_factory=list)
    group_key: str = ""
    group_label: str = ""

    @property
    def key(self) -> str:
        return self.person.id if self.person is not None else self.group_key

    @property
    def label(self) -> str:
        return self.person.name if self.person is not None else self.group_label

    @property
    def is_group(self) -> bool:
        return self.person is None

    def walk(self):
        """Depth-first, pre-order, in child order."""
        yield self
        for ch in self.children:
            yield from ch.walk()
