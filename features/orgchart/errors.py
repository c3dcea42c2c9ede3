# features/orgchart/errors.py
from __future__ import annotations
from typing import List


class OrgChartError(Exception):
    """Base for org chart failures the page may want to surface."""


class HierarchyCycleError(OrgChartError):
    def __init__(self, path: List[str]):
        self.path = list(path)
        super().__init__("Cycle detected in manager chain: " + " -> ".join(self.path))


class DuplicatePersonError(OrgChartError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate person name: {name!r}")
