# features/orgchart/state.py
from __future__ import annotations
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set

from features.orgchart.models import HierarchyNode


class ExpansionState:
    """
    Identifiers of nodes currently shown expanded. Starts empty; only
    explicit toggles and the bulk actions change it.
    """

    def __init__(self, expanded: Optional[Iterable[str]] = None):
        self._expanded: Set[str] = set(expanded or ())

    def __contains__(self, key: object) -> bool:
        return key in self._expanded

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._expanded))

    def __len__(self) -> int:
        return len(self._expanded)

    def __repr__(self) -> str:
        return f"ExpansionState({sorted(self._expanded)!r})"

    def is_expanded(self, key: str) -> bool:
        return key in self._expanded

    def toggle(self, key: str) -> bool:
        """Flip one identifier; returns the new expanded flag."""
        if key in self._expanded:
            self._expanded.discard(key)
            return False
        self._expanded.add(key)
        return True

    def expand_all(self, keys: Iterable[str]) -> None:
        self._expanded.update(keys)

    def clear(self) -> None:
        self._expanded.clear()

    def snapshot(self) -> FrozenSet[str]:
        return frozenset(self._expanded)


def expandable_keys(forest: List[HierarchyNode]) -> List[str]:
    """Keys of every node in the forest that has children, pre-order."""
    return [n.key for root in forest for n in root.walk() if n.children]
