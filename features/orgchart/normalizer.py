# features/orgchart/normalizer.py
from __future__ import annotations
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

import pandas as pd

from features.orgchart.models import Person

UNKNOWN_NAME = "Unknown"

# Header spellings tried in order: canonical, lowercase, then synonyms.
FIELD_ALIASES: dict[str, Tuple[str, ...]] = {
    "name":           ("Name", "name"),
    "title":          ("Title", "title", "Role", "role"),
    "department":     ("Department", "department", "Dept", "dept"),
    "sub_department": ("SubDepartment", "subDepartment", "Sub Department", "Team", "team"),
    "manager_name":   ("Manager", "manager", "ReportsTo", "reportsTo", "Reports To"),
    "image_url":      ("Image", "image", "ImageUrl", "imageUrl", "Photo", "photo"),
    "details":        ("Details", "details", "Bio", "bio", "FunFacts", "funFacts", "Fun Facts"),
}


def _clean(v: Any) -> str:
    if v is None:
        return ""
    try:
        if pd.isna(v):
            return ""
    except (TypeError, ValueError):
        pass
    return str(v).strip()


def _first(row: Mapping[str, Any], keys: Sequence[str]) -> str:
    for k in keys:
        s = _clean(row.get(k))
        if s:
            return s
    return ""


def normalize_row(row: Mapping[str, Any]) -> Person:
    """Map one raw row (column -> value) to a Person. Never raises for missing fields."""
    name = _first(row, FIELD_ALIASES["name"])
    return Person(
        id=name,
        name=name or UNKNOWN_NAME,
        title=_first(row, FIELD_ALIASES["title"]),
        department=_first(row, FIELD_ALIASES["department"]),
        sub_department=_first(row, FIELD_ALIASES["sub_department"]),
        manager_name=_first(row, FIELD_ALIASES["manager_name"]),
        image_url=_first(row, FIELD_ALIASES["image_url"]),
        details=_first(row, FIELD_ALIASES["details"]),
    )


def normalize_rows(rows: Iterable[Mapping[str, Any]]) -> List[Person]:
    return [normalize_row(r) for r in rows]
