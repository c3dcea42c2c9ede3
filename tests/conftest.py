from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the app modules importable when running tests from the repo root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from features.orgchart.demo_data import DEMO_ROWS  # noqa: E402
from features.orgchart.normalizer import normalize_rows  # noqa: E402


@pytest.fixture
def demo_rows() -> list[dict[str, str]]:
    return [dict(r) for r in DEMO_ROWS]


@pytest.fixture
def demo_persons(demo_rows):
    return normalize_rows(demo_rows)


@pytest.fixture
def scenario_rows() -> list[dict[str, str]]:
    return [
        {"name": "A", "title": "CEO"},
        {"name": "B", "title": "COO", "manager": "A"},
        {"name": "C", "title": "Manager", "department": "Marketing", "manager": "B"},
    ]
